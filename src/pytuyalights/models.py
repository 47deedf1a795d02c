"""Data models for Tuya cloud requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Any

from pytuyalights.const import BIZ_TYPE, COUNTRY_CODE_US, LOGIN_FROM
from pytuyalights.exceptions import DeserializingError, InvalidParameterError


__all__ = [
    "AccessToken",
    "Credentials",
    "HsbColor",
    "Light",
    "LightStatus",
    "PowerState",
    "SessionTokens",
    "find_lights",
]


@dataclass(frozen=True)
class Credentials:
    """Login credentials for the Tuya cloud.

    The country code, business type and origin tag are fixed by the vendor
    protocol and are not configurable.

    Attributes:
        username: Account user name (usually an email address).
        password: Account password.
    """

    username: str
    password: str = field(repr=False)
    country_code: int = field(default=COUNTRY_CODE_US, init=False)
    biz_type: str = field(default=BIZ_TYPE, init=False)
    origin: str = field(default=LOGIN_FROM, init=False)

    def to_form(self) -> dict[str, str | int]:
        """Return the form-encoded login body."""
        return {
            "userName": self.username,
            "password": self.password,
            "countryCode": self.country_code,
            "bizType": self.biz_type,
            "from": self.origin,
        }


@dataclass(frozen=True)
class AccessToken:
    """Non-empty access token string sent with every skill request.

    Attributes:
        value: The raw token string.
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        """Reject empty tokens."""
        if not isinstance(self.value, str) or not self.value:
            msg = "Access token must be a non-empty string"
            raise InvalidParameterError(msg, parameter_name="access_token")

    def __str__(self) -> str:
        """Return the raw token string."""
        return self.value

    def write_to(self, writer: IO[str]) -> None:
        """Write the raw token, without any framing, to a text stream."""
        writer.write(self.value)

    @classmethod
    def read_from(cls, reader: IO[str]) -> AccessToken:
        """Read a raw token previously written with write_to().

        Raises:
            InvalidParameterError: If the stream is empty.
        """
        return cls(reader.read())


@dataclass(frozen=True)
class SessionTokens:
    """Tokens returned by a successful login.

    Only the access token is ever used. The refresh token and expiry are kept
    for callers but sessions are never refreshed automatically.

    Attributes:
        access_token: Token sent with every skill request.
        refresh_token: Optional refresh token.
        token_type: Optional token type (e.g. "bearer").
        expires_in: Optional token lifetime in seconds.
    """

    access_token: AccessToken
    refresh_token: str | None = field(default=None, repr=False)
    token_type: str | None = None
    expires_in: int | None = None

    @classmethod
    def from_access_token(cls, token: AccessToken | str) -> SessionTokens:
        """Build a token set from a previously persisted access token."""
        if not isinstance(token, AccessToken):
            token = AccessToken(token)
        return cls(access_token=token)


class PowerState(Enum):
    """Light power state and its wire value."""

    ON = "1"
    OFF = "0"

    @classmethod
    def from_bool(cls, on: bool) -> PowerState:
        """Return ON for True and OFF for False."""
        return cls.ON if on else cls.OFF


@dataclass(frozen=True)
class HsbColor:
    """Color in the vendor's hue/saturation/brightness space.

    Attributes:
        hue: Hue in degrees (0-360).
        saturation: Saturation (0-100).
        brightness: Brightness (0-100).
    """

    hue: int
    saturation: int
    brightness: int

    def to_dict(self) -> dict[str, int]:
        """Return the wire representation of the color."""
        return {
            "hue": self.hue,
            "saturation": self.saturation,
            "brightness": self.brightness,
        }


@dataclass
class LightStatus:
    """Light state snapshot reported by the cloud.

    All fields are optional as the cloud may not report all values.

    Attributes:
        brightness: Brightness as reported by the cloud.
        color_mode: Active color mode ("white" or "colour").
        online: Whether the light is reachable by the cloud.
        state: Power state as reported by the cloud.
        color_temp: Color temperature in vendor units.
        raw_data: Original API data for debugging.
    """

    brightness: str | int | None = None
    color_mode: str | None = None
    online: bool | None = None
    state: str | bool | None = None
    color_temp: int | None = None
    raw_data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_on(self) -> bool:
        """Check if the light reports itself as powered on."""
        return str(self.state).lower() == "true"


@dataclass(frozen=True)
class Light:
    """Handle for a light discovered on the account.

    Two lights are equal when their device identifiers are equal. Names are not
    unique and only serve user-facing lookup.

    Attributes:
        id: Opaque vendor-assigned device identifier.
        name: Human-readable device name.
        status: State snapshot from discovery, if the cloud reported one.
    """

    id: str
    name: str = field(compare=False)
    status: LightStatus | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, str]:
        """Return the persistable form of the light."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Light:
        """Restore a light saved with to_dict().

        Raises:
            DeserializingError: If ``id`` or ``name`` is missing or not a string.
        """
        if not isinstance(data, dict):
            msg = f"Invalid light record: {data!r}"
            raise DeserializingError(msg)

        device_id = data.get("id")
        name = data.get("name")
        if not isinstance(device_id, str) or not isinstance(name, str):
            msg = f"Invalid light record: {data!r}"
            raise DeserializingError(msg)
        return cls(id=device_id, name=name)


def find_lights(lights: list[Light], name: str) -> list[Light]:
    """Return every light with the given name, in order."""
    return [light for light in lights if light.name == name]
