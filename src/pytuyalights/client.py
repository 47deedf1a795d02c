"""High-level client for controlling Tuya cloud lights.

This module provides the session facade, composing the command encoder, the
low-level API and the response parsers into one call per light operation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pytuyalights.api import TuyaAPI
from pytuyalights.auth import AuthenticationHandler
from pytuyalights.commands import (
    Command,
    Discover,
    QueryDevice,
    SetBrightness,
    SetColor,
    SetColorTemperature,
    TurnOnOff,
)
from pytuyalights.const import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    COLOR_BRIGHTNESS_MAX,
    COLOR_BRIGHTNESS_MIN,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    HUE_MAX,
    HUE_MIN,
    SATURATION_MAX,
    SATURATION_MIN,
)
from pytuyalights.converters import brightness_to_percent, kelvin_to_vendor_units
from pytuyalights.exceptions import InvalidParameterError
from pytuyalights.models import AccessToken, HsbColor, Light, LightStatus, PowerState, SessionTokens
from pytuyalights.parsers import parse_acknowledgement, parse_discovery_response, parse_query_response
from pytuyalights.serializers import encode_command


if TYPE_CHECKING:
    from types import TracebackType

    from aiohttp import ClientSession

_LOGGER = logging.getLogger(__name__)


def _validate_range(parameter_name: str, value: int, minimum: int, maximum: int | None = None) -> None:
    """Raise InvalidParameterError if value is outside [minimum, maximum]."""
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{parameter_name} must be an integer, got {value!r}"
        raise InvalidParameterError(msg, parameter_name=parameter_name, value=value)

    if value < minimum or (maximum is not None and value > maximum):
        bounds = f"{minimum}-{maximum}" if maximum is not None else f">= {minimum}"
        msg = f"{parameter_name} must be {bounds}, got {value}"
        raise InvalidParameterError(msg, parameter_name=parameter_name, value=value)


class TuyaLightsClient:
    """Session facade for Tuya cloud lights.

    The client is either created with credentials, in which case it logs in
    when entering the context manager (or on ``authenticate()``), or with a
    previously persisted access token, in which case it is authenticated
    immediately. Tokens are set once and never change afterwards, so a single
    client can serve concurrent commands.

    Sessions are never refreshed: once the access token expires, every call
    fails with an API error and a new client must be created.

    Example:
        Log in and control a light:

        ```python
        from pytuyalights import HsbColor, TuyaLightsClient

        async with TuyaLightsClient(username="user@example.com", password="password") as client:
            lights = await client.discover()
            await client.turn_on(lights[0])
            await client.set_color(lights[0], HsbColor(hue=120, saturation=100, brightness=80))
        ```

        Reuse a persisted token with an application-managed session:

        ```python
        async with ClientSession() as session:
            client = TuyaLightsClient.from_token(load_access_token("access_token"), session=session)
            await client.set_brightness(light, 128)
        ```
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        *,
        access_token: AccessToken | str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        session: ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            username: Account user name. Required unless access_token is given.
            password: Account password. Required unless access_token is given.
            access_token: Previously obtained access token. The token is not
                verified; an invalid token surfaces on the first call.
            base_url: Base URL for the API. Defaults to the Tuya US cloud.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            timeout: Total timeout in seconds for a single request.

        Raises:
            InvalidParameterError: If neither credentials nor a token are given,
                or the token is empty.
        """
        self._api = TuyaAPI(session=session, base_url=base_url, timeout=timeout)
        self._auth_handler: AuthenticationHandler | None = None
        self._tokens: SessionTokens | None = None
        self._auth_lock = asyncio.Lock()

        if access_token is not None:
            self._tokens = SessionTokens.from_access_token(access_token)
        elif username is not None and password is not None:
            self._auth_handler = AuthenticationHandler(username, password, api=self._api)
        else:
            msg = "Either username and password or an access token is required"
            raise InvalidParameterError(msg)

    @classmethod
    def from_token(cls, token: AccessToken | str, **kwargs: Any) -> TuyaLightsClient:
        """Create an authenticated client from a previously persisted token."""
        return cls(access_token=token, **kwargs)

    @property
    def api(self) -> TuyaAPI:
        """Get the underlying API client."""
        return self._api

    @property
    def tokens(self) -> SessionTokens | None:
        """Get the session tokens, or None before authentication."""
        return self._tokens

    def is_authenticated(self) -> bool:
        """Check if the client holds session tokens."""
        return self._tokens is not None

    def dump_token(self) -> AccessToken:
        """Return the access token for persistence.

        Raises:
            RuntimeError: If the client is not authenticated.
        """
        return self._require_tokens().access_token

    async def __aenter__(self) -> TuyaLightsClient:
        """Enter the context manager.

        Creates session if needed and authenticates with the API.

        Returns:
            Self for use in async with statements.
        """
        await self._api.__aenter__()
        try:
            await self.authenticate()
        except Exception:
            await self._api.close()
            raise
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the session if the client created it."""
        await self._api.__aexit__(exc_type, exc_val, exc_tb)

    async def authenticate(self) -> SessionTokens:
        """Log in if the client does not hold tokens yet.

        Returns:
            The session tokens. Existing tokens are returned unchanged.

        Raises:
            AuthenticationError: If the cloud rejects the credentials.
            EncodingError: If the login body cannot be decoded.
            DeserializingError: If the login body is not recognized.
            TransportError: If the HTTP request fails.
        """
        async with self._auth_lock:
            if self._tokens is not None:
                _LOGGER.debug("Skipping authentication - tokens already exist")
                return self._tokens

            # __init__ guarantees a handler whenever no token was given
            assert self._auth_handler is not None
            self._tokens = await self._auth_handler.authenticate()
            return self._tokens

    def _require_tokens(self) -> SessionTokens:
        if self._tokens is None:
            msg = "Client not authenticated. Use 'async with' or call authenticate()."
            raise RuntimeError(msg)
        return self._tokens

    async def _send(self, command: Command) -> Any:
        """Encode a command, send it and return the parsed JSON response."""
        request = encode_command(command, self._require_tokens().access_token)
        return await self._api.skill(request)

    async def _send_state_command(self, command: Command, light: Light) -> None:
        data = await self._send(command)
        parse_acknowledgement(data, device_id=light.id)
        _LOGGER.debug("Light %s acknowledged %s", light.id, type(command).__name__)

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    async def discover(self) -> list[Light]:
        """Get all lights registered on the account.

        Returns:
            Lights in the order reported by the cloud. Other device kinds are
            skipped.

        Raises:
            ApiError: If the cloud reports a failure.
            DeserializingError: If the response is malformed.
            TransportError: If the HTTP request fails.
        """
        data = await self._send(Discover())
        return parse_discovery_response(data)

    async def query_device(self, light: Light) -> LightStatus:
        """Get the current state of a light.

        Raises:
            DeviceError: If the cloud reports a failure for the light.
            DeserializingError: If the response is malformed.
            TransportError: If the HTTP request fails.
        """
        data = await self._send(QueryDevice(device_id=light.id))
        return parse_query_response(data, device_id=light.id)

    # -------------------------------------------------------------------------
    # Control
    # -------------------------------------------------------------------------

    async def set_state(self, light: Light, state: PowerState | bool) -> None:
        """Switch a light on or off.

        Args:
            light: Light to control.
            state: PowerState, or a bool where True means on.

        Raises:
            DeviceError: If the command is not acknowledged.
        """
        if isinstance(state, bool):
            state = PowerState.from_bool(state)
        await self._send_state_command(TurnOnOff(device_id=light.id, state=state), light)

    async def turn_on(self, light: Light) -> None:
        """Turn a light on."""
        await self.set_state(light, PowerState.ON)

    async def turn_off(self, light: Light) -> None:
        """Turn a light off."""
        await self.set_state(light, PowerState.OFF)

    async def set_brightness(self, light: Light, brightness: int) -> None:
        """Set light brightness.

        Args:
            light: Light to control.
            brightness: Brightness level (0-255), sent to the cloud as percent.

        Raises:
            InvalidParameterError: If brightness is outside valid range.
            DeviceError: If the command is not acknowledged.
        """
        _validate_range("brightness", brightness, BRIGHTNESS_MIN, BRIGHTNESS_MAX)
        command = SetBrightness(device_id=light.id, percent=brightness_to_percent(brightness))
        await self._send_state_command(command, light)

    async def set_color(self, light: Light, color: HsbColor) -> None:
        """Set light color.

        Args:
            light: Light to control.
            color: Hue (0-360), saturation (0-100) and brightness (0-100).

        Raises:
            InvalidParameterError: If any component is outside valid range.
            DeviceError: If the command is not acknowledged.
        """
        _validate_range("hue", color.hue, HUE_MIN, HUE_MAX)
        _validate_range("saturation", color.saturation, SATURATION_MIN, SATURATION_MAX)
        _validate_range("brightness", color.brightness, COLOR_BRIGHTNESS_MIN, COLOR_BRIGHTNESS_MAX)
        await self._send_state_command(SetColor(device_id=light.id, color=color), light)

    async def set_color_temperature(self, light: Light, temperature: int) -> None:
        """Set light color temperature.

        Args:
            light: Light to control.
            temperature: Color temperature in Kelvin. Values above 6500 K are
                clamped to 6500 K.

        Raises:
            InvalidParameterError: If temperature is negative.
            DeviceError: If the command is not acknowledged.
        """
        _validate_range("temperature", temperature, 0)
        command = SetColorTemperature(device_id=light.id, temperature=kelvin_to_vendor_units(temperature))
        await self._send_state_command(command, light)
