"""Python client library for Tuya cloud lights.

This package provides an async client for discovering and controlling lights
through the Tuya "homeassistant" cloud API.

The library is organized into three layers:
1. **Wire Layer** (pytuyalights.serializers, pytuyalights.parsers): Typed commands to
   request JSON, and response JSON to typed results or errors
2. **API Layer** (pytuyalights.api): Low-level HTTP communication with the Tuya cloud
3. **Client Layer** (pytuyalights.client): Session facade composing the other two

Example:
    Basic usage:

    ```python
    from pytuyalights import HsbColor, TuyaLightsClient

    async with TuyaLightsClient(username="user@example.com", password="password") as client:
        # Discover lights
        lights = await client.discover()

        # Control lights
        for light in lights:
            await client.turn_on(light)
            await client.set_color(light, HsbColor(hue=120, saturation=100, brightness=80))

        # Persist the token to skip the login next time
        save_access_token("access_token", client.dump_token())
    ```
"""

from __future__ import annotations

from pytuyalights.api import TuyaAPI
from pytuyalights.auth import AuthenticationHandler
from pytuyalights.client import TuyaLightsClient
from pytuyalights.commands import (
    Command,
    Discover,
    QueryDevice,
    SetBrightness,
    SetColor,
    SetColorTemperature,
    TurnOnOff,
)
from pytuyalights.converters import brightness_to_percent, kelvin_to_vendor_units
from pytuyalights.exceptions import (
    ApiError,
    AuthenticationError,
    DeserializingError,
    DeviceError,
    EncodingError,
    InvalidParameterError,
    TransportError,
    TuyaConnectionError,
    TuyaHttpStatusError,
    TuyaLightsError,
    TuyaTimeoutError,
)
from pytuyalights.models import (
    AccessToken,
    Credentials,
    HsbColor,
    Light,
    LightStatus,
    PowerState,
    SessionTokens,
    find_lights,
)
from pytuyalights.parsers import (
    parse_acknowledgement,
    parse_discovery_response,
    parse_login_response,
    parse_query_response,
)
from pytuyalights.persistence import load_access_token, load_lights, save_access_token, save_lights
from pytuyalights.serializers import WireHeader, WireRequest, encode_command


__version__ = "0.1.0"

__all__ = [
    "AccessToken",
    "ApiError",
    "AuthenticationError",
    "AuthenticationHandler",
    "Command",
    "Credentials",
    "DeserializingError",
    "DeviceError",
    "Discover",
    "EncodingError",
    "HsbColor",
    "InvalidParameterError",
    "Light",
    "LightStatus",
    "PowerState",
    "QueryDevice",
    "SessionTokens",
    "SetBrightness",
    "SetColor",
    "SetColorTemperature",
    "TransportError",
    "TurnOnOff",
    "TuyaAPI",
    "TuyaConnectionError",
    "TuyaHttpStatusError",
    "TuyaLightsClient",
    "TuyaLightsError",
    "TuyaTimeoutError",
    "WireHeader",
    "WireRequest",
    "__version__",
    "brightness_to_percent",
    "encode_command",
    "find_lights",
    "kelvin_to_vendor_units",
    "load_access_token",
    "load_lights",
    "parse_acknowledgement",
    "parse_discovery_response",
    "parse_login_response",
    "parse_query_response",
    "save_access_token",
    "save_lights",
]
