"""Parsing utilities for Tuya cloud responses.

The cloud answers with loosely-typed JSON whose shape depends on the request.
Each parser here accepts exactly one response context and either returns a
typed result or raises:

- ``DeserializingError`` when the body is not JSON or matches no known shape.
- ``ApiError`` (or a subclass) when a well-formed body reports a failure.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pytuyalights.const import DEVICE_TYPE_LIGHT, LOGIN_RESPONSE_ENCODING, RESPONSE_CODE_SUCCESS
from pytuyalights.exceptions import (
    ApiError,
    AuthenticationError,
    DeserializingError,
    DeviceError,
    EncodingError,
)
from pytuyalights.models import AccessToken, Light, LightStatus, SessionTokens


__all__ = [
    "decode_login_body",
    "load_json",
    "parse_acknowledgement",
    "parse_discovery_response",
    "parse_light_status",
    "parse_login_response",
    "parse_query_response",
]

_LOGGER = logging.getLogger(__name__)


def decode_login_body(body: bytes) -> str:
    """Decode the raw login response body from its legacy charset.

    Raises:
        EncodingError: If the body cannot be decoded.
    """
    try:
        return body.decode(LOGIN_RESPONSE_ENCODING)
    except UnicodeDecodeError as exc:
        # Unreachable for ISO-8859-1; kept so charset failures stay an EncodingError
        msg = f"decoding API response failed: {exc}"
        raise EncodingError(msg) from exc


def load_json(data: str | bytes) -> Any:
    """Parse a JSON document.

    Raises:
        DeserializingError: If the document is not valid JSON.
    """
    try:
        return json.loads(data)
    except ValueError as exc:
        msg = f"deserializing API response failed: {exc}"
        raise DeserializingError(msg) from exc


def _is_optional(value: Any, expected: type | tuple[type, ...]) -> bool:
    return value is None or (isinstance(value, expected) and not isinstance(value, bool))


def _try_login_success(data: dict[str, Any]) -> SessionTokens | None:
    access_token = data.get("access_token")
    if not isinstance(access_token, str) or not access_token:
        return None

    refresh_token = data.get("refresh_token")
    token_type = data.get("token_type")
    expires_in = data.get("expires_in")
    if not (_is_optional(refresh_token, str) and _is_optional(token_type, str) and _is_optional(expires_in, int)):
        return None

    return SessionTokens(
        access_token=AccessToken(access_token),
        refresh_token=refresh_token,
        token_type=token_type,
        expires_in=expires_in,
    )


def parse_login_response(data: Any) -> SessionTokens:
    """Parse the login response into session tokens.

    The login response is untagged: a success body carries token fields, an
    error body carries ``errorMsg`` and ``responseStatus``. The success shape is
    tried first and the error shape second.

    Args:
        data: Parsed JSON body of the login response.

    Returns:
        SessionTokens from a success body.

    Raises:
        AuthenticationError: If the body is the error shape.
        DeserializingError: If the body matches neither shape.

    Example:
        >>> tokens = parse_login_response({"access_token": "abc", "expires_in": 864000})
        >>> tokens.expires_in
        864000
    """
    if not isinstance(data, dict):
        msg = f"deserializing API response failed: expected an object, got {type(data).__name__}"
        raise DeserializingError(msg)

    tokens = _try_login_success(data)
    if tokens is not None:
        return tokens

    error_msg = data.get("errorMsg")
    response_status = data.get("responseStatus")
    if isinstance(error_msg, str) and isinstance(response_status, str):
        raise AuthenticationError(error_msg, response_status=response_status)

    msg = "deserializing API response failed: login response matched neither the token nor the error shape"
    raise DeserializingError(msg)


def parse_light_status(data: dict[str, Any]) -> LightStatus:
    """Parse a light's ``data`` block.

    Args:
        data: Raw data in format:
              {"brightness": "255", "color_mode": "white", "online": true,
               "state": "true", "color_temp": 1000}

    Returns:
        LightStatus instance. Missing fields are None.
    """
    return LightStatus(
        brightness=data.get("brightness"),
        color_mode=data.get("color_mode"),
        online=data.get("online"),
        state=data.get("state"),
        color_temp=data.get("color_temp"),
        raw_data=data,
    )


def _parse_device_record(record: Any) -> Light | None:
    if not isinstance(record, dict) or not isinstance(record.get("dev_type"), str):
        msg = f"deserializing API response failed: device record without dev_type: {record!r}"
        raise DeserializingError(msg)

    dev_type = record["dev_type"]
    if dev_type != DEVICE_TYPE_LIGHT:
        _LOGGER.debug("Ignoring device %s of unsupported type %s", record.get("id"), dev_type)
        return None

    device_id = record.get("id")
    name = record.get("name")
    if not isinstance(device_id, str) or not isinstance(name, str):
        msg = f"deserializing API response failed: light record without id or name: {record!r}"
        raise DeserializingError(msg)

    data = record.get("data")
    status = parse_light_status(data) if isinstance(data, dict) else None
    return Light(id=device_id, name=name, status=status)


def parse_discovery_response(data: Any) -> list[Light]:
    """Parse a discovery response into the account's lights.

    Records are tagged by ``dev_type``. Only lights are kept; every other
    device kind is dropped so that new kinds never break discovery.

    Args:
        data: Parsed JSON body in format:
              {"payload": {"devices": [{"dev_type": "light", "id": str, "name": str, "data": {...}}, ...]}}

    Returns:
        Lights in the order the cloud returned them.

    Raises:
        DeserializingError: If the envelope or a record is malformed.
    """
    payload = data.get("payload") if isinstance(data, dict) else None
    devices = payload.get("devices") if isinstance(payload, dict) else None
    if not isinstance(devices, list):
        # The cloud reports expired tokens and similar failures through the header
        _raise_for_header(data)
        msg = "deserializing API response failed: discovery response has no payload.devices list"
        raise DeserializingError(msg)

    lights = [light for light in map(_parse_device_record, devices) if light is not None]
    _LOGGER.debug("Discovered %d light(s) out of %d device(s)", len(lights), len(devices))
    return lights


def _raise_for_header(data: Any, device_id: str | None = None) -> None:
    header = data.get("header") if isinstance(data, dict) else None
    if not isinstance(header, dict) or "code" not in header:
        return

    code = str(header["code"])
    if code == RESPONSE_CODE_SUCCESS:
        return

    message = code
    if isinstance(header.get("msg"), str) and header["msg"]:
        message = f"{code}: {header['msg']}"

    if device_id is not None:
        raise DeviceError(message, code=code, device_id=device_id)
    raise ApiError(message, code=code)


def parse_acknowledgement(data: Any, device_id: str | None = None) -> None:
    """Check a command acknowledgement.

    Args:
        data: Parsed JSON body in format {"header": {"code": "SUCCESS", ...}}.
        device_id: Optional device the command was addressed to.

    Raises:
        ApiError: If the code is anything other than ``SUCCESS``. A DeviceError
            is raised when device_id is given.
        DeserializingError: If the header or its code is missing.
    """
    header = data.get("header") if isinstance(data, dict) else None
    if not isinstance(header, dict) or header.get("code") is None:
        msg = "deserializing API response failed: acknowledgement has no header.code"
        raise DeserializingError(msg)

    _raise_for_header(data, device_id)


def parse_query_response(data: Any, device_id: str | None = None) -> LightStatus:
    """Parse a device query response.

    Args:
        data: Parsed JSON body in format:
              {"header": {"code": "SUCCESS"}, "payload": {"data": {...}}}
        device_id: Optional device the query was addressed to.

    Returns:
        LightStatus for the queried device.

    Raises:
        ApiError: If the acknowledgement reports a failure.
        DeserializingError: If the body is malformed.
    """
    parse_acknowledgement(data, device_id)

    payload = data.get("payload")
    status_data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(status_data, dict):
        msg = "deserializing API response failed: query response has no payload.data object"
        raise DeserializingError(msg)

    return parse_light_status(status_data)
