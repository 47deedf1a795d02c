"""Serialization of typed commands into Tuya wire requests.

This module provides stateless functions for converting typed commands and
credentials into the exact JSON and form bodies the Tuya cloud expects.

Design Philosophy:
    - Stateless functions (no hidden nonce or timestamp)
    - Encoding cannot fail for a well-formed command
    - An AccessToken is required, so no request leaves without one
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pytuyalights.commands import (
    Command,
    Discover,
    QueryDevice,
    SetBrightness,
    SetColor,
    SetColorTemperature,
    TurnOnOff,
)
from pytuyalights.const import PAYLOAD_VERSION
from pytuyalights.models import AccessToken, Credentials


__all__ = [
    "WireHeader",
    "WireRequest",
    "encode_command",
    "serialize_credentials",
]


@dataclass(frozen=True)
class WireHeader:
    """Header of a skill request.

    Attributes:
        namespace: Command namespace ("discovery", "control" or "query").
        name: Command name within the namespace.
        payload_version: Envelope schema version.
    """

    namespace: str
    name: str
    payload_version: int = PAYLOAD_VERSION

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the header."""
        return {
            "payloadVersion": self.payload_version,
            "namespace": self.namespace,
            "name": self.name,
        }


@dataclass(frozen=True)
class WireRequest:
    """Complete skill request ready to be sent as JSON.

    Attributes:
        header: Request header.
        payload: Request payload, always containing ``accessToken``.
    """

    header: WireHeader
    payload: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body of the request."""
        return {"header": self.header.to_dict(), "payload": dict(self.payload)}


def encode_command(command: Command, access_token: AccessToken) -> WireRequest:
    """Encode a command into a skill request.

    Args:
        command: Command to encode.
        access_token: Token authorizing the request.

    Returns:
        WireRequest with the namespace, name and payload for the command.

    Raises:
        TypeError: If command is not one of the supported command types.

    Example:
        >>> request = encode_command(TurnOnOff("dev1", PowerState.ON), AccessToken("tok"))
        >>> request.to_dict()["payload"]
        {'accessToken': 'tok', 'devId': 'dev1', 'value': '1'}
    """
    if not isinstance(access_token, AccessToken):
        msg = f"access_token must be an AccessToken, got {type(access_token).__name__}"
        raise TypeError(msg)

    payload: dict[str, Any] = {"accessToken": access_token.value}

    match command:
        case Discover():
            header = WireHeader("discovery", "Discovery")
        case TurnOnOff(device_id=device_id, state=state):
            header = WireHeader("control", "turnOnOff")
            payload["devId"] = device_id
            payload["value"] = state.value
        case SetBrightness(device_id=device_id, percent=percent):
            header = WireHeader("control", "brightnessSet")
            payload["devId"] = device_id
            payload["value"] = percent
        case QueryDevice(device_id=device_id):
            header = WireHeader("query", "QueryDevice")
            payload["devId"] = device_id
        case SetColor(device_id=device_id, color=color):
            header = WireHeader("control", "colorSet")
            payload["devId"] = device_id
            payload["color"] = color.to_dict()
        case SetColorTemperature(device_id=device_id, temperature=temperature):
            header = WireHeader("control", "colorTemperatureSet")
            payload["devId"] = device_id
            payload["value"] = temperature
        case _:
            msg = f"Unsupported command: {command!r}"
            raise TypeError(msg)

    return WireRequest(header=header, payload=payload)


def serialize_credentials(credentials: Credentials) -> dict[str, str]:
    """Serialize credentials into the form fields of the login request.

    Example:
        >>> serialize_credentials(Credentials("user", "secret"))["bizType"]
        'smart_life'
    """
    return {key: str(value) for key, value in credentials.to_form().items()}
