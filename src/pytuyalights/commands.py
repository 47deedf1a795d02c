"""Typed commands accepted by the Tuya skill endpoint.

Each command carries exactly the data needed to encode it. The set is closed:
``Command`` is the union of every supported variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pytuyalights.models import HsbColor, PowerState


__all__ = [
    "Command",
    "Discover",
    "QueryDevice",
    "SetBrightness",
    "SetColor",
    "SetColorTemperature",
    "TurnOnOff",
]


@dataclass(frozen=True)
class Discover:
    """List every device registered on the account."""


@dataclass(frozen=True)
class TurnOnOff:
    """Switch a light on or off."""

    device_id: str
    state: PowerState


@dataclass(frozen=True)
class SetBrightness:
    """Set brightness, already converted to vendor percent (0-100)."""

    device_id: str
    percent: int


@dataclass(frozen=True)
class SetColor:
    """Set an HSB color."""

    device_id: str
    color: HsbColor


@dataclass(frozen=True)
class SetColorTemperature:
    """Set color temperature, already converted to vendor units."""

    device_id: str
    temperature: int


@dataclass(frozen=True)
class QueryDevice:
    """Read the current state of a device."""

    device_id: str


Command: TypeAlias = Discover | TurnOnOff | SetBrightness | SetColor | SetColorTemperature | QueryDevice
