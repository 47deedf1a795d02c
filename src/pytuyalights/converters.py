"""Unit conversions between public values and vendor-accepted ranges."""

from __future__ import annotations

from pytuyalights.const import (
    BRIGHTNESS_MAX,
    KELVIN_MAX,
    KELVIN_MIN,
    VENDOR_TEMPERATURE_MAX,
    VENDOR_TEMPERATURE_MIN,
)


__all__ = [
    "brightness_to_percent",
    "kelvin_to_vendor_units",
]


def brightness_to_percent(value: int) -> int:
    """Convert a 0-255 brightness to the vendor's 0-100 percent scale.

    Example:
        >>> brightness_to_percent(128)
        50
    """
    return round(value / BRIGHTNESS_MAX * 100)


def kelvin_to_vendor_units(kelvin: int) -> int:
    """Convert a color temperature in Kelvin to vendor units (1000-10000).

    Values above 6500 K are clamped. Values below 2700 K are passed through
    unclamped and map below 1000 (negative below about 2000 K); the cloud's
    tolerance for such values is unconfirmed.
    The result is truncated, not rounded.

    Example:
        >>> kelvin_to_vendor_units(4600)
        5500
    """
    clamped = min(kelvin, KELVIN_MAX)
    span = VENDOR_TEMPERATURE_MAX - VENDOR_TEMPERATURE_MIN
    return int(VENDOR_TEMPERATURE_MIN + ((clamped - KELVIN_MIN) / (KELVIN_MAX - KELVIN_MIN)) * span)
