"""File persistence for access tokens and discovered lights.

Tokens are stored verbatim with no framing. Lights are stored as a JSON
document: {"devices": [{"id": str, "name": str}, ...]}.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pytuyalights.exceptions import DeserializingError
from pytuyalights.models import AccessToken, Light


__all__ = [
    "load_access_token",
    "load_lights",
    "save_access_token",
    "save_lights",
]

_LOGGER = logging.getLogger(__name__)


def save_access_token(path: str | Path, token: AccessToken) -> None:
    """Write an access token to a file."""
    with Path(path).open("w", encoding="utf-8") as file:
        token.write_to(file)
    _LOGGER.debug("Saved access token to %s", path)


def load_access_token(path: str | Path) -> AccessToken:
    """Read an access token written with save_access_token().

    Raises:
        InvalidParameterError: If the file is empty.
    """
    with Path(path).open(encoding="utf-8") as file:
        return AccessToken.read_from(file)


def save_lights(path: str | Path, lights: list[Light]) -> None:
    """Write a device list to a JSON file."""
    document = {"devices": [light.to_dict() for light in lights]}
    Path(path).write_text(json.dumps(document, indent=2), encoding="utf-8")
    _LOGGER.debug("Saved %d light(s) to %s", len(lights), path)


def load_lights(path: str | Path) -> list[Light]:
    """Read a device list written with save_lights().

    Raises:
        DeserializingError: If the file is not a valid device list.
    """
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except ValueError as exc:
        msg = f"Invalid device list in {path}: {exc}"
        raise DeserializingError(msg) from exc

    devices = document.get("devices") if isinstance(document, dict) else None
    if not isinstance(devices, list):
        msg = f"Invalid device list in {path}: missing 'devices' list"
        raise DeserializingError(msg)

    return [Light.from_dict(record) for record in devices]
