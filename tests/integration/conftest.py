"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

from pytuyalights import TuyaLightsClient


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> dict[str, str]:
    """Load integration test configuration from environment.

    Returns:
        Dictionary with API credentials and configuration.
    """
    username = os.getenv("TUYA_USER")
    password = os.getenv("TUYA_PASSWORD")
    base_url = os.getenv("TUYA_API_BASE_URL", "https://px1.tuyaus.com")

    if not username or not password:
        pytest.skip("Create a .env file with TUYA_USER and TUYA_PASSWORD to run integration tests")

    return {
        "username": username,
        "password": password,
        "base_url": base_url,
    }


@pytest.fixture(scope="session")
def test_light_name() -> str | None:
    """Get the name of the light to control, or None to skip control tests."""
    return os.getenv("TUYA_LIGHT_NAME")


@pytest.fixture
async def integration_client(integration_config: dict[str, str]) -> AsyncGenerator[TuyaLightsClient]:
    """Create an authenticated client against the real cloud."""
    async with TuyaLightsClient(
        username=integration_config["username"],
        password=integration_config["password"],
        base_url=integration_config["base_url"],
    ) as client:
        yield client
