"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientSession, web


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Sample API responses
SAMPLE_LOGIN_SUCCESS = {
    "access_token": "tok123",
    "refresh_token": "refresh456",
    "token_type": "bearer",
    "expires_in": 864000,
}

SAMPLE_LOGIN_ERROR = {
    "responseStatus": "error",
    "errorMsg": "Get accesstoken failed. Username or password error!",
}

SAMPLE_DISCOVERY_RESPONSE = {
    "header": {"code": "SUCCESS", "payloadVersion": 1},
    "payload": {
        "devices": [
            {
                "dev_type": "light",
                "id": "dev1",
                "name": "Lamp",
                "icon": "https://images.tuyaus.com/smart/icon/lamp.png",
                "ha_type": "light",
                "data": {
                    "brightness": "255",
                    "color_mode": "white",
                    "online": True,
                    "state": "true",
                    "color_temp": 1000,
                },
            },
            {
                "dev_type": "curtain",
                "id": "dev2",
                "name": "Blinds",
                "data": {"support_stop": True, "online": True, "state": 3},
            },
            {
                "dev_type": "light",
                "id": "dev3",
                "name": "Desk",
                "data": {"brightness": "10", "online": False, "state": "false"},
            },
        ]
    },
}

SAMPLE_QUERY_RESPONSE = {
    "header": {"code": "SUCCESS", "payloadVersion": 1},
    "payload": {
        "data": {
            "brightness": "128",
            "color_mode": "colour",
            "online": True,
            "state": "true",
            "color_temp": 5500,
        }
    },
}

SAMPLE_ACK_SUCCESS = {"header": {"code": "SUCCESS", "payloadVersion": 1}, "payload": {}}

SAMPLE_ACK_OFFLINE = {"header": {"code": "TargetOffline", "payloadVersion": 1, "msg": "target is offline"}}


class FakeTuyaCloud:
    """In-process stand-in for the Tuya homeassistant endpoints.

    Records every request so tests can assert on the exact wire bodies.
    """

    def __init__(self) -> None:
        self.login_forms: list[dict[str, str]] = []
        self.skill_requests: list[dict[str, Any]] = []
        self.login_response: dict[str, Any] = SAMPLE_LOGIN_SUCCESS
        self.skill_responses: dict[str, Any] = {
            "Discovery": SAMPLE_DISCOVERY_RESPONSE,
            "QueryDevice": SAMPLE_QUERY_RESPONSE,
        }
        self.default_skill_response: Any = SAMPLE_ACK_SUCCESS

    async def login(self, request: web.Request) -> web.Response:
        """Mock /homeassistant/auth.do endpoint."""
        form = await request.post()
        self.login_forms.append(dict(form))
        body = json.dumps(self.login_response, ensure_ascii=False).encode("iso-8859-1")
        return web.Response(body=body, content_type="text/html", charset="iso-8859-1")

    async def skill(self, request: web.Request) -> web.Response:
        """Mock /homeassistant/skill endpoint."""
        data = await request.json()
        self.skill_requests.append(data)
        response = self.skill_responses.get(data["header"]["name"], self.default_skill_response)
        return web.json_response(response)

    def app(self) -> web.Application:
        """Build the aiohttp application serving the fake endpoints."""
        app = web.Application()
        app.router.add_post("/homeassistant/auth.do", self.login)
        app.router.add_post("/homeassistant/skill", self.skill)
        return app


@pytest.fixture
def tuya_cloud() -> FakeTuyaCloud:
    """Create a fake Tuya cloud."""
    return FakeTuyaCloud()


@pytest.fixture
async def mock_session() -> AsyncGenerator[ClientSession]:
    """Create a mock aiohttp ClientSession.

    Yields:
        Mock ClientSession for testing.
    """
    session = AsyncMock(spec=ClientSession)
    session.closed = False

    async def mock_close() -> None:
        session.closed = True

    session.close = mock_close

    yield session

    if not session.closed:
        await session.close()


@pytest.fixture
def mock_response() -> MagicMock:
    """Create a mock aiohttp ClientResponse.

    Returns:
        Mock ClientResponse usable as an async context manager.
    """
    response = MagicMock()
    response.status = 200
    response.headers = {}
    response.read = AsyncMock(return_value=b"{}")
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response
