"""Low-level API client for the Tuya homeassistant endpoints.

This module provides direct HTTP communication with the Tuya cloud. It only
moves bytes: decoding responses into typed results is left to
``pytuyalights.parsers``.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from aiohttp import ClientError, ClientSession, ClientTimeout

from pytuyalights.const import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, LOGIN_ENDPOINT, SKILL_ENDPOINT
from pytuyalights.exceptions import TuyaConnectionError, TuyaHttpStatusError, TuyaTimeoutError
from pytuyalights.parsers import load_json


if TYPE_CHECKING:
    from types import TracebackType

    from pytuyalights.serializers import WireRequest

_LOGGER = logging.getLogger(__name__)


class TuyaAPI:
    """Low-level HTTP client for the Tuya cloud.

    Example:
        ```python
        from aiohttp import ClientSession
        from pytuyalights.api import TuyaAPI

        async with ClientSession() as session:
            api = TuyaAPI(session=session)
            body = await api.login({"userName": "user", "password": "pass", ...})
        ```

    Attributes:
        base_url: Base URL for the API (default: https://px1.tuyaus.com).
    """

    def __init__(
        self,
        *,
        session: ClientSession | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the API client.

        Args:
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            base_url: Base URL for the API. Defaults to the Tuya US cloud.
            timeout: Total timeout in seconds for a single request.
        """
        self._session = session
        self._owns_session = session is None
        self.base_url = base_url.rstrip("/")
        self._timeout = ClientTimeout(total=timeout)

    async def __aenter__(self) -> TuyaAPI:
        """Enter the context manager.

        Creates a new aiohttp session if one wasn't provided during initialization.

        Returns:
            Self for use in async with statements.
        """
        if self._session is None:
            self._session = ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager.

        Closes the session if it was created by this client.
        """
        await self.close()

    async def close(self) -> None:
        """Close the session if it was created by this client."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _validate_session(self) -> ClientSession:
        """Return the open session.

        Raises:
            RuntimeError: If session is not initialized or is closed.
        """
        if self._session is None:
            msg = "Session not initialized. Use 'async with' or provide a session."
            raise RuntimeError(msg)

        if self._session.closed:
            msg = "Session is closed. Cannot make request."
            raise RuntimeError(msg)

        return self._session

    async def _post(self, endpoint: str, **kwargs: Any) -> bytes:
        """POST to an endpoint and return the raw response body.

        Raises:
            TuyaTimeoutError: If the request times out.
            TuyaConnectionError: If the connection fails.
            TuyaHttpStatusError: If the API answers with an HTTP error status.
        """
        session = self._validate_session()
        url = f"{self.base_url}{endpoint}"

        _LOGGER.debug("POST %s", url)

        try:
            async with session.post(url, timeout=self._timeout, **kwargs) as response:
                body = await response.read()
                if response.status >= HTTPStatus.BAD_REQUEST:
                    msg = f"http error: {url} returned status {response.status}"
                    raise TuyaHttpStatusError(msg, status=response.status)
                return body

        except TimeoutError as exc:
            _LOGGER.exception("Request to %s timed out", url)
            msg = f"http error: request to {url} timed out"
            raise TuyaTimeoutError(msg) from exc

        except ClientError as exc:
            _LOGGER.exception("Connection error for %s", url)
            msg = f"http error: {exc}"
            raise TuyaConnectionError(msg) from exc

    async def login(self, form: dict[str, str]) -> bytes:
        """Send the login form.

        Args:
            form: Form fields produced by serialize_credentials().

        Returns:
            Raw response body, still in its legacy charset.
        """
        return await self._post(
            LOGIN_ENDPOINT,
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    async def skill(self, request: WireRequest) -> Any:
        """Send a skill request.

        Args:
            request: Encoded command.

        Returns:
            Parsed JSON response.

        Raises:
            DeserializingError: If the response is not valid JSON.
        """
        _LOGGER.debug("Sending %s/%s", request.header.namespace, request.header.name)
        body = await self._post(SKILL_ENDPOINT, json=request.to_dict())
        return load_json(body)
