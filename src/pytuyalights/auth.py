"""Authentication handler for the Tuya cloud."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pytuyalights.models import Credentials
from pytuyalights.parsers import decode_login_body, load_json, parse_login_response
from pytuyalights.serializers import serialize_credentials


if TYPE_CHECKING:
    from pytuyalights.api import TuyaAPI
    from pytuyalights.models import SessionTokens

_LOGGER = logging.getLogger(__name__)


class AuthenticationHandler:
    """Log in to the Tuya cloud with a user name and password.

    The handler performs a single login attempt per call. It never retries and
    never refreshes tokens; both are left to the caller.

    Attributes:
        username: Account user name.
    """

    def __init__(self, username: str, password: str, *, api: TuyaAPI) -> None:
        """Initialize the authentication handler.

        Args:
            username: Account user name.
            password: Account password.
            api: Low-level API client used to reach the login endpoint.
        """
        self.username = username
        self._password = password
        self._api = api

    async def authenticate(self) -> SessionTokens:
        """Authenticate with the Tuya cloud.

        This method performs the following:
        1. POSTs the credentials form to the login endpoint
        2. Decodes the body from its legacy charset
        3. Parses the untagged login response

        Returns:
            Fresh session tokens.

        Raises:
            AuthenticationError: If the cloud rejects the credentials.
            EncodingError: If the body cannot be decoded.
            DeserializingError: If the body is not a recognized login response.
            TransportError: If the HTTP request fails.
        """
        credentials = Credentials(self.username, self._password)

        _LOGGER.debug("Authenticating user %s", self.username)

        body = await self._api.login(serialize_credentials(credentials))
        tokens = parse_login_response(load_json(decode_login_body(body)))

        _LOGGER.info("Authentication successful for user %s", self.username)
        return tokens
