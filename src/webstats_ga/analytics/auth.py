"""Service account token exchange for the Analytics Reporting API."""
import asyncio
import logging
from typing import Optional

import google.auth.exceptions
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from ..config import DEFAULT_TOKEN_URI
from ..exceptions import AuthError
from ..schemas.report import Credentials


MISSING_TOKEN_MESSAGE = (
    "Provided service account does not have permission to generate access tokens"
)


def _is_missing_access_token(exc: google.auth.exceptions.RefreshError) -> bool:
    """True when the token endpoint answered without an ``access_token``.

    google-auth raises RefreshError("No access token in response.", body)
    for a successful response lacking the token; provider errors carry an
    ``error`` key in the body instead.
    """
    if exc.args and "No access token" in str(exc.args[0]):
        return True
    if len(exc.args) > 1 and isinstance(exc.args[1], dict):
        body = exc.args[1]
        return "access_token" not in body and "error" not in body
    return False


class GoogleAnalyticsAuthenticator:
    """Exchanges a signed JWT assertion for a read-only bearer token.

    The refresh call in google-auth is blocking, so it runs on a worker
    thread to keep the event loop free.
    """

    def __init__(
        self,
        credentials: Credentials,
        token_uri: str = DEFAULT_TOKEN_URI,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize authenticator.

        Args:
            credentials: Service account email, private key and scope
            token_uri: OAuth2 token endpoint
            logger: Optional logger instance
        """
        self._credentials = credentials
        self.token_uri = token_uri
        self.logger = logger or logging.getLogger(__name__)

    def _build_credentials(self) -> service_account.Credentials:
        info = self._credentials.to_service_account_info(self.token_uri)
        return service_account.Credentials.from_service_account_info(
            info, scopes=[self._credentials.scope]
        )

    def _refresh(self) -> Optional[str]:
        try:
            google_credentials = self._build_credentials()
            google_credentials.refresh(Request())
        except google.auth.exceptions.RefreshError as exc:
            if _is_missing_access_token(exc):
                raise AuthError(MISSING_TOKEN_MESSAGE) from exc
            self.logger.debug("Token exchange failed: %s", type(exc).__name__)
            raise AuthError("Error making request to generate token") from exc
        except (google.auth.exceptions.GoogleAuthError, ValueError) as exc:
            # ValueError covers keys google-auth cannot parse
            self.logger.debug("Token exchange failed: %s", type(exc).__name__)
            raise AuthError("Error making request to generate token") from exc
        return google_credentials.token

    async def fetch_access_token(self) -> str:
        """Obtain a bearer token for the configured service account.

        Returns:
            Access token string

        Raises:
            AuthError: If the exchange fails or yields no token
        """
        token = await asyncio.to_thread(self._refresh)
        if not token:
            raise AuthError(MISSING_TOKEN_MESSAGE)

        self.logger.debug(
            "Obtained access token for %s", self._credentials.service_account_email
        )
        return token
