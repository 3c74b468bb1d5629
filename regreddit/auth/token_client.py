"""
OAuth2 password-grant client for obtaining Reddit access tokens.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

import requests

from config import settings
from regreddit.auth.credentials import Credentials
from regreddit.errors import AuthError
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccessToken:
    """Bearer token issued by Reddit."""

    value: str = field(repr=False)
    expires_at: datetime
    token_type: str = "bearer"
    scope: str = "*"

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.now()) >= self.expires_at

    @property
    def authorization_header(self) -> str:
        return f"bearer {self.value}"


class TokenClient:
    """Exchanges script-app credentials for a bearer token."""

    def __init__(
        self,
        http: Optional[requests.Session] = None,
        token_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize TokenClient.

        Args:
            http: requests.Session to use (a new one is created if None)
            token_url: Token endpoint (defaults to settings.TOKEN_URL)
            user_agent: User-Agent header (defaults to settings.USER_AGENT)
            timeout: Request timeout in seconds (defaults to settings.REQUEST_TIMEOUT)
        """
        self.http = http or requests.Session()
        self.token_url = token_url or settings.TOKEN_URL
        self.user_agent = user_agent or settings.USER_AGENT
        self.timeout = timeout or settings.REQUEST_TIMEOUT

    def fetch_token(self, credentials: Credentials) -> AccessToken:
        """
        Request an access token with the OAuth2 password grant.

        Args:
            credentials: Credentials loaded from the config file

        Returns:
            AccessToken

        Raises:
            AuthError: If Reddit rejects the credentials or cannot be reached
        """
        logger.info(f"Authenticating as /u/{credentials.username}...")

        try:
            response = self.http.post(
                self.token_url,
                auth=(credentials.client_id, credentials.secret),
                data={
                    "grant_type": "password",
                    "username": credentials.username,
                    "password": credentials.password,
                },
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise AuthError(f"Could not reach token endpoint: {e}") from e

        if response.status_code in (401, 403):
            raise AuthError(
                f"Credentials rejected by Reddit (HTTP {response.status_code}). "
                "Check client_id and secret.",
                status_code=response.status_code,
            )

        if response.status_code != 200:
            raise AuthError(
                f"Authentication failed with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise AuthError(f"Token endpoint returned invalid JSON: {e}") from e

        # Reddit answers a wrong username/password with 200 and an error field
        if not isinstance(payload, dict) or "error" in payload:
            error = payload.get("error") if isinstance(payload, dict) else payload
            raise AuthError(f"Authentication failed: {error}", status_code=response.status_code)

        value = payload.get("access_token")
        if not value:
            raise AuthError("Token endpoint response has no access_token")

        try:
            expires_in = int(payload.get("expires_in") or settings.DEFAULT_TOKEN_LIFETIME)
        except (TypeError, ValueError) as e:
            raise AuthError(f"Token endpoint returned an invalid expires_in: {e}") from e

        token = AccessToken(
            value=value,
            expires_at=datetime.now() + timedelta(seconds=expires_in),
            token_type=payload.get("token_type", "bearer"),
            scope=payload.get("scope", "*"),
        )

        logger.info("Authentication successful")
        logger.debug(f"Token scope: {token.scope}, expires at {token.expires_at:%H:%M:%S}")
        return token
