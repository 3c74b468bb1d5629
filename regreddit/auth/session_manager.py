"""
Session manager for creating authenticated Reddit API sessions.
"""
from pathlib import Path
from typing import Optional, Tuple, Union

import requests

from config import settings as app_settings
from regreddit.auth.api_session import ApiSession
from regreddit.auth.credentials import CredentialsLoader, Settings
from regreddit.auth.session_validator import SessionValidator
from regreddit.auth.token_client import TokenClient
from regreddit.errors import AuthError
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)


class SessionManager:
    """High-level interface for creating authenticated API sessions."""

    def __init__(
        self,
        config_path: Union[str, Path],
        http: Optional[requests.Session] = None,
        logger_instance=None,
    ):
        """
        Initialize SessionManager.

        Args:
            config_path: Path to the TOML config file
            http: Optional requests.Session shared by the token and API calls
            logger_instance: Optional logger instance (uses module logger if None)
        """
        self.config_path = Path(config_path)
        self.http = http or requests.Session()
        self.logger = logger_instance or logger
        self.credentials_loader = CredentialsLoader(self.config_path)
        self.session_validator = SessionValidator()
        self.session: Optional[ApiSession] = None

    def create_authenticated_session(
        self, validate_session: bool = True
    ) -> Tuple[Settings, ApiSession]:
        """
        Load the config, obtain a token and build an API session.

        Args:
            validate_session: Whether to confirm the token's identity via /api/v1/me

        Returns:
            Tuple of (Settings, ApiSession)

        Raises:
            ConfigError: If the config file is missing or malformed (no request is made)
            AuthError: If Reddit rejects the credentials or the identity check fails
        """
        self.logger.info("Step 1: Loading config...")
        loaded = self.credentials_loader.load()
        username = loaded.credentials.username
        user_agent = f"{app_settings.USER_AGENT} (by /u/{username})"

        self.logger.info("Step 2: Requesting access token...")
        token_client = TokenClient(http=self.http, user_agent=user_agent)
        token = token_client.fetch_token(loaded.credentials)

        self.logger.info("Step 3: Creating API session...")
        self.session = ApiSession(token, http=self.http, user_agent=user_agent)

        if validate_session:
            self.logger.info("Step 4: Validating session...")
            is_valid, message = self.session_validator.validate_session(self.session, username)
            if not is_valid:
                self.cleanup()
                raise AuthError(f"Session validation failed: {message}")

        self.logger.info("Authenticated API session created successfully")
        return loaded, self.session

    def cleanup(self) -> None:
        """Close the HTTP session."""
        self.http.close()
        self.session = None
        self.logger.debug("HTTP session closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        self.cleanup()
        return False
