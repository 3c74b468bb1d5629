"""
Session validation for verifying that the bearer token belongs to the configured account.
"""
import requests

from regreddit.auth.api_session import ApiSession
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)

# Identity endpoint on the OAuth host
ME_PATH = "/api/v1/me"


class SessionValidator:
    """Validates an API session by asking Reddit who the token belongs to."""

    def validate_session(self, session: ApiSession, expected_username: str) -> tuple[bool, str]:
        """
        Validate that the session is authenticated as expected_username.

        Args:
            session: ApiSession to check
            expected_username: Username from the config file

        Returns:
            Tuple of (is_valid: bool, message: str)
        """
        logger.info("Validating Reddit session...")

        try:
            response = session.get(ME_PATH)
        except requests.RequestException as e:
            logger.warning(f"Session check failed: {e}")
            return False, f"Could not reach Reddit: {e}"

        if response.status_code != 200:
            logger.warning(f"Session check returned HTTP {response.status_code}")
            return False, f"Identity check failed with status {response.status_code}"

        try:
            name = response.json().get("name", "")
        except (ValueError, AttributeError):
            return False, "Identity check returned an unexpected body"

        if not isinstance(name, str) or not name:
            return False, "Identity check returned no username"

        if name.casefold() != expected_username.casefold():
            logger.warning(f"Token belongs to /u/{name}, expected /u/{expected_username}")
            return False, f"Token belongs to /u/{name}, not /u/{expected_username}"

        logger.info(f"Session valid for /u/{name}")
        return True, "Session valid"
