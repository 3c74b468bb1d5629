"""
Authenticated HTTP session for Reddit's OAuth API host.
"""
from typing import Any, Dict, Optional

import requests

from config import settings
from regreddit.auth.token_client import AccessToken
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)


class ApiSession:
    """requests.Session wrapper that sends the bearer token and user agent."""

    def __init__(
        self,
        token: AccessToken,
        http: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize ApiSession.

        Args:
            token: AccessToken from TokenClient
            http: requests.Session to use (a new one is created if None)
            base_url: API host (defaults to settings.OAUTH_BASE)
            user_agent: User-Agent header (defaults to settings.USER_AGENT)
            timeout: Request timeout in seconds (defaults to settings.REQUEST_TIMEOUT)
        """
        self.token = token
        self.http = http or requests.Session()
        self.base_url = (base_url or settings.OAUTH_BASE).rstrip("/")
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self.request_count = 0

        self.http.headers.update(
            {
                "Authorization": token.authorization_header,
                "User-Agent": user_agent or settings.USER_AGENT,
            }
        )

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Issue a GET request against the API host.

        Raises:
            requests.RequestException: On network failure
        """
        return self._request("GET", path, params=params)

    def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Issue a form-encoded POST request against the API host.

        Raises:
            requests.RequestException: On network failure
        """
        return self._request("POST", path, data=data)

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        if self.token.is_expired():
            logger.warning("Access token has expired; Reddit may reject further requests")

        params = dict(kwargs.pop("params", None) or {})
        params.setdefault("raw_json", 1)

        url = self.url(path)
        logger.debug(f"{method} {url}")
        self.request_count += 1

        response = self.http.request(method, url, params=params, timeout=self.timeout, **kwargs)
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close the HTTP session."""
        self.close()
        return False
