"""
Endpoint paths for Reddit's OAuth API.
"""

from typing import Optional

from config import settings
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)

DELETE_PATH = "/api/del"
SUBMIT_PATH = "/api/submit"

# Listing name -> path segment under /user/{username}
LISTINGS = {
    "posts": "submitted",
    "comments": "comments",
}


class URLBuilder:
    """Builds user listing paths and query parameters."""

    def __init__(self, username: str):
        """
        Initialize URLBuilder.

        Args:
            username: Reddit username whose listings are paged

        Raises:
            ValueError: If username is empty
        """
        if not username or not username.strip():
            raise ValueError("Username cannot be empty")

        self.username = username.strip()
        self.base_path = f"/user/{self.username}"

    def build_listing_path(self, listing: str) -> str:
        """
        Build the path of a user listing.

        Args:
            listing: "posts" or "comments"

        Returns:
            Path relative to the API host

        Raises:
            ValueError: If listing is unknown
        """
        if listing not in LISTINGS:
            raise ValueError(f"Unknown listing: {listing}. Expected one of {sorted(LISTINGS)}")

        path = f"{self.base_path}/{LISTINGS[listing]}"
        logger.debug(f"Built path: {path}")
        return path

    @staticmethod
    def build_listing_params(after: Optional[str] = None, limit: Optional[int] = None) -> dict:
        """
        Build pagination query parameters.

        Args:
            after: Fullname cursor of the last item on the previous page
            limit: Page size (defaults to settings.LISTING_LIMIT, capped at 100)

        Returns:
            Query parameter dictionary
        """
        limit = limit or settings.LISTING_LIMIT
        if limit < 1:
            raise ValueError(f"Invalid limit: {limit}. Must be positive")

        params = {"limit": min(limit, 100)}
        if after:
            params["after"] = after
        return params
