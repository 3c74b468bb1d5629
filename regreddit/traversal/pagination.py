"""
Pagination handler for Reddit listing responses.
"""
from typing import Any

import requests

from regreddit.errors import FetchError
from regreddit.models import ListingPage
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)


class PaginationHandler:
    """Parses listing responses and tracks the `after` cursor."""

    def __init__(self):
        self.seen_cursors: set = set()

    def reset(self) -> None:
        """Forget cursors from a previous traversal."""
        self.seen_cursors.clear()

    def parse_page(self, response: requests.Response, page_number: int = 1) -> ListingPage:
        """
        Parse a listing response into a ListingPage.

        Args:
            response: Response from a listing endpoint
            page_number: Page counter for logging

        Returns:
            ListingPage

        Raises:
            FetchError: On a non-2xx status or a body that is not a Listing
        """
        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"Listing request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body: Any = response.json()
        except ValueError as e:
            raise FetchError(f"Listing response is not JSON: {e}") from e

        if not isinstance(body, dict) or body.get("kind") != "Listing":
            raise FetchError("Got unexpected object. Expected Listing")

        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise FetchError("Listing data is not an object")

        children = data.get("children") or []
        if not isinstance(children, list):
            raise FetchError("Listing children is not a list")

        page = ListingPage(children=children, after=data.get("after"), page_number=page_number)
        logger.debug(f"Page {page_number}: {len(children)} children, after={page.after}")
        return page

    def has_more_pages(self, page: ListingPage) -> bool:
        """
        Check whether another page should be requested after this one.

        Args:
            page: The page just parsed

        Returns:
            True if the listing reports a new `after` cursor
        """
        if not page.children or not page.after:
            logger.debug("No further pages")
            return False

        if page.after in self.seen_cursors:
            logger.warning(f"Cursor {page.after} repeated, stopping pagination")
            return False

        self.seen_cursors.add(page.after)
        return True
