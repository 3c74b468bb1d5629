"""
Listing fetcher for paging through a user's submitted posts and comments.
"""
from typing import Generator, Optional

import requests

from config import settings
from regreddit.auth.api_session import ApiSession
from regreddit.errors import FetchError
from regreddit.models import Item, ListingPage
from regreddit.traversal.pagination import PaginationHandler
from regreddit.traversal.url_builder import URLBuilder
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)


class ListingFetcher:
    """Lazily pages through a user's listings and yields deletable items."""

    def __init__(
        self,
        session: ApiSession,
        username: str,
        limit: Optional[int] = None,
        logger_instance=None,
    ):
        """
        Initialize ListingFetcher.

        Args:
            session: Authenticated ApiSession
            username: Reddit username whose listings are paged
            limit: Page size (defaults to settings.LISTING_LIMIT)
            logger_instance: Optional logger instance
        """
        self.session = session
        self.username = username
        self.limit = limit or settings.LISTING_LIMIT
        self.logger = logger_instance or logger

        self.url_builder = URLBuilder(username)
        self.pagination_handler = PaginationHandler()

    def iter_pages(self, listing: str) -> Generator[ListingPage, None, None]:
        """
        Yield pages of a listing, starting from the first page on every call.

        Args:
            listing: "posts" or "comments"

        Yields:
            ListingPage objects

        Raises:
            FetchError: If a page cannot be fetched; pages already yielded stay valid
        """
        path = self.url_builder.build_listing_path(listing)
        self.pagination_handler.reset()
        after = None
        page_number = 1

        while True:
            self.logger.info(f"Getting page {page_number} of {listing}...")
            params = self.url_builder.build_listing_params(after=after, limit=self.limit)

            try:
                response = self.session.get(path, params=params)
            except requests.RequestException as e:
                raise FetchError(f"Could not fetch {listing} page {page_number}: {e}") from e

            page = self.pagination_handler.parse_page(response, page_number=page_number)
            yield page

            if not self.pagination_handler.has_more_pages(page):
                break

            after = page.after
            page_number += 1

    def iter_items(self, listing: str) -> Generator[Item, None, None]:
        """
        Yield the items of a listing across all of its pages.

        Args:
            listing: "posts" or "comments"

        Yields:
            Item objects

        Raises:
            FetchError: If a page cannot be fetched
        """
        for page in self.iter_pages(listing):
            for child in page.children:
                item = Item.from_thing(child)
                if item is None:
                    kind = child.get("kind") if isinstance(child, dict) else type(child).__name__
                    self.logger.error(
                        f"Got unexpected object of kind {kind!r} "
                        f"in {listing}, skipping"
                    )
                    continue
                yield item

    def iter_posts(self) -> Generator[Item, None, None]:
        """Yield the user's submitted posts."""
        return self.iter_items("posts")

    def iter_comments(self) -> Generator[Item, None, None]:
        """Yield the user's comments."""
        return self.iter_items("comments")
