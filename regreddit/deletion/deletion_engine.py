"""
Deletion engine for orchestrating listing traversal, whitelist filtering and deletion.
"""

from typing import Any, Dict, Iterable, Optional

from regreddit.auth.api_session import ApiSession
from regreddit.deletion.handlers import ALREADY_GONE, DeletionHandler, get_all_handlers
from regreddit.deletion.whitelist import Whitelist
from regreddit.errors import DeleteError, FetchError
from regreddit.models import POST, Item
from regreddit.traversal.listing_fetcher import ListingFetcher
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)

# Listings processed by run(), in order
LISTING_ORDER = ["comments", "posts"]


def new_listing_stats() -> Dict[str, Any]:
    return {
        "deleted": 0,
        "posts_deleted": 0,
        "comments_deleted": 0,
        "already_gone": 0,
        "failed": 0,
        "skipped": 0,
        "fetch_errors": 0,
        "errors": [],
    }


class DeletionEngine:
    """Deletes a user's posts and comments outside whitelisted subreddits."""

    def __init__(
        self,
        session: ApiSession,
        username: str,
        whitelist: Optional[Whitelist] = None,
        handlers: Optional[list[DeletionHandler]] = None,
        fetcher: Optional[ListingFetcher] = None,
        logger_instance=None,
    ):
        """
        Initialize DeletionEngine.

        Args:
            session: Authenticated ApiSession
            username: Reddit username whose content is deleted
            whitelist: Subreddits exempt from deletion (defaults to an empty whitelist)
            handlers: Optional list of handlers (defaults to all registered handlers)
            fetcher: Optional ListingFetcher (defaults to one built on session)
            logger_instance: Optional logger instance
        """
        self.session = session
        self.username = username
        self.whitelist = whitelist or Whitelist()
        self.handlers = handlers or get_all_handlers()
        self.fetcher = fetcher or ListingFetcher(session, username)
        self.logger = logger_instance or logger

        self.logger.info(
            f"DeletionEngine initialized with {len(self.handlers)} handlers, "
            f"{len(self.whitelist)} whitelisted subreddits"
        )

    def run(self) -> Dict[str, Dict[str, Any]]:
        """
        Process every listing of the user.

        Returns:
            Dictionary mapping listing name to its statistics
        """
        self.logger.info(f"Nuking /u/{self.username}...")
        results = {}
        for listing in LISTING_ORDER:
            results[listing] = self.process_listing(listing, self.fetcher.iter_items(listing))
        return results

    def process_listing(self, listing: str, items: Iterable[Item]) -> Dict[str, Any]:
        """
        Delete every non-whitelisted item of a listing.

        A FetchError raised while iterating ends this listing only; items
        processed before it keep their outcome.

        Args:
            listing: Listing name for logging
            items: Items of the listing, usually a ListingFetcher generator

        Returns:
            Dictionary with statistics: deleted, posts_deleted, comments_deleted,
            already_gone, failed, skipped, fetch_errors, errors
        """
        stats = new_listing_stats()
        processed = 0

        try:
            for item in items:
                processed += 1
                self._process_item(item, stats)
        except FetchError as e:
            stats["fetch_errors"] += 1
            stats["errors"].append({"item": listing, "subreddit": "N/A", "error": str(e)})
            self.logger.error(f"Stopped paging {listing} after {processed} items: {e}")

        self.logger.info(
            f"Finished {listing}: {stats['deleted']} deleted, "
            f"{stats['already_gone']} already gone, "
            f"{stats['failed']} failed, {stats['skipped']} skipped"
        )
        return stats

    def _process_item(self, item: Item, stats: Dict[str, Any]) -> None:
        if not self.whitelist.keep_for_deletion(item):
            stats["skipped"] += 1
            self.logger.info(
                f"{item.kind.capitalize()} {item.fullname} is in whitelisted "
                f"r/{item.subreddit}. Skipping..."
            )
            return

        success, message = self.delete_item(item)
        if not success:
            stats["failed"] += 1
            stats["errors"].append(
                {"item": item.fullname, "subreddit": item.subreddit, "error": message}
            )
            self.logger.warning(f"Failed to delete {item.fullname}: {message}")
            return

        if message == ALREADY_GONE:
            stats["already_gone"] += 1
            return

        stats["deleted"] += 1
        if item.kind == POST:
            stats["posts_deleted"] += 1
        else:
            stats["comments_deleted"] += 1

    def delete_item(self, item: Item) -> tuple[bool, str]:
        """
        Delete a single item using the appropriate handler.

        Args:
            item: Item that passed the whitelist

        Returns:
            Tuple of (success: bool, outcome or error message: str)
        """
        handler = self._select_handler(item)
        if not handler:
            return False, f"No handler found for item kind: {item.kind}"

        try:
            return True, handler.delete(self.session, item)
        except DeleteError as e:
            return False, str(e)

    def _select_handler(self, item: Item) -> Optional[DeletionHandler]:
        for handler in self.handlers:
            if handler.can_handle(item):
                self.logger.debug(f"Selected handler: {type(handler).__name__}")
                return handler
        return None
