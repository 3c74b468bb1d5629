"""
Statistics and reporting utilities.
"""

from datetime import datetime
from typing import Optional

from regreddit.utils.logging import get_logger

logger = get_logger(__name__)


class StatisticsReporter:
    """Accumulates per-listing results and reports a run summary."""

    def __init__(self, start_time: Optional[datetime] = None):
        """
        Initialize StatisticsReporter.

        Args:
            start_time: Operation start time (defaults to now)
        """
        self.start_time = start_time or datetime.now()
        self.stats = {
            "total_deleted": 0,
            "posts_deleted": 0,
            "comments_deleted": 0,
            "already_gone": 0,
            "total_failed": 0,
            "total_skipped": 0,
            "fetch_errors": 0,
            "errors_encountered": 0,
        }

    def update_from_listing_stats(self, listing_stats: dict) -> None:
        """
        Update statistics from listing processing results.

        Args:
            listing_stats: Statistics dictionary from DeletionEngine.process_listing()
        """
        self.stats["total_deleted"] += listing_stats.get("deleted", 0)
        self.stats["posts_deleted"] += listing_stats.get("posts_deleted", 0)
        self.stats["comments_deleted"] += listing_stats.get("comments_deleted", 0)
        self.stats["already_gone"] += listing_stats.get("already_gone", 0)
        self.stats["total_failed"] += listing_stats.get("failed", 0)
        self.stats["total_skipped"] += listing_stats.get("skipped", 0)
        self.stats["fetch_errors"] += listing_stats.get("fetch_errors", 0)
        self.stats["errors_encountered"] += len(listing_stats.get("errors", []))

    def print_summary(self) -> None:
        """Log final summary statistics."""
        elapsed = datetime.now() - self.start_time

        logger.info("=" * 60)
        logger.info("REGREDDIT SUMMARY")
        logger.info("=" * 60)
        logger.info(f"Total Deleted: {self.stats['total_deleted']}")
        logger.info(f"  - Posts: {self.stats['posts_deleted']}")
        logger.info(f"  - Comments: {self.stats['comments_deleted']}")
        logger.info(f"Already Gone: {self.stats['already_gone']}")
        logger.info(f"Total Failed: {self.stats['total_failed']}")
        logger.info(f"Skipped (whitelisted): {self.stats['total_skipped']}")
        logger.info(f"Listing Errors: {self.stats['fetch_errors']}")
        logger.info(f"Time Elapsed: {elapsed}")
        logger.info("=" * 60)
