"""
Post deletion handler for submitted links and self-posts.
"""

from regreddit.deletion.handlers.base_handler import DeletionHandler
from regreddit.models import POST, Item


class PostDeletionHandler(DeletionHandler):
    """Handler for deleting submitted posts (t3 things)."""

    def can_handle(self, item: Item) -> bool:
        """
        Check if this handler can process the item.

        Args:
            item: Item from a listing

        Returns:
            True if item is a post, False otherwise
        """
        return item.kind == POST
