"""
Comment deletion handler.
"""

from regreddit.deletion.handlers.base_handler import DeletionHandler
from regreddit.models import COMMENT, Item


class CommentDeletionHandler(DeletionHandler):
    """Handler for deleting comments (t1 things)."""

    def can_handle(self, item: Item) -> bool:
        return item.kind == COMMENT
