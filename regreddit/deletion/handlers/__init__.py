"""
Deletion handlers registry.
"""
from regreddit.deletion.handlers.base_handler import ALREADY_GONE, DELETED, DeletionHandler
from regreddit.deletion.handlers.comment_handler import CommentDeletionHandler
from regreddit.deletion.handlers.post_handler import PostDeletionHandler
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)

# Registry of all handlers
_registered_handlers: list[DeletionHandler] = []


def get_all_handlers() -> list[DeletionHandler]:
    """
    Get list of all registered deletion handlers.

    Returns:
        List of DeletionHandler instances
    """
    if not _registered_handlers:
        _registered_handlers.extend(
            [
                PostDeletionHandler(),
                CommentDeletionHandler(),
            ]
        )
        logger.debug(f"Initialized {len(_registered_handlers)} default handlers")

    return _registered_handlers.copy()


def clear_handlers() -> None:
    """Clear all registered handlers (useful for testing)."""
    _registered_handlers.clear()
    logger.debug("Cleared all handlers")


__all__ = [
    "ALREADY_GONE",
    "DELETED",
    "DeletionHandler",
    "PostDeletionHandler",
    "CommentDeletionHandler",
    "get_all_handlers",
    "clear_handlers",
]
