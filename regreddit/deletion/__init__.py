"""
Whitelist filtering, deletion handlers and orchestration engine.
"""
from regreddit.deletion.deletion_engine import DeletionEngine
from regreddit.deletion.handlers import (
    CommentDeletionHandler,
    DeletionHandler,
    PostDeletionHandler,
    get_all_handlers,
)
from regreddit.deletion.whitelist import Whitelist, keep_for_deletion

__all__ = [
    "DeletionEngine",
    "DeletionHandler",
    "PostDeletionHandler",
    "CommentDeletionHandler",
    "Whitelist",
    "get_all_handlers",
    "keep_for_deletion",
]
