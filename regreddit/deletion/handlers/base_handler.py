"""
Base deletion handler interface using Strategy pattern.
"""
from abc import ABC, abstractmethod

import requests

from regreddit.auth.api_session import ApiSession
from regreddit.errors import DeleteError
from regreddit.models import Item
from regreddit.traversal.url_builder import DELETE_PATH
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)

# Outcomes returned by DeletionHandler.delete()
DELETED = "deleted"
ALREADY_GONE = "already_gone"


class DeletionHandler(ABC):
    """Abstract base class for kind-specific deletion handlers."""

    endpoint = DELETE_PATH

    @abstractmethod
    def can_handle(self, item: Item) -> bool:
        """
        Check if this handler can process the given item.

        Args:
            item: Item from a listing

        Returns:
            True if handler can process this item, False otherwise
        """
        pass

    def delete(self, session: ApiSession, item: Item) -> str:
        """
        Delete the item on Reddit.

        Args:
            session: Authenticated ApiSession
            item: Item to delete

        Returns:
            DELETED, or ALREADY_GONE when Reddit answers 404

        Raises:
            DeleteError: On a network failure or any other non-2xx status
        """
        logger.debug(f"Deleting {item.describe()}")

        try:
            response = session.post(self.endpoint, data={"id": item.fullname})
        except requests.RequestException as e:
            raise DeleteError(f"Network error deleting {item.fullname}: {e}") from e

        if response.status_code == 404:
            logger.info(f"{item.kind.capitalize()} {item.fullname} is already gone")
            return ALREADY_GONE

        if not 200 <= response.status_code < 300:
            raise DeleteError(
                f"Deleting {item.fullname} failed with status {response.status_code}",
                status_code=response.status_code,
            )

        logger.info(f"Deleted {item.kind} {item.fullname}")
        return DELETED
