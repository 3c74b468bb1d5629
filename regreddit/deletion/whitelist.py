"""
Whitelist filter deciding which items are exempt from deletion.
"""
from typing import Iterable

from regreddit.auth.credentials import normalize_subreddit
from regreddit.models import Item


def keep_for_deletion(item: Item, whitelist: Iterable[str], case_sensitive: bool = False) -> bool:
    """
    Decide whether an item should be deleted.

    Args:
        item: Item from a listing
        whitelist: Subreddit names exempt from deletion
        case_sensitive: Compare names exactly instead of case-folded

    Returns:
        False if the item's subreddit is whitelisted, True otherwise
    """
    names = {normalize_subreddit(name, case_sensitive) for name in whitelist}
    return normalize_subreddit(item.subreddit, case_sensitive) not in names


class Whitelist:
    """Set of subreddit names whose content is never deleted."""

    def __init__(self, names: Iterable[str] = (), case_sensitive: bool = False):
        self.case_sensitive = case_sensitive
        self.names = frozenset(normalize_subreddit(name, case_sensitive) for name in names)

    def keep_for_deletion(self, item: Item) -> bool:
        return normalize_subreddit(item.subreddit, self.case_sensitive) not in self.names

    def __contains__(self, subreddit: str) -> bool:
        return normalize_subreddit(subreddit, self.case_sensitive) in self.names

    def __len__(self) -> int:
        return len(self.names)
