"""
Data models for Reddit things handled by regreddit.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

POST = "post"
COMMENT = "comment"

# Reddit thing-kind prefixes
KIND_PREFIXES = {
    "t1": COMMENT,
    "t3": POST,
}


@dataclass(frozen=True)
class Item:
    """A deletable post or comment."""

    kind: str
    item_id: str
    subreddit: str
    label: str = ""

    @property
    def fullname(self) -> str:
        prefix = "t3" if self.kind == POST else "t1"
        return f"{prefix}_{self.item_id}"

    def describe(self) -> str:
        text = f"{self.kind} {self.fullname} in r/{self.subreddit}"
        if self.label:
            text += f" ({self.label})"
        return text

    @classmethod
    def from_thing(cls, thing: Dict[str, Any]) -> Optional["Item"]:
        """
        Build an Item from a listing child ({"kind": "t3", "data": {...}}).

        Returns:
            Item, or None if the child is not a post or comment
        """
        if not isinstance(thing, dict):
            return None

        prefix = thing.get("kind")
        kind = KIND_PREFIXES.get(prefix) if isinstance(prefix, str) else None
        data = thing.get("data")
        if kind is None or not isinstance(data, dict):
            return None

        item_id = data.get("id")
        subreddit = data.get("subreddit")
        if not all(isinstance(v, str) and v for v in (item_id, subreddit)):
            return None

        if kind == POST:
            label = data.get("title") or ""
        else:
            label = data.get("body") or ""
        label = " ".join(label.split()) if isinstance(label, str) else ""
        if len(label) > 40:
            label = label[:37] + "..."

        return cls(kind=kind, item_id=item_id, subreddit=subreddit, label=label)


@dataclass
class ListingPage:
    """One page of a listing."""

    children: List[Dict[str, Any]] = field(default_factory=list)
    after: Optional[str] = None
    page_number: int = 1
