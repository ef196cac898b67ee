"""
Data types for the context store.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal, Optional


ContextType = Literal["text", "code", "data"]

# Allowed values for ContextItem.type, in the order they are advertised
CONTEXT_TYPES: tuple[str, ...] = ("text", "code", "data")

# Maximum content length in UTF-16 code units (inclusive).  Characters
# outside the Basic Multilingual Plane count as two.
MAX_CONTENT_LENGTH = 50_000

DEFAULT_SEARCH_LIMIT = 10
MIN_SEARCH_LIMIT = 1
MAX_SEARCH_LIMIT = 100


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Render an instant as ISO-8601 UTC with milliseconds: 2026-01-30T10:00:00.000Z"""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class ContextItem:
    """
    A single stored context record.

    Items are owned by the ContextStore. They are never mutated in place:
    ``created``, ``updated`` and ``timestamp`` are stamped once, with the
    same instant, when the item is created.

    Attributes:
        id: Opaque identifier, unique within the store
        name: Display name
        content: Body text (at most MAX_CONTENT_LENGTH characters)
        type: One of CONTEXT_TYPES
        tags: Ordered tags; never None
        timestamp: Creation instant, kept for display
        created: Creation instant
        updated: Last-modified instant (equal to created)
    """
    id: str
    name: str
    content: str
    type: ContextType
    tags: list[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=utc_now)
    created: datetime = field(default_factory=utc_now)
    updated: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation, field order as displayed to callers."""
        return {
            "id": self.id,
            "name": self.name,
            "content": self.content,
            "type": self.type,
            "tags": list(self.tags),
            "timestamp": format_timestamp(self.timestamp),
            "created": format_timestamp(self.created),
            "updated": format_timestamp(self.updated),
        }


# ---------------------------------------------------------------------------
# Typed requests, one per tool.  Produced by protocol.decode_request().
# ---------------------------------------------------------------------------

@dataclass
class CreateContextArgs:
    name: Optional[str] = None
    content: Optional[str] = None
    type: Optional[str] = None
    tags: Optional[list[str]] = None


@dataclass
class GetContextArgs:
    id: Optional[str] = None


@dataclass
class SearchContextArgs:
    query: Optional[str] = None
    type: Optional[str] = None
    tags: Optional[list[str]] = None
    limit: int = DEFAULT_SEARCH_LIMIT


@dataclass
class ListContextArgs:
    pass


@dataclass
class DeleteContextArgs:
    id: Optional[str] = None


ContextRequest = (
    CreateContextArgs | GetContextArgs | SearchContextArgs
    | ListContextArgs | DeleteContextArgs
)
