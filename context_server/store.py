"""
In-memory context store.

The store is the source of truth for context items: identity, content,
tags and timestamps.  It lives for the lifetime of the process; nothing
is persisted and nothing is evicted.

Operations run synchronously to completion.  The store holds no lock of
its own: callers that handle requests concurrently must serialize access
(the MCP server does this with a single asyncio.Lock).
"""

from typing import Callable, Iterator, Optional

from .errors import MissingId, NotFound
from .ids import generate_id
from .types import ContextItem, CreateContextArgs, utc_now
from .validation import validate_create


class ContextStore:
    """
    Mapping from item ID to ContextItem.

    Every key maps to exactly one item whose ``id`` equals that key.
    Items are never mutated in place; they are only created and deleted.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_id):
        """
        Args:
            id_factory: Callable returning a fresh ID for each created item
        """
        self._items: dict[str, ContextItem] = {}
        self._id_factory = id_factory

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    def create(self, args: CreateContextArgs) -> ContextItem:
        """
        Validate and insert a new item.

        ``timestamp``, ``created`` and ``updated`` are all stamped with
        the same instant.

        Args:
            args: Caller-supplied fields

        Returns:
            The stored ContextItem, with its generated ID

        Raises:
            MissingFields, InvalidType, ContentTooLarge
        """
        valid = validate_create(args)
        now = utc_now()
        item = ContextItem(
            id=self._id_factory(),
            name=valid.name,
            content=valid.content,
            type=valid.type,
            tags=valid.tags,
            timestamp=now,
            created=now,
            updated=now,
        )
        self._items[item.id] = item
        return item

    def add(self, item: ContextItem) -> ContextItem:
        """Insert a fully-formed item under its own ID (used for seeding)."""
        if not item.id:
            raise MissingId()
        self._items[item.id] = item
        return item

    def delete(self, id: Optional[str]) -> ContextItem:
        """
        Remove an item.

        Not idempotent: deleting the same ID twice raises NotFound
        the second time.

        Returns:
            The removed item

        Raises:
            MissingId: If id is empty
            NotFound: If no item has this ID
        """
        item = self.get(id)
        del self._items[item.id]
        return item

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    def get(self, id: Optional[str]) -> ContextItem:
        """
        Get an item by ID.

        Raises:
            MissingId: If id is empty
            NotFound: If no item has this ID
        """
        if not id:
            raise MissingId()
        item = self._items.get(id)
        if item is None:
            raise NotFound(id)
        return item

    def list(self) -> list[ContextItem]:
        """All items, in the store's iteration order."""
        return list(self._items.values())

    def __iter__(self) -> Iterator[ContextItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items
