"""
Linear search over the context store.

There is no index and no ranking: every match is equally weighted and
results come back in store iteration order.  Accumulation stops as soon
as ``limit`` matches have been seen, so later items are never examined
even if they would also match.
"""

from typing import Iterable, Optional

from .errors import MissingQuery
from .types import DEFAULT_SEARCH_LIMIT, ContextItem


def _matches_text(item: ContextItem, term: str) -> bool:
    """Case-insensitive substring match on name, content, or any tag."""
    return (
        term in item.name.lower()
        or term in item.content.lower()
        or any(term in tag.lower() for tag in item.tags)
    )


def _matches_type(item: ContextItem, type: Optional[str]) -> bool:
    return not type or item.type == type


def _matches_tags(item: ContextItem, tags: Optional[list[str]]) -> bool:
    """True if no tag filter, or the item shares at least one tag with it."""
    if not tags:
        return True
    return any(tag in item.tags for tag in tags)


def search(
    items: Iterable[ContextItem],
    query: Optional[str],
    type: Optional[str] = None,
    tags: Optional[list[str]] = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> list[ContextItem]:
    """
    Find items matching a free-text query and optional filters.

    An item is included when the text, type and tag predicates all hold.
    The tag filter is exact and case-sensitive; the text match is not.

    Args:
        items: Items to scan, normally a ContextStore
        query: Search term (required)
        type: Only items of this type
        tags: Only items having at least one of these tags
        limit: Stop after this many matches; not clamped here

    Returns:
        The first ``limit`` matches in iteration order

    Raises:
        MissingQuery: If query is empty
    """
    if not query:
        raise MissingQuery()
    if limit < 1:
        return []

    term = query.lower()
    results: list[ContextItem] = []
    for item in items:
        if (
            _matches_text(item, term)
            and _matches_type(item, type)
            and _matches_tags(item, tags)
        ):
            results.append(item)
            if len(results) >= limit:
                break
    return results
