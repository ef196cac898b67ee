"""
Text rendering of context items for tool results and resources.
"""

import json
import re

from .errors import InvalidUri
from .types import ContextItem, format_timestamp

URI_SCHEME = "context://"
RESOURCE_MIME_TYPE = "text/plain"

_CONTEXT_URI_RE = re.compile(r'^context://(.+)$', re.DOTALL)


def _dump(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def render_item(item: ContextItem) -> str:
    """Full item as indented JSON."""
    return _dump(item.to_dict())


def render_created(item: ContextItem) -> str:
    return f"Context item added successfully with ID: {item.id}"


def render_deleted(item: ContextItem) -> str:
    return f"Context item deleted successfully: {item.name}"


def render_search_results(items: list[ContextItem]) -> str:
    return f"Found {len(items)} matching context items:\n\n{_dump([i.to_dict() for i in items])}"


def render_listing(items: list[ContextItem]) -> str:
    return f"Total context items: {len(items)}\n\n{_dump([i.to_dict() for i in items])}"


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

def context_uri(item: ContextItem) -> str:
    return f"{URI_SCHEME}{item.id}"


def parse_context_uri(uri: str) -> str:
    """Extract the item ID from a ``context://<id>`` URI.

    Raises:
        InvalidUri: If the URI has another scheme or an empty ID
    """
    match = _CONTEXT_URI_RE.match(str(uri))
    if not match:
        raise InvalidUri(str(uri))
    return match.group(1)


def resource_entry(item: ContextItem) -> dict[str, str]:
    """Resource listing entry for an item."""
    return {
        "uri": context_uri(item),
        "name": item.name,
        "description": f"Context item: {item.name} ({item.type})",
        "mimeType": RESOURCE_MIME_TYPE,
    }


def render_resource(item: ContextItem) -> str:
    """Human-readable rendering used when a context:// resource is read."""
    return (
        f"Name: {item.name}\n"
        f"Type: {item.type}\n"
        f"Tags: {', '.join(item.tags)}\n"
        f"Timestamp: {format_timestamp(item.timestamp)}\n"
        f"\n"
        f"Content:\n{item.content}"
    )
