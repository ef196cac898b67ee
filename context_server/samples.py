"""
Sample context items inserted on every server start.

The store is not persistent, so these are re-seeded identically each
run, before any request is served.
"""

import logging
from typing import TYPE_CHECKING

from .types import ContextItem, utc_now

if TYPE_CHECKING:
    from .store import ContextStore

logger = logging.getLogger(__name__)


SAMPLE_ITEMS = [
    {
        "id": "1",
        "name": "Project Overview",
        "content": (
            "This is a Model Context Protocol (MCP) server that provides context "
            "management tools. It allows storing, retrieving, and managing "
            "contextual information."
        ),
        "type": "text",
        "tags": ["project", "overview"],
    },
    {
        "id": "2",
        "name": "API Guidelines",
        "content": (
            "When building APIs, always follow REST principles, use proper HTTP "
            "status codes, and implement proper error handling."
        ),
        "type": "text",
        "tags": ["api", "guidelines", "best-practices"],
    },
    {
        "id": "3",
        "name": "Sample Code",
        "content": (
            "function greet(name: string): string {\n"
            "  return `Hello, ${name}!`;\n"
            "}\n"
            "\n"
            "// Usage\n"
            "const message = greet(\"World\");\n"
            "console.log(message);"
        ),
        "type": "code",
        "tags": ["typescript", "example"],
    },
]


def seed_sample_items(store: "ContextStore") -> list[ContextItem]:
    """Insert the sample items, all stamped with the same instant."""
    now = utc_now()
    seeded = []
    for sample in SAMPLE_ITEMS:
        item = ContextItem(
            id=sample["id"],
            name=sample["name"],
            content=sample["content"],
            type=sample["type"],
            tags=list(sample["tags"]),
            timestamp=now,
            created=now,
            updated=now,
        )
        seeded.append(store.add(item))
    logger.debug("Seeded %d sample context items", len(seeded))
    return seeded
