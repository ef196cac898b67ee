"""
MCP Context Server

An in-memory store of named context items (text, code, or data) with
tags, exposed to AI agents as MCP tools and ``context://`` resources.

Quick Start:
    from context_server import ContextStore, CreateContextArgs, search

    store = ContextStore()
    item = store.create(CreateContextArgs(name="Notes", content="hello world", type="text"))
    results = search(store, "hello")

CLI Usage:
    context-server serve
    context-server call search_context '{"query": "api"}'

Environment Variables:
    CONTEXT_SERVER_HOME     - Directory holding context-server.toml
    CONTEXT_SERVER_VERBOSE  - Set to 1 for debug logging to stderr

Nothing is persisted: the store lives for the lifetime of the process
and the sample items are re-seeded on every start.
"""

from .errors import (
    ContentTooLarge,
    ContextError,
    InvalidArgument,
    InvalidType,
    InvalidUri,
    MissingFields,
    MissingId,
    MissingQuery,
    NotFound,
    UnknownOperation,
)
from .ids import generate_id
from .query import search
from .store import ContextStore
from .types import (
    CONTEXT_TYPES,
    MAX_CONTENT_LENGTH,
    ContextItem,
    CreateContextArgs,
    DeleteContextArgs,
    GetContextArgs,
    ListContextArgs,
    SearchContextArgs,
)

__version__ = "1.0.0"
__all__ = [
    "ContextStore",
    "ContextItem",
    "CreateContextArgs",
    "GetContextArgs",
    "SearchContextArgs",
    "ListContextArgs",
    "DeleteContextArgs",
    "search",
    "generate_id",
    "CONTEXT_TYPES",
    "MAX_CONTENT_LENGTH",
    "ContextError",
    "MissingFields",
    "InvalidType",
    "ContentTooLarge",
    "MissingId",
    "MissingQuery",
    "NotFound",
    "InvalidUri",
    "UnknownOperation",
    "InvalidArgument",
]
