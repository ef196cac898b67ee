"""
MCP stdio server for the context store.

Exposes ContextStore operations as MCP tools, and each item as a
``context://<id>`` resource.

Usage:
    context-server serve                                   # stdio server (via CLI)
    claude mcp add context -- context-server serve         # Claude Code integration

The store is created once per server and lives until shutdown.  All
store calls are serialized through a single asyncio.Lock.
"""

import asyncio
import logging
from typing import Annotated, Iterable, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import CallToolResult, Resource, TextContent, ToolAnnotations
from pydantic import AnyUrl, Field

from . import render
from .config import DEFAULT_SERVER_NAME, ServerConfig, load_or_default_config
from .errors import ContextError
from .protocol import TOOLS, clamp_limit, dispatch
from .samples import seed_sample_items
from .store import ContextStore
from .types import (
    CONTEXT_TYPES,
    DEFAULT_SEARCH_LIMIT,
    MAX_SEARCH_LIMIT,
    MIN_SEARCH_LIMIT,
    ContextRequest,
    CreateContextArgs,
    DeleteContextArgs,
    GetContextArgs,
    ListContextArgs,
    SearchContextArgs,
)

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Context management tools. "
    "Store named text, code, or data snippets with tags, "
    "then retrieve them by ID or find them by keyword."
)

_DESCRIPTIONS = {t.name: t.description for t in TOOLS}


# ---------------------------------------------------------------------------
# Tool annotations
# ---------------------------------------------------------------------------

_READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False)
_ADDITIVE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=False)
_DESTRUCTIVE = ToolAnnotations(destructiveHint=True, idempotentHint=False)

_TYPE_SCHEMA = {"enum": list(CONTEXT_TYPES)}


def _result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


class ContextServer(FastMCP):
    """FastMCP server that owns one ContextStore."""

    def __init__(self, store: ContextStore, name: str = DEFAULT_SERVER_NAME):
        super().__init__(name, instructions=INSTRUCTIONS)
        self.context_store = store
        self._store_lock = asyncio.Lock()

        self.add_tool(self.tool_add_context, name="add_context",
                      description=_DESCRIPTIONS["add_context"], annotations=_ADDITIVE)
        self.add_tool(self.tool_get_context, name="get_context",
                      description=_DESCRIPTIONS["get_context"], annotations=_READ_ONLY)
        self.add_tool(self.tool_search_context, name="search_context",
                      description=_DESCRIPTIONS["search_context"], annotations=_READ_ONLY)
        self.add_tool(self.tool_list_context, name="list_context",
                      description=_DESCRIPTIONS["list_context"], annotations=_READ_ONLY)
        self.add_tool(self.tool_delete_context, name="delete_context",
                      description=_DESCRIPTIONS["delete_context"], annotations=_DESTRUCTIVE)

    async def _run(self, tool: str, request: ContextRequest) -> CallToolResult:
        async with self._store_lock:
            try:
                text = dispatch(self.context_store, request)
            except ContextError as e:
                logger.info("%s failed: %s", tool, e)
                return _result(f"Error: {e}", is_error=True)
        logger.debug("%s ok (%d items in store)", tool, len(self.context_store))
        return _result(text)

    # -----------------------------------------------------------------------
    # Tools
    # -----------------------------------------------------------------------

    async def tool_add_context(
        self,
        name: Annotated[str, Field(description="Name of the context item")],
        content: Annotated[str, Field(description="Content of the context item")],
        type: Annotated[str, Field(
            description="Type of the context item",
            json_schema_extra=_TYPE_SCHEMA,
        )],
        tags: Annotated[Optional[list[str]], Field(
            description="Tags for categorizing the context item",
        )] = None,
    ) -> CallToolResult:
        """Add a new context item."""
        return await self._run(
            "add_context",
            CreateContextArgs(name=name, content=content, type=type, tags=tags),
        )

    async def tool_get_context(
        self,
        id: Annotated[str, Field(description="ID of the context item to retrieve")],
    ) -> CallToolResult:
        """Retrieve a context item."""
        return await self._run("get_context", GetContextArgs(id=id))

    async def tool_search_context(
        self,
        query: Annotated[str, Field(description="Search query")],
        type: Annotated[Optional[str], Field(
            description="Filter by type (optional)",
            json_schema_extra=_TYPE_SCHEMA,
        )] = None,
        tags: Annotated[Optional[list[str]], Field(
            description="Filter by tags (optional)",
        )] = None,
        limit: Annotated[Optional[int], Field(
            description=f"Maximum number of results to return (default: {DEFAULT_SEARCH_LIMIT})",
            json_schema_extra={"minimum": MIN_SEARCH_LIMIT, "maximum": MAX_SEARCH_LIMIT},
        )] = None,
    ) -> CallToolResult:
        """Search context items."""
        return await self._run(
            "search_context",
            SearchContextArgs(query=query, type=type, tags=tags, limit=clamp_limit(limit)),
        )

    async def tool_list_context(self) -> CallToolResult:
        """List all context items."""
        return await self._run("list_context", ListContextArgs())

    async def tool_delete_context(
        self,
        id: Annotated[str, Field(description="ID of the context item to delete")],
    ) -> CallToolResult:
        """Delete a context item."""
        return await self._run("delete_context", DeleteContextArgs(id=id))

    # -----------------------------------------------------------------------
    # Resources
    # -----------------------------------------------------------------------

    async def list_resources(self) -> list[Resource]:
        """One resource per stored item."""
        async with self._store_lock:
            items = self.context_store.list()
        return [Resource(**render.resource_entry(item)) for item in items]

    async def read_resource(self, uri: AnyUrl | str) -> Iterable[ReadResourceContents]:
        """Render the item behind a ``context://<id>`` URI.

        Raises:
            InvalidUri: If the URI is not a context:// URI
            NotFound: If the item does not exist
        """
        id = render.parse_context_uri(str(uri))
        async with self._store_lock:
            item = self.context_store.get(id)
        return [ReadResourceContents(
            content=render.render_resource(item),
            mime_type=render.RESOURCE_MIME_TYPE,
        )]


def create_server(config: Optional[ServerConfig] = None) -> ContextServer:
    """Build the store (seeded unless disabled) and the server that owns it."""
    config = config or load_or_default_config()
    store = ContextStore()
    if config.seed_samples:
        seed_sample_items(store)
    return ContextServer(store, name=config.server_name)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(config: Optional[ServerConfig] = None):
    """Run the MCP stdio server."""
    import os
    import signal
    # anyio's stdin reader shields the blocking readline from cancellation,
    # so the first Ctrl+C would not take effect.  Exit directly instead.
    signal.signal(signal.SIGINT, lambda *_: os._exit(130))

    config = config or load_or_default_config()
    if config.log_dir is not None:
        from .logging_config import configure_ops_log
        configure_ops_log(config.log_dir)

    server = create_server(config)
    logger.info(
        "%s starting on stdio with %d items",
        config.server_name, len(server.context_store),
    )
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
