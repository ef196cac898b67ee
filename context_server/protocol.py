"""
Tool request decoding and dispatch.

Untyped tool arguments (a JSON object from the wire or the command line)
are decoded once, here, into one of the typed request dataclasses.  The
store and query engine only ever see typed requests.

    call_tool(store, "search_context", {"query": "api", "limit": 5})
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from . import render
from .errors import ContextError, InvalidArgument, UnknownOperation
from .query import search
from .store import ContextStore
from .types import (
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


@dataclass
class ToolSpec:
    name: str
    description: str


TOOLS = [
    ToolSpec("add_context", "Add a new context item to the store"),
    ToolSpec("get_context", "Retrieve a context item by ID"),
    ToolSpec("search_context", "Search context items by name, content, or tags"),
    ToolSpec("list_context", "List all context items"),
    ToolSpec("delete_context", "Delete a context item by ID"),
]

TOOL_NAMES = frozenset(t.name for t in TOOLS)


@dataclass
class ToolResult:
    """Outcome of one tool call: display text, and whether it failed."""
    text: str
    is_error: bool = False


def clamp_limit(limit: Optional[int]) -> int:
    """Clamp a caller-supplied search limit into the advertised [1, 100] range."""
    if limit is None:
        return DEFAULT_SEARCH_LIMIT
    return min(MAX_SEARCH_LIMIT, max(MIN_SEARCH_LIMIT, limit))


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _opt_str(args: Mapping[str, Any], key: str) -> Optional[str]:
    value = args.get(key)
    if value is None or isinstance(value, str):
        return value
    raise InvalidArgument(key, "string")


def _opt_str_list(args: Mapping[str, Any], key: str) -> Optional[list[str]]:
    value = args.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidArgument(key, "array of strings")
    return value


def _opt_int(args: Mapping[str, Any], key: str) -> Optional[int]:
    value = args.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise InvalidArgument(key, "integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidArgument(key, "integer")


def decode_request(name: str, arguments: Optional[Mapping[str, Any]] = None) -> ContextRequest:
    """
    Decode a tool name and its raw arguments into a typed request.

    Presence of required fields is not checked here; that is the job of
    the validator and the store, so that each failure carries its own
    error type.

    Raises:
        UnknownOperation: If the tool name is not recognized
        InvalidArgument: If an argument has the wrong JSON type
    """
    args = arguments or {}
    if name == "add_context":
        return CreateContextArgs(
            name=_opt_str(args, "name"),
            content=_opt_str(args, "content"),
            type=_opt_str(args, "type"),
            tags=_opt_str_list(args, "tags"),
        )
    if name == "get_context":
        return GetContextArgs(id=_opt_str(args, "id"))
    if name == "search_context":
        return SearchContextArgs(
            query=_opt_str(args, "query"),
            type=_opt_str(args, "type"),
            tags=_opt_str_list(args, "tags"),
            limit=clamp_limit(_opt_int(args, "limit")),
        )
    if name == "list_context":
        return ListContextArgs()
    if name == "delete_context":
        return DeleteContextArgs(id=_opt_str(args, "id"))
    raise UnknownOperation(name)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def dispatch(store: ContextStore, request: ContextRequest) -> str:
    """
    Run exactly one store or query operation and render its result.

    Raises:
        ContextError: Whatever the underlying operation raises
    """
    if isinstance(request, CreateContextArgs):
        return render.render_created(store.create(request))
    if isinstance(request, GetContextArgs):
        return render.render_item(store.get(request.id))
    if isinstance(request, SearchContextArgs):
        results = search(
            store, request.query,
            type=request.type, tags=request.tags, limit=request.limit,
        )
        return render.render_search_results(results)
    if isinstance(request, ListContextArgs):
        return render.render_listing(store.list())
    if isinstance(request, DeleteContextArgs):
        return render.render_deleted(store.delete(request.id))
    raise TypeError(f"Not a context request: {request!r}")


def call_tool(
    store: ContextStore,
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
) -> ToolResult:
    """Decode, dispatch, and turn any ContextError into an error result."""
    try:
        request = decode_request(name, arguments)
        return ToolResult(dispatch(store, request))
    except ContextError as e:
        return ToolResult(f"Error: {e}", is_error=True)
