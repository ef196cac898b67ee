"""
Errors raised by the context store, and error logging for the CLI.

Store and query operations raise ContextError subclasses; adapters
(MCP server, CLI) catch them and turn them into "Error: ..." responses.
Unexpected failures are logged with a full stack trace while the user
sees a clean message.
"""

import os
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class ContextError(ValueError):
    """Base class for all locally-recoverable context store failures."""


class MissingFields(ContextError):
    def __init__(self):
        super().__init__("Missing required fields: name, content, type")


class InvalidType(ContextError):
    def __init__(self, type: Optional[str] = None):
        self.type = type
        super().__init__("Invalid type. Must be one of: text, code, data")


class ContentTooLarge(ContextError):
    def __init__(self, length: int = 0):
        self.length = length
        super().__init__("Content too large. Maximum size is 50KB")


class MissingId(ContextError):
    def __init__(self):
        super().__init__("Missing required field: id")


class MissingQuery(ContextError):
    def __init__(self):
        super().__init__("Missing required field: query")


class NotFound(ContextError):
    def __init__(self, id: str):
        self.id = id
        super().__init__(f"Context item not found: {id}")


class InvalidUri(ContextError):
    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Invalid resource URI: {uri}")


class UnknownOperation(ContextError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgument(ContextError):
    """An argument was present but had the wrong JSON type."""

    def __init__(self, field: str, expected: str):
        self.field = field
        super().__init__(f"Invalid argument '{field}': expected {expected}")


# ---------------------------------------------------------------------------
# Error log
# ---------------------------------------------------------------------------

def _error_log_path(home: Optional[Path] = None) -> Path:
    """Resolve error log path: explicit home, then CONTEXT_SERVER_HOME, then ~/.context-server."""
    home = home or os.environ.get("CONTEXT_SERVER_HOME")
    if home:
        return Path(home) / "context-server-errors.log"
    return Path.home() / ".context-server" / "context-server-errors.log"


def log_exception(exc: Exception, context: str = "", home: Optional[Path] = None) -> Path:
    """
    Log exception with full traceback to file.

    Args:
        exc: The exception that occurred
        context: Optional context string (e.g., command name)
        home: Directory for the log, overriding CONTEXT_SERVER_HOME

    Returns:
        Path to the error log file
    """
    log_path = _error_log_path(home)
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(log_path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
        with os.fdopen(fd, "a") as f:
            f.write(f"\n{'='*60}\n")
            f.write(f"[{timestamp}]")
            if context:
                f.write(f" {context}")
            f.write("\n")
            f.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    except OSError:
        pass  # Never fail over an unwritable error log
    return log_path
