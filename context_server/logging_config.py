"""
Logging configuration for the context server.

The stdio transport owns stdout, so every handler here writes to stderr
or to a file.  Library output is quiet by default.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

_LIBRARY_LOGGERS = ("mcp", "httpx", "anyio")


def configure_quiet_mode(quiet: bool = True):
    """
    Configure logging to suppress verbose library output.

    Args:
        quiet: If True, only warnings and errors from the MCP SDK and its
            transport libraries get through.  If False, leave them alone.
    """
    if quiet:
        for name in _LIBRARY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def enable_debug_mode():
    """Enable debug-level logging to stderr."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Add stderr handler if not already present
    if not any(isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
               for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S"
        ))
        root_logger.addHandler(handler)

    for name in ("context_server", *_LIBRARY_LOGGERS):
        logging.getLogger(name).setLevel(logging.DEBUG)


def configure_ops_log(log_dir) -> RotatingFileHandler:
    """Configure a persistent operations log.

    Writes to {log_dir}/context-server-ops.log using a rotating file handler
    (1MB max, 3 backups).  Returns the handler so it can be removed later.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        str(log_dir / "context-server-ops.log"),
        maxBytes=1_000_000,
        backupCount=3,
    )
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    server_logger = logging.getLogger("context_server")
    server_logger.addHandler(handler)
    # Let INFO through even in quiet mode
    if server_logger.level == logging.NOTSET or server_logger.level > logging.INFO:
        server_logger.setLevel(logging.INFO)

    return handler
