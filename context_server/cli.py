"""
CLI interface for the context server.

Usage:
    context-server serve
    context-server tools
    context-server call search_context '{"query": "api"}'
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from .config import CONFIG_FILENAME, ServerConfig, get_home_directory, load_or_default_config, save_config
from .logging_config import configure_quiet_mode, enable_debug_mode
from .protocol import TOOLS, call_tool
from .samples import seed_sample_items
from .store import ContextStore


# Configure quiet mode by default (suppress verbose library output)
# Set CONTEXT_SERVER_VERBOSE=1 to enable debug mode via environment
if os.environ.get("CONTEXT_SERVER_VERBOSE") == "1":
    enable_debug_mode()
else:
    configure_quiet_mode(quiet=True)


def _version_callback(value: bool):
    if value:
        from importlib.metadata import version
        print(f"context-server {version('mcp-context-server')}")
        raise typer.Exit()


def _verbose_callback(value: bool):
    if value:
        enable_debug_mode()


# Global state for CLI options
_home_override: Optional[Path] = None


def _home_callback(value: Optional[Path]):
    global _home_override
    if value is not None:
        _home_override = value


def _get_config() -> ServerConfig:
    return load_or_default_config(_home_override or get_home_directory())


app = typer.Typer(
    name="context-server",
    help="MCP server for storing and searching context items.",
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode=None,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option(
        "--verbose", "-v",
        help="Enable debug-level logging to stderr",
        callback=_verbose_callback,
        is_eager=True,
    )] = False,
    version: Annotated[Optional[bool], typer.Option(
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    )] = None,
    home: Annotated[Optional[Path], typer.Option(
        "--home",
        envvar="CONTEXT_SERVER_HOME",
        help="Directory holding context-server.toml (default: ~/.context-server/)",
        callback=_home_callback,
        is_eager=True,
    )] = None,
):
    """MCP server for storing and searching context items."""
    # With no subcommand, run the server
    if ctx.invoked_subcommand is None:
        serve()


@app.command()
def serve():
    """Start the MCP stdio server."""
    from .mcp import main as mcp_main
    mcp_main(_get_config())


@app.command()
def tools():
    """List the tools the server exposes."""
    width = max(len(t.name) for t in TOOLS)
    for t in TOOLS:
        typer.echo(f"{t.name:{width}s}  {t.description}")


@app.command()
def call(
    tool: Annotated[str, typer.Argument(help="Tool name, e.g. search_context")],
    arguments: Annotated[Optional[str], typer.Argument(
        help='Tool arguments as a JSON object, e.g. \'{"query": "api"}\'',
    )] = None,
):
    """Call one tool against a freshly seeded in-memory store."""
    try:
        args = json.loads(arguments) if arguments else {}
    except json.JSONDecodeError as e:
        typer.echo(f"Error: arguments are not valid JSON: {e}", err=True)
        raise typer.Exit(1)
    if not isinstance(args, dict):
        typer.echo("Error: arguments must be a JSON object", err=True)
        raise typer.Exit(1)

    config = _get_config()
    store = ContextStore()
    if config.seed_samples:
        seed_sample_items(store)

    result = call_tool(store, tool, args)
    if result.is_error:
        typer.echo(result.text, err=True)
        raise typer.Exit(1)
    typer.echo(result.text)


@app.command()
def init(
    force: Annotated[bool, typer.Option(
        "--force", "-f",
        help="Overwrite an existing config file",
    )] = False,
    no_samples: Annotated[bool, typer.Option(
        "--no-samples",
        help="Start the server with an empty store",
    )] = False,
):
    """Write a default config file."""
    home = _home_override or get_home_directory()
    config = ServerConfig(path=home, seed_samples=not no_samples)
    if config.exists() and not force:
        typer.echo(f"Config already exists: {config.config_path} (use --force to overwrite)", err=True)
        raise typer.Exit(1)
    save_config(config)
    typer.echo(f"Wrote {home / CONFIG_FILENAME}")


# -----------------------------------------------------------------------------

def main():
    try:
        app()
    except SystemExit:
        raise  # Let typer handle exit codes
    except KeyboardInterrupt:
        raise SystemExit(130)  # Standard exit code for Ctrl+C
    except Exception as e:
        # Log full traceback to file, show clean message to user
        from .errors import log_exception
        log_path = log_exception(e, context="context-server CLI", home=_home_override)
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Details logged to {log_path}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
