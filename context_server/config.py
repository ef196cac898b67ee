"""
Configuration management for the context server.

The configuration is stored as a TOML file in the server's home
directory (CONTEXT_SERVER_HOME, default ~/.context-server/).  A missing
file is not an error: the server runs with defaults.
"""

import os
import tomllib
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import tomli_w


CONFIG_FILENAME = "context-server.toml"
CONFIG_VERSION = 1
DEFAULT_SERVER_NAME = "mcp-context-server"


def get_home_directory() -> Path:
    """Server home directory, respecting CONTEXT_SERVER_HOME."""
    home = os.environ.get("CONTEXT_SERVER_HOME")
    if home:
        return Path(home).expanduser()
    return Path.home() / ".context-server"


@dataclass
class ServerConfig:
    """Complete server configuration."""
    path: Path
    version: int = CONFIG_VERSION
    created: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    # Name advertised to MCP clients
    server_name: str = DEFAULT_SERVER_NAME

    # Insert the sample items at startup
    seed_samples: bool = True

    # Directory for the operations log; None disables it
    log_dir: Optional[Path] = None

    @property
    def config_path(self) -> Path:
        """Path to the TOML config file."""
        return self.path / CONFIG_FILENAME

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_path.exists()


def load_config(home: Path) -> ServerConfig:
    """
    Load configuration from a home directory.

    Raises:
        FileNotFoundError: If config doesn't exist
        ValueError: If config is invalid
    """
    config_path = home / CONFIG_FILENAME

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    meta = data.get("config", {})
    version = meta.get("version", 1)
    if version > CONFIG_VERSION:
        raise ValueError(f"Config version {version} is newer than supported ({CONFIG_VERSION})")

    server = data.get("server", {})
    seed_samples = server.get("seed_samples", True)
    if not isinstance(seed_samples, bool):
        raise ValueError(f"server.seed_samples must be true or false, got {seed_samples!r}")

    logging_section = data.get("logging", {})
    log_dir = logging_section.get("dir")

    return ServerConfig(
        path=home,
        version=version,
        created=meta.get("created", ""),
        server_name=server.get("name", DEFAULT_SERVER_NAME),
        seed_samples=seed_samples,
        log_dir=Path(log_dir).expanduser() if log_dir else None,
    )


def save_config(config: ServerConfig) -> None:
    """
    Save configuration to the home directory.

    Creates the directory if it doesn't exist.
    """
    config.path.mkdir(parents=True, exist_ok=True)

    data = {
        "config": {
            "version": config.version,
            "created": config.created,
        },
        "server": {
            "name": config.server_name,
            "seed_samples": config.seed_samples,
        },
    }
    if config.log_dir is not None:
        data["logging"] = {"dir": str(config.log_dir)}

    with open(config.config_path, "wb") as f:
        tomli_w.dump(data, f)


def load_or_default_config(home: Optional[Path] = None) -> ServerConfig:
    """
    Load existing config, or return defaults without writing anything.

    This is the main entry point for config management.
    """
    home = home or get_home_directory()
    if (home / CONFIG_FILENAME).exists():
        return load_config(home)
    return ServerConfig(path=home)
