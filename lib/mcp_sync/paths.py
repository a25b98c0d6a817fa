"""
Path resolution for the Claude Code and Claude Desktop config files.

Pure functions: nothing here touches the filesystem.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import ConfigurationError

SOURCE_CONFIG_NAME = ".claude.json"
DESTINATION_CONFIG_PARTS = ("Library", "Application Support", "Claude", "claude_desktop_config.json")


def get_home_directory(environ: Mapping[str, str] | None = None) -> str:
    """Return $HOME from ``environ`` (defaults to the process environment)."""
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if not home:
        raise ConfigurationError("HOME environment variable not found")
    return home


def get_source_config_path(home: str | Path) -> Path:
    return Path(home) / SOURCE_CONFIG_NAME


def get_destination_config_path(home: str | Path) -> Path:
    return Path(home).joinpath(*DESTINATION_CONFIG_PARTS)


@dataclass(frozen=True)
class SyncPaths:
    """Source (Claude Code) and destination (Claude Desktop) config paths."""
    source: Path
    destination: Path

    @classmethod
    def from_home(cls, home: str | Path) -> "SyncPaths":
        return cls(
            source=get_source_config_path(home),
            destination=get_destination_config_path(home),
        )


def resolve_paths(
    home: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> SyncPaths:
    """Resolve both config paths; an explicit ``home`` skips the env lookup."""
    if home is None:
        home = get_home_directory(environ)
    return SyncPaths.from_home(home)
