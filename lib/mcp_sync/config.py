"""
Runtime settings for a sync run.

Built from the process environment and, when run from the CLI, from parsed
arguments. Paths are never configurable here, only the home directory.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping

LOG_LEVEL_ENV = "MCP_SYNC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class SyncSettings:
    """Options for one sync run."""
    home: str | None = None  # None means read $HOME
    dry_run: bool = False
    backup: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    use_lock: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SyncSettings":
        env = os.environ if environ is None else environ
        level = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
        return cls(log_level=level)

    @classmethod
    def from_args(cls, args, environ: Mapping[str, str] | None = None) -> "SyncSettings":
        """Layer CLI flags over environment defaults."""
        settings = cls.from_env(environ)
        settings.home = getattr(args, "home", None)
        settings.dry_run = getattr(args, "dry_run", False)
        settings.backup = getattr(args, "backup", False)
        settings.use_lock = not getattr(args, "no_lock", False)
        if getattr(args, "verbose", False):
            settings.log_level = "DEBUG"
        elif getattr(args, "quiet", False):
            settings.log_level = "WARNING"
        return settings
