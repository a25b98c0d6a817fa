#!/usr/bin/env python3
"""
sync-claude-mcp - Copy MCP servers from Claude Code into Claude Desktop.

Reads mcpServers from ~/.claude.json and replaces the mcpServers block of
~/Library/Application Support/Claude/claude_desktop_config.json with it.
Every other Claude Desktop setting is kept as-is.

Usage:
    sync-claude-mcp [--dry-run] [--backup] [--home PATH] [-v | -q]
    python -m lib.mcp_sync.cli [...]    (from a source checkout)

Environment:
    HOME: home directory both config paths are derived from (required
          unless --home is given)
    MCP_SYNC_LOG_LEVEL: default log level (DEBUG, INFO, WARNING, ERROR)

Exit codes:
    0  synced, or nothing to sync
    1  any step failed
"""

import argparse
import sys

from . import __version__
from .config import SyncSettings
from .reporting import configure_logging
from .sync import sync_mcp_servers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sync-claude-mcp",
        description="sync-claude-mcp: Sync MCP servers from Claude Code to Claude Desktop",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"sync-claude-mcp {__version__}")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be synced without writing")
    parser.add_argument("--backup", action="store_true", help="Copy Claude Desktop config to .bak before writing")
    parser.add_argument("--home", help="Home directory to use instead of $HOME")
    parser.add_argument("--no-lock", action="store_true", help="Skip the destination lock file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only warnings and errors")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = SyncSettings.from_args(args)
    logger = configure_logging(settings.log_level)

    result = sync_mcp_servers(settings=settings, logger=logger)
    if not result.success:
        logger.error(str(result.error))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
