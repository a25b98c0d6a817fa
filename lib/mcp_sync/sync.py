"""
Sync orchestration: Claude Code mcpServers -> Claude Desktop config.

Runs the read-merge-write pipeline one step at a time. Every failure is
terminal for the run and is returned, never raised, as a failed Result
wrapping the step that failed. The destination write is the only mutating
effect and happens after both reads and the merge succeed.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import SyncSettings
from .errors import ConfigurationError, LockError, SyncError, WriteError
from .paths import SyncPaths, resolve_paths
from .reporting import get_logger, log_success
from .result import Result
from .servers import describe_server, extract_mcp_servers, merge_mcp_servers
from .store import SyncLock, backup_file, read_json, write_json


class SyncState(str, Enum):
    START = "start"
    RESOLVE_PATHS = "resolve_paths"
    READ_SOURCE = "read_source"
    READ_DESTINATION = "read_destination"
    EXTRACT_SERVERS = "extract_servers"
    EMPTY_CHECK = "empty_check"
    MERGE = "merge"
    WRITE = "write"
    DONE = "done"
    FAILED = "failed"


FAILURE_CONTEXT = {
    SyncState.READ_SOURCE: "Failed to read Claude Code config",
    SyncState.READ_DESTINATION: "Failed to read Claude Desktop config",
    SyncState.WRITE: "Failed to write Claude Desktop config",
}


@dataclass
class SyncReport:
    """Outcome of a completed run."""
    paths: SyncPaths
    server_names: list[str] = field(default_factory=list)
    written: bool = False
    dry_run: bool = False
    backup_path: Path | None = None
    state: SyncState = SyncState.START

    @property
    def server_count(self) -> int:
        return len(self.server_names)


class SyncOrchestrator:
    """Sequences one sync run and tracks which state it reached."""

    def __init__(
        self,
        paths: SyncPaths | None = None,
        settings: SyncSettings | None = None,
        logger: logging.Logger | None = None,
    ):
        self.settings = settings or SyncSettings()
        self.paths = paths
        self.logger = logger or get_logger()
        self.state = SyncState.START
        self.failed_step: SyncState | None = None

    def _enter(self, state: SyncState) -> None:
        self.logger.debug("state: %s -> %s", self.state.value, state.value)
        self.state = state

    def _fail(self, error: Exception) -> Result:
        step = self.state
        self.failed_step = step
        self.state = SyncState.FAILED
        if step in FAILURE_CONTEXT:
            error = SyncError(step.value, FAILURE_CONTEXT[step], error)
        return Result.fail(error)

    def run(self) -> Result:
        self._enter(SyncState.RESOLVE_PATHS)
        if self.paths is None:
            try:
                self.paths = resolve_paths(home=self.settings.home)
            except ConfigurationError as e:
                return self._fail(e)
        paths = self.paths
        report = SyncReport(paths=paths, dry_run=self.settings.dry_run)

        self.logger.info("Starting MCP servers sync...")
        self.logger.info("Claude Code config: %s", paths.source)
        self.logger.info("Claude Desktop config: %s", paths.destination)

        self._enter(SyncState.READ_SOURCE)
        source = read_json(paths.source)
        if not source.success:
            return self._fail(source.error)

        self._enter(SyncState.READ_DESTINATION)
        destination = read_json(paths.destination)
        if not destination.success:
            return self._fail(destination.error)

        self._enter(SyncState.EXTRACT_SERVERS)
        servers = extract_mcp_servers(source.data)
        report.server_names = list(servers)

        self._enter(SyncState.EMPTY_CHECK)
        if not servers:
            self.logger.warning("No MCP servers found in Claude Code configuration")
            return self._done(report)

        self.logger.info("Found %d MCP server(s) in Claude Code config:", len(servers))
        for name, definition in servers.items():
            self.logger.info("  - %s: %s", name, describe_server(name, definition))

        self._enter(SyncState.MERGE)
        updated = merge_mcp_servers(destination.data, servers)

        if self.settings.dry_run:
            self.logger.info("Dry run: %s was not modified", paths.destination)
            return self._done(report)

        self._enter(SyncState.WRITE)
        written = self._write(updated, report)
        if not written.success:
            return self._fail(written.error)

        report.written = True
        log_success(self.logger, "Successfully synced %d MCP server(s) to Claude Desktop", report.server_count)
        self.logger.info("Please restart Claude Desktop for changes to take effect")
        return self._done(report)

    def _write(self, document: dict, report: SyncReport) -> Result:
        lock = SyncLock(self.paths.destination) if self.settings.use_lock else nullcontext()
        try:
            with lock:
                if self.settings.backup:
                    backup = backup_file(self.paths.destination)
                    if not backup.success:
                        return backup
                    report.backup_path = backup.data
                    self.logger.info("Backed up Claude Desktop config to %s", backup.data)
                return write_json(self.paths.destination, document)
        except (LockError, WriteError) as e:
            return Result.fail(e)

    def _done(self, report: SyncReport) -> Result:
        self._enter(SyncState.DONE)
        report.state = self.state
        return Result.ok(report)


def sync_mcp_servers(
    settings: SyncSettings | None = None,
    paths: SyncPaths | None = None,
    logger: logging.Logger | None = None,
) -> Result:
    """Run one sync and return a Result carrying a SyncReport on success."""
    return SyncOrchestrator(paths=paths, settings=settings, logger=logger).run()
