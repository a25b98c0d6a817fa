"""
MCP Sync - Copy MCP server definitions from Claude Code to Claude Desktop.

Usage:
    from mcp_sync import sync_mcp_servers, SyncSettings   # lib.mcp_sync from a checkout

    result = sync_mcp_servers(SyncSettings(dry_run=True))
    if result.success:
        print(result.data.server_names)
    else:
        print(result.error)

Lower-level pieces (read_json, write_json, merge_mcp_servers, ...) are
exported for callers that want to run individual steps.
"""

__version__ = "0.1.0"

from .config import SyncSettings
from .errors import (
    McpSyncError,
    ConfigurationError,
    NotFoundError,
    ParseError,
    ReadError,
    WriteError,
    LockError,
    SyncError,
)
from .paths import (
    SyncPaths,
    get_home_directory,
    get_source_config_path,
    get_destination_config_path,
    resolve_paths,
)
from .result import Result
from .servers import (
    MCP_SERVERS_KEY,
    ServerDefinition,
    TransportType,
    describe_server,
    extract_mcp_servers,
    merge_mcp_servers,
)
from .store import SyncLock, backup_file, read_json, write_json
from .sync import SyncOrchestrator, SyncReport, SyncState, sync_mcp_servers

__all__ = [
    "SyncSettings",
    # Errors
    "McpSyncError",
    "ConfigurationError",
    "NotFoundError",
    "ParseError",
    "ReadError",
    "WriteError",
    "LockError",
    "SyncError",
    # Paths
    "SyncPaths",
    "get_home_directory",
    "get_source_config_path",
    "get_destination_config_path",
    "resolve_paths",
    # Documents
    "Result",
    "MCP_SERVERS_KEY",
    "ServerDefinition",
    "TransportType",
    "describe_server",
    "extract_mcp_servers",
    "merge_mcp_servers",
    "SyncLock",
    "backup_file",
    "read_json",
    "write_json",
    # Orchestration
    "SyncOrchestrator",
    "SyncReport",
    "SyncState",
    "sync_mcp_servers",
]
