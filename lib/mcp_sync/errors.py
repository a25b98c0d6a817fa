"""
Error taxonomy for MCP config sync.

Lower layers never raise these past their boundary; they are carried inside
a failed Result and wrapped by the orchestrator.
"""


class McpSyncError(Exception):
    """Base class for all sync errors."""


class ConfigurationError(McpSyncError):
    """A required environment value (HOME) is missing."""


class NotFoundError(McpSyncError):
    """A required config file does not exist."""


class ParseError(McpSyncError):
    """A config file exists but is not valid JSON."""


class ReadError(McpSyncError):
    """A config file exists but could not be read."""


class WriteError(McpSyncError):
    """The destination file could not be overwritten."""


class LockError(McpSyncError):
    """Another sync run holds the destination lock."""


class SyncError(McpSyncError):
    """Failure of one orchestrator step, wrapping the underlying error."""

    def __init__(self, step: str, context: str, cause: Exception):
        self.step = step
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")
