"""
MCP server definitions: extraction from Claude Code config, wholesale
replacement in Claude Desktop config, and one-line summaries for logging.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MCP_SERVERS_KEY = "mcpServers"


class TransportType(str, Enum):
    STDIO = "stdio"
    SSE = "sse"
    HTTP = "http"


KNOWN_FIELDS = ("type", "command", "args", "env", "url", "headers", "description")


@dataclass
class ServerDefinition:
    """A single MCP server entry; ``type`` decides which fields matter."""
    name: str
    type: str = TransportType.STDIO.value
    command: str | None = None
    args: list[str] | None = None
    env: dict[str, str] | None = None
    url: str | None = None
    headers: dict[str, str] | None = None
    description: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_stdio(self) -> bool:
        return self.type == TransportType.STDIO.value

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "ServerDefinition":
        """Build from a raw JSON entry. Nothing is validated."""
        return cls(
            name=name,
            type=data.get("type", TransportType.STDIO.value),
            command=data.get("command"),
            args=data.get("args"),
            env=data.get("env"),
            url=data.get("url"),
            headers=data.get("headers"),
            description=data.get("description"),
            extra={k: v for k, v in data.items() if k not in KNOWN_FIELDS},
        )

    def describe(self) -> str:
        if self.is_stdio:
            args = " ".join(str(a) for a in self.args or [])
            return f"{self.command} {args}"
        return self.url or self.type


def extract_mcp_servers(document: Any) -> dict[str, Any]:
    """Return the server mapping of a config document, or {} if there is none."""
    if not isinstance(document, dict):
        return {}
    servers = document.get(MCP_SERVERS_KEY)
    if not isinstance(servers, dict):
        return {}
    return servers


def merge_mcp_servers(destination: Any, servers: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of ``destination`` whose server mapping is replaced by ``servers``.

    Full replace, not a per-entry merge: servers only present in the
    destination are dropped. Neither argument is mutated. A destination that
    is not a JSON object carries no fields to keep and is treated as {}.
    """
    updated = copy.deepcopy(destination) if isinstance(destination, dict) else {}
    updated[MCP_SERVERS_KEY] = copy.deepcopy(servers)
    return updated


def describe_server(name: str, definition: Any) -> str:
    """One-line invocation summary for a raw server entry."""
    if not isinstance(definition, dict):
        return str(definition)
    return ServerDefinition.from_dict(name, definition).describe()
