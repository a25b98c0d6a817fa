"""Pytest configuration and fixtures for mcp_sync tests."""

import json
import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
repo_root = Path(__file__).parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from lib.mcp_sync.paths import SyncPaths


SOURCE_SERVERS = {
    "a": {"type": "stdio", "command": "foo", "args": ["--bar"]},
    "b": {"type": "sse", "url": "http://x"},
}


def _write_config(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        path.write_text(data)
    else:
        path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def write_config():
    """Write a dict as JSON (or a raw string as-is), creating parent dirs."""
    return _write_config


@pytest.fixture
def source_servers() -> dict:
    return json.loads(json.dumps(SOURCE_SERVERS))


@pytest.fixture
def sync_paths(tmp_path) -> SyncPaths:
    """Config paths rooted at a throwaway home directory."""
    return SyncPaths.from_home(tmp_path)


@pytest.fixture
def populated_home(sync_paths) -> SyncPaths:
    """Home with a two-server Claude Code config and an existing Desktop config."""
    _write_config(sync_paths.source, {"numStartups": 12, "mcpServers": SOURCE_SERVERS})
    _write_config(sync_paths.destination, {
        "mcpServers": {"old": {"type": "stdio", "command": "legacy"}},
        "windowBounds": {"x": 10, "y": 20, "width": 800, "height": 600},
        "globalShortcut": "Alt+Space",
    })
    return sync_paths
