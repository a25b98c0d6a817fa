"""CLI smoke tests."""
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent.parent


def run_cli(*args, home=None):
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    env.pop("MCP_SYNC_LOG_LEVEL", None)
    if home is None:
        env.pop("HOME", None)
    else:
        env["HOME"] = str(home)
    return subprocess.run(
        [sys.executable, "-m", "lib.mcp_sync.cli", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=REPO_ROOT,
        env=env,
    )


class TestCLISmoke:
    """CLI smoke tests."""

    def test_cli_help(self):
        result = run_cli("--help")
        assert result.returncode == 0
        assert "sync-claude-mcp" in result.stdout
        assert "--dry-run" in result.stdout
        assert "--backup" in result.stdout

    def test_cli_version(self):
        result = run_cli("--version")
        assert result.returncode == 0
        assert "sync-claude-mcp" in result.stdout

    def test_cli_verbose_and_quiet_conflict(self):
        result = run_cli("-v", "-q")
        assert result.returncode != 0

    def test_cli_sync_success(self, populated_home, tmp_path, source_servers):
        result = run_cli(home=tmp_path)
        assert result.returncode == 0, result.stderr
        assert "✅ Successfully synced 2 MCP server(s) to Claude Desktop" in result.stdout
        written = json.loads(populated_home.destination.read_text())
        assert written["mcpServers"] == source_servers

    def test_cli_home_flag(self, populated_home, tmp_path):
        result = run_cli("--home", str(tmp_path), "--dry-run", home=None)
        assert result.returncode == 0, result.stderr
        assert "Dry run" in result.stdout

    def test_cli_missing_home_exits_1(self):
        result = run_cli(home=None)
        assert result.returncode == 1
        assert result.stderr.strip() == "❌ HOME environment variable not found"

    def test_cli_missing_source_exits_1(self, sync_paths, write_config, tmp_path):
        write_config(sync_paths.destination, {"mcpServers": {}})
        before = sync_paths.destination.read_bytes()

        result = run_cli(home=tmp_path)

        assert result.returncode == 1
        assert result.stderr.startswith("❌ Failed to read Claude Code config: File not found")
        assert sync_paths.destination.read_bytes() == before

    def test_cli_null_destination_no_traceback(self, sync_paths, write_config, tmp_path, source_servers):
        write_config(sync_paths.source, {"mcpServers": source_servers})
        write_config(sync_paths.destination, "null")

        result = run_cli(home=tmp_path)

        assert result.returncode == 0, result.stderr
        assert "Traceback" not in result.stderr
        assert json.loads(sync_paths.destination.read_text()) == {"mcpServers": source_servers}

    def test_cli_empty_source_exits_0(self, sync_paths, write_config, tmp_path):
        write_config(sync_paths.source, {"mcpServers": {}})
        write_config(sync_paths.destination, {"mcpServers": {"keep": {}}})
        before = sync_paths.destination.read_bytes()

        result = run_cli(home=tmp_path)

        assert result.returncode == 0
        assert "No MCP servers found" in result.stderr
        assert sync_paths.destination.read_bytes() == before

    def test_cli_quiet_suppresses_info(self, populated_home, tmp_path):
        result = run_cli("-q", home=tmp_path)
        assert result.returncode == 0
        assert result.stdout == ""
