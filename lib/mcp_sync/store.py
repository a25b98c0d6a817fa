"""
JSON store access for config documents.

read_json/write_json/backup_file return a Result and never raise. Writes go
through a temp file in the target directory followed by os.replace, so the
destination is either fully rewritten or left untouched.
"""

from __future__ import annotations

import fcntl
import json
import os
import shutil
import stat
from pathlib import Path
from typing import Any

from .errors import LockError, NotFoundError, ParseError, ReadError, WriteError
from .result import Result

JSON_INDENT = 2
BACKUP_SUFFIX = ".bak"
LOCK_SUFFIX = ".lock"


def read_json(path: str | Path) -> Result:
    """Read and parse a JSON document. No shape validation is done."""
    path = Path(path)
    if not path.exists():
        return Result.fail(NotFoundError(f"File not found: {path}"))

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        return Result.fail(ParseError(f"Invalid UTF-8 in {path}: {e}"))
    except OSError as e:
        return Result.fail(ReadError(f"Cannot read {path}: {e.strerror or e}"))

    try:
        return Result.ok(json.loads(content, parse_constant=_reject_constant))
    except ValueError as e:
        return Result.fail(ParseError(f"Invalid JSON in {path}: {e}"))


def _reject_constant(token: str):
    # NaN and Infinity are not JSON; Claude Desktop cannot parse them back.
    raise ValueError(f"non-JSON constant {token!r}")


def dumps(document: Any) -> str:
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)


def write_json(path: str | Path, document: Any) -> Result:
    """Pretty-print ``document`` and atomically replace ``path`` with it."""
    path = Path(path)
    try:
        content = dumps(document)
    except (TypeError, ValueError) as e:
        return Result.fail(WriteError(f"Cannot serialize document for {path}: {e}"))

    tmp_file = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    try:
        with open(tmp_file, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(tmp_file, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_file, path)
    except OSError as e:
        try:
            tmp_file.unlink(missing_ok=True)
        except OSError:
            pass
        return Result.fail(WriteError(f"Cannot write {path}: {e.strerror or e}"))

    return Result.ok()


def backup_file(path: str | Path) -> Result:
    """Copy ``path`` to ``<path>.bak``; the Result carries the backup path."""
    path = Path(path)
    backup_path = path.with_name(path.name + BACKUP_SUFFIX)
    try:
        shutil.copy2(path, backup_path)
    except OSError as e:
        return Result.fail(WriteError(f"Cannot back up {path} to {backup_path}: {e.strerror or e}"))
    return Result.ok(backup_path)


class SyncLock:
    """Advisory non-blocking lock guarding a single destination file."""

    def __init__(self, target: str | Path):
        target = Path(target)
        self.lock_file = target.with_name(target.name + LOCK_SUFFIX)
        self._fd = None

    @property
    def held(self) -> bool:
        return self._fd is not None

    def acquire(self) -> bool:
        """Return False if another process holds the lock; other OS errors propagate."""
        try:
            self._fd = os.open(str(self.lock_file), os.O_CREAT | os.O_RDWR, 0o644)
            fcntl.flock(self._fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
            os.ftruncate(self._fd, 0)
            os.write(self._fd, str(os.getpid()).encode())
            return True
        except OSError as e:
            if self._fd is not None:
                os.close(self._fd)
                self._fd = None
            if isinstance(e, BlockingIOError):
                return False
            raise

    def release(self) -> None:
        if self._fd is None:
            return
        # Unlink while still holding the lock so a waiter never locks a dead inode.
        try:
            self.lock_file.unlink(missing_ok=True)
        except OSError:
            pass
        try:
            fcntl.flock(self._fd, fcntl.LOCK_UN)
            os.close(self._fd)
        except OSError:
            pass
        self._fd = None

    def __enter__(self) -> "SyncLock":
        try:
            acquired = self.acquire()
        except OSError as e:
            raise WriteError(f"Cannot create lock file {self.lock_file}: {e.strerror or e}") from e
        if not acquired:
            raise LockError(f"Another sync is already running (lock held: {self.lock_file})")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
