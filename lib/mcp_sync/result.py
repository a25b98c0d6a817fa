"""
Two-variant result type.

Callers must inspect ``success`` before touching ``data`` or ``error``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    success: bool
    data: T | None = None
    error: Exception | None = None

    @classmethod
    def ok(cls, data: Any = None) -> "Result":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: Exception) -> "Result":
        return cls(success=False, error=error)
