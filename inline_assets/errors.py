"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from InlineAssetsError.

Programming errors, minifier crashes and unexpected I/O failures should NOT
inherit from InlineAssetsError — they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class InlineAssetsError(Exception):
    """
    Base class for all user-facing errors of inline-assets.

    These errors indicate problems that the user can fix:
    missing files, broken patterns, invalid options or task files.
    """
    pass


class MissingAssetError(InlineAssetsError):
    """Источник или ассет, на который ссылается документ, отсутствует на диске."""

    def __init__(self, path: Path, referenced_from: Optional[Path] = None):
        self.path = path
        self.referenced_from = referenced_from
        msg = f"file not found: {path}"
        if referenced_from is not None:
            msg += f" (referenced from {referenced_from})"
        super().__init__(msg)


class CyclicImportError(InlineAssetsError):
    """Цепочка @import ссылается сама на себя."""

    def __init__(self, chain: Sequence[Path]):
        self.chain = tuple(chain)
        super().__init__("cyclic reference: " + " -> ".join(str(p) for p in self.chain))


class InvalidPatternError(InlineAssetsError):
    """Invalid regular expression in the inclusion pattern chain."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class ConfigError(InlineAssetsError):
    """Unknown or ill-typed options, invalid task files."""
    pass


class TaskError(InlineAssetsError):
    """Failures of the build-tool task surface."""
    pass


__all__ = [
    "InlineAssetsError",
    "MissingAssetError",
    "CyclicImportError",
    "InvalidPatternError",
    "ConfigError",
    "TaskError",
]
