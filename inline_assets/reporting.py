from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_UNITS = ("kB", "MB", "GB", "TB")


def pretty_bytes(size: int) -> str:
    """Человекочитаемый размер (десятичные единицы: 1 kB = 1000 B)."""
    if size < 1000:
        return f"{size} B"
    value = float(size)
    for unit in _UNITS:
        value /= 1000.0
        if value < 1000 or unit == _UNITS[-1]:
            num = f"{value:.1f}".rstrip("0").rstrip(".")
            return f"{num} {unit}"
    return f"{size} B"  # pragma: no cover


def _display_path(filename: Path, base: Optional[Path]) -> str:
    try:
        return os.path.relpath(filename, base or Path.cwd())
    except ValueError:
        # другой диск на Windows
        return str(filename)


class LogReporter:
    """
    Reporter по умолчанию: пишет завершённые шаги в лог.

    Стартовые вызовы (size_after == -1) игнорируются.
    """

    def __init__(self, log: Optional[logging.Logger] = None, *, base: Optional[Path] = None):
        self.log = log or logger
        self.base = base

    def __call__(self, action: str, kind: str, filename: Path, size_before: int, size_after: int) -> None:
        if size_after < 0:
            return
        self.log.info(
            "%-10s %-5s %s: %s → %s",
            action + ":",
            kind + ":",
            _display_path(filename, self.base),
            pretty_bytes(size_before),
            pretty_bytes(size_after),
        )


__all__ = ["LogReporter", "pretty_bytes"]
