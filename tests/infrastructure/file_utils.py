"""
Утилиты для создания файлов и директорий в тестах.
"""

from __future__ import annotations

from pathlib import Path


def write(p: Path, text: str) -> Path:
    """
    Записывает текст в файл, создавая родительские директории при необходимости.

    Пишет байты UTF-8 без трансляции переводов строк, чтобы сравнения
    «байт в байт» не зависели от платформы.
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(text.encode("utf-8"))
    return p


def write_bytes(p: Path, data: bytes) -> Path:
    """Бинарный вариант write() — картинки, шрифты."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return p


__all__ = ["write", "write_bytes"]
