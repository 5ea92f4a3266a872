"""
Точка входа движка: выбор обработчика по расширению исходного файла
и запуск рекурсивного раскрытия ссылок.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import MissingAssetError
from .handlers import AssetContext, get_handler_for_path
from .handlers.data import DataHandler
from .run_context import RunContext
from .types import Content, InlineOptions

logger = logging.getLogger(__name__)


def _as_options(options: InlineOptions | Mapping[str, Any] | None) -> InlineOptions:
    if isinstance(options, InlineOptions):
        return options
    return InlineOptions.from_dict(options)


def process_asset(
        dest: Optional[Path | str],
        source: Path | str,
        content: Content,
        options: InlineOptions | Mapping[str, Any] | None = None,
) -> Content:
    """
    Встроить все внешние ассеты документа.

    Args:
        dest: Путь назначения — используется только в логах
        source: Путь исходного файла — основание для всех относительных ссылок
                и источник типа контента (по расширению)
        content: Текст (или байты) исходного файла
        options: InlineOptions либо «сырой» словарь опций

    Returns:
        Переписанный документ: str для HTML/CSS/JS, data: URI для прочих файлов
    """
    opts = _as_options(options)
    run = RunContext.build(opts)
    src = Path(os.path.abspath(source))
    handler = get_handler_for_path(src)
    logger.debug("inlining %s -> %s (%s)", src, dest if dest is not None else "<stdout>", handler.kind)
    ctx = AssetContext(run, src, content)
    return handler().process(ctx)


def read_source(source: Path | str) -> Content:
    """Прочитать исходный файл: текст для HTML/CSS/JS, байты для прочего."""
    path = Path(source)
    try:
        raw = path.read_bytes()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        raise MissingAssetError(path) from None
    if get_handler_for_path(path) is DataHandler:
        return raw
    return raw.decode("utf-8", errors="replace")


def inline_file(
        source: Path | str,
        dest: Optional[Path | str] = None,
        options: InlineOptions | Mapping[str, Any] | None = None,
) -> Content:
    """read_source + process_asset."""
    return process_asset(dest, source, read_source(source), options)


__all__ = ["process_asset", "read_source", "inline_file"]
