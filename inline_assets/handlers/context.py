"""
Контекст обработки одного буфера (файла или фрагмента).
Инкапсулирует путь-основание для резолвинга ссылок, цепочку рекурсии
и типовые операции: резолвинг, проверку политики, чтение и рекурсивный спуск.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple, Type

from ..errors import CyclicImportError, MissingAssetError
from ..paths import resolve_url
from ..run_context import RunContext
from ..types import Content, InlineOptions

if TYPE_CHECKING:
    from .base import BaseHandler

logger = logging.getLogger(__name__)


class AssetContext:
    def __init__(
            self,
            run: RunContext,
            file_path: Path,
            content: Content,
            chain: Tuple[Path, ...] = (),
    ):
        self.run = run
        # файл, от каталога которого резолвятся ссылки этого буфера
        self.file_path = file_path
        self.content = content
        # файлы, которые сейчас раскрываются на пути от корня до этого буфера
        self.chain = chain or (file_path,)

    @property
    def options(self) -> InlineOptions:
        return self.run.options

    @property
    def text(self) -> str:
        if isinstance(self.content, bytes):
            return self.content.decode("utf-8", errors="replace")
        return self.content

    @property
    def data(self) -> bytes:
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return self.content

    # --- ссылки ---------------------------------

    def resolve(self, url: str) -> Optional[Path]:
        return resolve_url(self.file_path, url)

    def includes(self, path: Path) -> bool:
        return self.run.policy.includes(path)

    def rejected(self, path: Path) -> Optional[str]:
        """Замена для отклонённой политикой ссылки: "" при purge, иначе None (не трогать)."""
        if self.options.purge:
            logger.debug("purging reference to %s in %s", path, self.file_path)
            return ""
        logger.debug("leaving reference to %s in %s", path, self.file_path)
        return None

    # --- чтение ---------------------------------

    def read_text(self, path: Path) -> str:
        # невалидные UTF-8 байты заменяются на U+FFFD, обработка продолжается
        return self.read_bytes(path).decode("utf-8", errors="replace")

    def read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise MissingAssetError(path, self.file_path) from None

    # --- рекурсия -------------------------------

    def expand(self, path: Path, content: Content, handler: Optional[Type[BaseHandler]] = None) -> Content:
        """
        Рекурсивно обработать другой файл.

        Без явного handler тип выбирается по расширению пути.
        """
        if handler is None:
            from .registry import get_handler_for_path
            handler = get_handler_for_path(path)
        if handler.recursive and path in self.chain:
            raise CyclicImportError((*self.chain, path))
        child = AssetContext(self.run, path, content, (*self.chain, path))
        return handler().process(child)

    def expand_fragment(self, handler: Type[BaseHandler], content: Content) -> Content:
        """Обработать фрагмент текущего файла (например, тело <style>) с тем же основанием."""
        child = AssetContext(self.run, self.file_path, content, self.chain)
        return handler().process(child)

    def report(self, action: str, kind: str, size_before: int, size_after: int) -> None:
        self.run.report(action, kind, self.file_path, size_before, size_after)


__all__ = ["AssetContext"]
