from __future__ import annotations

from typing import ClassVar, Optional, Set

from .context import AssetContext
from ..types import Content, ContentKind

__all__ = ["BaseHandler"]


class BaseHandler:
    """Базовый обработчик типа контента."""
    #: Тип контента для отчётов и выбора минификатора
    kind: ClassVar[ContentKind] = "DATA"
    #: Набор поддерживаемых расширений
    extensions: ClassVar[Set[str]] = set()
    #: Имя булевой опции минификации (htmlmin/cssmin/jsmin) либо None
    minify_option: ClassVar[Optional[str]] = None
    #: Может ли обработчик рекурсивно раскрывать ссылки (нужна защита от циклов)
    recursive: ClassVar[bool] = False

    # --- единый API -----------------------------
    def process(self, ctx: AssetContext) -> Content:
        """
        Раскрывает ссылки буфера, при необходимости минифицирует результат.
        Вокруг каждого шага вызывается reporter.
        """
        size = len(ctx.content)
        ctx.report("expanding", self.kind, size, -1)
        out = self.expand(ctx)
        if self.minify_option and getattr(ctx.options, self.minify_option):
            out = self.minify(ctx, out)
        ctx.report("expanded", self.kind, size, len(out))
        return out

    def minify(self, ctx: AssetContext, content: Content) -> Content:
        text = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else content
        size = len(text)
        ctx.report("minifying", self.kind, size, -1)
        text = ctx.run.minifier(self.kind)(text)
        ctx.report("minified", self.kind, size, len(text))
        return text

    # --- переопределяемая логика ----------------
    def expand(self, ctx: AssetContext) -> Content:
        return ctx.content
