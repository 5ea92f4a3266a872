from __future__ import annotations

from typing import Optional

from .base import BaseHandler
from .context import AssetContext
from .data import DataHandler
from ..markup import CssMatch, iter_css_refs, rewrite


class CssHandler(BaseHandler):
    """
    Раскрывает @import (рекурсивно, как CSS) и url() (как data: URI).

    Один проход слева направо: подставленный текст повторно не сканируется,
    поэтому ссылки внутри импортированного файла резолвятся только от
    его собственного каталога.
    """
    kind = "CSS"
    extensions = {".css"}
    minify_option = "cssmin"
    recursive = True

    def expand(self, ctx: AssetContext) -> str:
        text = ctx.text
        return rewrite(text, iter_css_refs(text), lambda m: self._replace(ctx, m))

    def _replace(self, ctx: AssetContext, m: CssMatch) -> Optional[str]:
        path = ctx.resolve(m.url)
        if path is None:
            return None
        if not ctx.includes(path):
            return ctx.rejected(path)

        if m.kind == "import":
            css = ctx.expand(path, ctx.read_text(path), handler=CssHandler)
            if m.media is not None:
                css = "@media" + m.media + " {" + css + "}"
            return css

        data = ctx.expand(path, ctx.read_bytes(path), handler=DataHandler)
        stmt = "url(\"" + data + "\")"
        if m.format_hint:
            stmt += " format(\"" + m.format_hint + "\")"
        if m.separator:
            stmt += m.separator
        return stmt
