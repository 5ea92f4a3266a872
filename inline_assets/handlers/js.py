from __future__ import annotations

from .base import BaseHandler
from .context import AssetContext


class JsHandler(BaseHandler):
    """
    JavaScript встраивается как есть: вложенные ссылки внутри JS не ищутся.
    Единственное преобразование — минификация по опции jsmin.
    """
    kind = "JS"
    extensions = {".js"}
    minify_option = "jsmin"

    def expand(self, ctx: AssetContext) -> str:
        return ctx.text
