from __future__ import annotations

from .base import BaseHandler
from .context import AssetContext
from ..datauri import to_data_uri


class DataHandler(BaseHandler):
    """Непрозрачный бинарный ассет (картинка, шрифт, ...) → data: URI."""
    kind = "DATA"

    def expand(self, ctx: AssetContext) -> str:
        return to_data_uri(ctx.file_path, ctx.data)
