from __future__ import annotations

# Public API of handlers package:
#  • get_handler_for_path — lazy retrieval of handler class by path
#  • AssetContext — per-buffer processing context
from .context import AssetContext
from .registry import get_handler_for_path, list_handlers, register_lazy

__all__ = ["AssetContext", "get_handler_for_path", "list_handlers", "register_lazy"]

# ---- Lightweight (lazy) registration of built-in handlers --------------------
# Everything not listed here is embedded as binary data (see registry fallback).
register_lazy(module=".html", class_name="HtmlHandler", extensions=[".html", ".htm"])
register_lazy(module=".css", class_name="CssHandler", extensions=[".css"])
register_lazy(module=".js", class_name="JsHandler", extensions=[".js"])
