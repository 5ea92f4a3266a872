from __future__ import annotations

import re
from typing import Optional

from .base import BaseHandler
from .context import AssetContext
from .css import CssHandler
from .data import DataHandler
from .js import JsHandler
from ..markup import TagMatch, iter_tags, render_tag, rewrite
from ..paths import url_to_filename

_JS_SRC_RE = re.compile(r"\.js", re.IGNORECASE)
_CSS_HREF_RE = re.compile(r"\.css$", re.IGNORECASE)
_IMAGE_SRC_RE = re.compile(r"\.(?:png|gif|jpe?g|svg)$", re.IGNORECASE)


class HtmlHandler(BaseHandler):
    """
    Встраивает <script src>, <link rel=stylesheet>, <img src> и
    раскрывает ссылки внутри inline <style>.

    Все виды тегов обрабатываются за один проход в порядке документа;
    разметка вне совпавших тегов сохраняется байт в байт.
    """
    kind = "HTML"
    extensions = {".html", ".htm"}
    minify_option = "htmlmin"
    recursive = True

    def expand(self, ctx: AssetContext) -> str:
        text = ctx.text
        return rewrite(text, iter_tags(text), lambda tag: self._replace(ctx, tag))

    def _replace(self, ctx: AssetContext, tag: TagMatch) -> Optional[str]:
        if tag.name == "script":
            return self._inline_script(ctx, tag)
        if tag.name == "link":
            return self._inline_link(ctx, tag)
        if tag.name == "style":
            return self._inline_style(ctx, tag)
        if tag.name == "img":
            return self._inline_img(ctx, tag)
        return None

    # --- per-tag rules --------------------------

    def _inline_script(self, ctx: AssetContext, tag: TagMatch) -> Optional[str]:
        attrs = tag.attrs
        src = attrs.get("src")
        type_ = attrs.get("type")
        if not isinstance(src, str):
            return None
        if not (type_ is None or type_ == "text/javascript" or _JS_SRC_RE.search(src)):
            return None
        path = ctx.resolve(src)
        if path is None:
            return None
        if not ctx.includes(path):
            return ctx.rejected(path)

        js = ctx.expand(path, ctx.read_text(path), handler=JsHandler)
        del attrs["src"]
        return render_tag("script", attrs, js)

    def _inline_link(self, ctx: AssetContext, tag: TagMatch) -> Optional[str]:
        attrs = tag.attrs
        href = attrs.get("href")
        rel = attrs.get("rel")
        if not isinstance(href, str):
            return None
        is_stylesheet = (
            (isinstance(rel, str) and "stylesheet" in rel.lower().split())
            or attrs.get("type") == "text/css"
            or bool(_CSS_HREF_RE.search(url_to_filename(href)))
        )
        if not is_stylesheet:
            return None
        path = ctx.resolve(href)
        if path is None:
            return None
        if not ctx.includes(path):
            return ctx.rejected(path)

        css = ctx.expand(path, ctx.read_text(path), handler=CssHandler)
        media = attrs.get("media")
        if isinstance(media, str):
            css = "@media " + media + " {" + css + " }"
        return render_tag("style", {"type": "text/css"}, css)

    def _inline_style(self, ctx: AssetContext, tag: TagMatch) -> Optional[str]:
        type_ = tag.attrs.get("type")
        if tag.body is None or not (type_ is None or type_ == "text/css"):
            return None
        # тело <style> резолвится от каталога самого HTML-файла
        css = ctx.expand_fragment(CssHandler, tag.body)
        return tag.with_body(css)

    def _inline_img(self, ctx: AssetContext, tag: TagMatch) -> Optional[str]:
        attrs = tag.attrs
        src = attrs.get("src")
        if not isinstance(src, str) or not _IMAGE_SRC_RE.search(url_to_filename(src)):
            return None
        path = ctx.resolve(src)
        if path is None:
            return None
        if not ctx.includes(path):
            return ctx.rejected(path)

        attrs["src"] = ctx.expand(path, ctx.read_bytes(path), handler=DataHandler)
        return render_tag("img", attrs, void=not tag.self_closing)
