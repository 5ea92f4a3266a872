"""
Минификаторы как непрозрачные преобразования (text) -> text.

Сами движки не реализуются: HTML — htmlmin (дистрибутив htmlmin2),
CSS — rcssmin, JS — rjsmin.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import htmlmin
import rcssmin
import rjsmin

from .types import ContentKind, Minifier


def minify_html(text: str) -> str:
    return htmlmin.minify(text, remove_comments=True, remove_empty_space=True)


def minify_css(text: str) -> str:
    return rcssmin.cssmin(text)


def minify_js(text: str) -> str:
    return rjsmin.jsmin(text)


# Minifier dispatch table by content kind.
MINIFIERS: Dict[str, Minifier] = {
    "HTML": minify_html,
    "CSS": minify_css,
    "JS": minify_js,
}


def get_minifier(kind: ContentKind, overrides: Optional[Mapping[str, Minifier]] = None) -> Minifier:
    """Минификатор для типа контента: сначала переопределения, затем таблица по умолчанию."""
    if overrides and kind in overrides:
        return overrides[kind]
    try:
        return MINIFIERS[kind]
    except KeyError:
        raise ValueError(f"No minifier for content kind '{kind}'") from None


__all__ = ["MINIFIERS", "get_minifier", "minify_html", "minify_css", "minify_js"]
