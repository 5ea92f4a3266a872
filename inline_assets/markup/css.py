"""
Ссылки на внешние ресурсы внутри CSS.

Распознаются две формы:
  • @import url("x.css") [media];  /  @import "x.css" [media];
  • url(x) [format("woff2")] [,]   — background, @font-face src и т.п.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Literal, Optional

CssRefKind = Literal["import", "url"]

_CSS_REF_RE = re.compile(
    # @import со ссылкой в url(...) или просто в кавычках, плюс media-эпилог
    r"(?P<import>@import\s+"
    r"(?:url\((?:\"(?P<i1>[^\"]*)\"|'(?P<i2>[^']*)'|(?P<i3>\S+?))\)"
    r"|(?:\"(?P<i4>[^\"]*)\"|'(?P<i5>[^']*)'))"
    r"(?P<media>\s+[^;\r\n]+)?"
    r"\s*;)"
    r"|"
    # url(...) с необязательной подсказкой format(...) и завершающей запятой
    r"(?P<url>\burl\((?:\"(?P<u1>[^\"]*)\"|'(?P<u2>[^']*)'|(?P<u3>\S+?))\)"
    r"(?:\s*format\((?:\"(?P<f1>[^\"]*)\"|'(?P<f2>[^']*)'|(?P<f3>\S+?))\))?"
    r"(?P<sep>\s*,)?)"
)


@dataclass(frozen=True)
class CssMatch:
    kind: CssRefKind
    start: int
    end: int
    text: str
    url: str
    media: Optional[str] = None        # как в исходнике, с ведущим пробелом
    format_hint: Optional[str] = None
    separator: Optional[str] = None    # "\s*," у элементов списка src


def _first(*vals: Optional[str]) -> Optional[str]:
    for v in vals:
        if v is not None:
            return v
    return None


def iter_css_refs(text: str) -> Iterator[CssMatch]:
    """Лениво перечисляет @import и url() в порядке следования."""
    for m in _CSS_REF_RE.finditer(text):
        if m.group("import") is not None:
            yield CssMatch(
                kind="import",
                start=m.start(),
                end=m.end(),
                text=m.group(0),
                url=_first(m.group("i1"), m.group("i2"), m.group("i3"), m.group("i4"), m.group("i5")) or "",
                media=m.group("media"),
            )
        else:
            yield CssMatch(
                kind="url",
                start=m.start(),
                end=m.end(),
                text=m.group(0),
                url=_first(m.group("u1"), m.group("u2"), m.group("u3")) or "",
                format_hint=_first(m.group("f1"), m.group("f2"), m.group("f3")),
                separator=m.group("sep"),
            )


__all__ = ["CssRefKind", "CssMatch", "iter_css_refs"]
