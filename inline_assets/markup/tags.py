"""
Структурный матчинг HTML-тегов на регулярных выражениях.

Это не парсер: распознаются только хорошо сформированные теги вида
<name attrs>, <name attrs/>, <name attrs></name> и <name attrs>body</name>.
Значения атрибутов могут быть в "двойных", 'одинарных' кавычках,
без кавычек, либо отсутствовать (булевы атрибуты).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Optional

AttrValue = str | bool

_NAME = r"[a-zA-Z_:][-a-zA-Z0-9_:.]*"
_VALUE = r"(?:\"([^\"]*)\"|'([^']*)'|([^\s\"'=<>`]+))"
_ATTRS = r"((?:\s+" + _NAME + r"(?:=" + r"(?:\"[^\"]*\"|'[^']*'|[^\s\"'=<>`]+)" + r")?)*)"

_ATTR_RE = re.compile(r"\s+(" + _NAME + r")(?:=" + _VALUE + r")?")


def _simple_tag(name: str) -> re.Pattern[str]:
    # <name attrs/>, <name attrs></name>, <name attrs>
    return re.compile(
        "<(" + name + ")" + _ATTRS + r"\s*(?:/>|>\s*</" + name + r"\s*>|>)"
    )


def _complex_tag(name: str) -> re.Pattern[str]:
    # <name attrs>body</name>, тело может быть многострочным
    return re.compile(
        "<(" + name + ")" + _ATTRS + r"\s*>(.*?)</" + name + r"\s*>",
        re.DOTALL,
    )


def _script_tag() -> re.Pattern[str]:
    # <script/> либо <script ...>body</script>; тело поглощается целиком,
    # чтобы inline-скрипты не сканировались на вложенные теги
    return re.compile(
        r"<(script)" + _ATTRS + r"\s*(?:/>|>(.*?)</script\s*>)",
        re.DOTALL,
    )


_TAG_PATTERNS: Dict[str, re.Pattern[str]] = {
    "script": _script_tag(),
    "style": _complex_tag("style"),
    "link": _simple_tag("link"),
    "img": _simple_tag("img"),
}

_TAG_START_RE = re.compile(r"<(" + "|".join(_TAG_PATTERNS) + r")(?=[\s/>])")


@dataclass(frozen=True)
class TagMatch:
    """Одно вхождение тега в буфере."""
    name: str
    start: int
    end: int
    text: str            # полный совпавший фрагмент
    raw_attrs: str       # сырая строка атрибутов (с ведущими пробелами)
    body: Optional[str]  # тело для complex-тегов, иначе None
    body_start: int = -1
    body_end: int = -1

    @property
    def attrs(self) -> Dict[str, AttrValue]:
        """Свежий (изменяемый) словарь атрибутов в исходном порядке."""
        return parse_attrs(self.raw_attrs)

    @property
    def self_closing(self) -> bool:
        return self.text.endswith("/>")

    def with_body(self, body: str) -> str:
        """Текст тега с заменённым телом; всё остальное байт в байт."""
        if self.body is None:
            raise ValueError(f"<{self.name}> has no body to replace")
        rel_start = self.body_start - self.start
        rel_end = self.body_end - self.start
        return self.text[:rel_start] + body + self.text[rel_end:]


def iter_tags(text: str, names: Iterable[str] = tuple(_TAG_PATTERNS)) -> Iterator[TagMatch]:
    """
    Лениво перечисляет теги из `names` в порядке следования в документе.

    Один проход по всем видам тегов: найденный тег поглощается целиком,
    сканирование продолжается после него.
    """
    wanted = set(names)
    unknown = wanted - set(_TAG_PATTERNS)
    if unknown:
        raise ValueError(f"Unsupported tag names: {sorted(unknown)}")

    pos = 0
    while True:
        start = _TAG_START_RE.search(text, pos)
        if start is None:
            return
        name = start.group(1)
        m = _TAG_PATTERNS[name].match(text, start.start())
        if m is None:
            pos = start.end()
            continue
        pos = m.end()
        if name not in wanted:
            continue
        body = m.group(3) if m.lastindex and m.lastindex >= 3 else None
        yield TagMatch(
            name=name,
            start=m.start(),
            end=m.end(),
            text=m.group(0),
            raw_attrs=m.group(2) or "",
            body=body,
            body_start=m.start(3) if body is not None else -1,
            body_end=m.end(3) if body is not None else -1,
        )


def _decode(val: str) -> str:
    return val.replace("&quot;", "\"").replace("&amp;", "&")


def _encode(val: str) -> str:
    return val.replace("&", "&amp;").replace("\"", "&quot;")


def parse_attrs(raw: str) -> Dict[str, AttrValue]:
    """
    Разбирает строку атрибутов тега.

    Булевы атрибуты получают значение True; в строковых значениях
    декодируются сущности &quot; и &amp;.
    """
    attrs: Dict[str, AttrValue] = {}
    for m in _ATTR_RE.finditer(raw):
        key, v1, v2, v3 = m.groups()
        val = v1 if v1 is not None else (v2 if v2 is not None else v3)
        attrs[key] = True if val is None else _decode(val)
    return attrs


def render_tag(
        name: str,
        attrs: Mapping[str, AttrValue],
        body: Optional[str] = None,
        *,
        void: bool = False,
) -> str:
    """
    Сериализует тег обратно в текст.

    body=None → самозакрывающийся тег (<name .../>), либо <name ...> при void=True.
    """
    tag = "<" + name
    for key, val in attrs.items():
        if val is True:
            tag += " " + key
        elif val is False:
            continue
        else:
            tag += " " + key + "=\"" + _encode(str(val)) + "\""
    if body is not None:
        return tag + ">" + body + "</" + name + ">"
    return tag + (">" if void else "/>")


__all__ = ["AttrValue", "TagMatch", "iter_tags", "parse_attrs", "render_tag"]
