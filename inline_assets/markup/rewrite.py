from __future__ import annotations

from typing import Callable, Iterable, Optional, Protocol, TypeVar


class Span(Protocol):
    start: int
    end: int
    text: str


M = TypeVar("M", bound=Span)


def rewrite(text: str, matches: Iterable[M], replace: Callable[[M], Optional[str]]) -> str:
    """
    Пересобирает буфер из упорядоченного потока непересекающихся совпадений.

    Текст между совпадениями сохраняется как есть; replace() возвращает
    новый текст фрагмента либо None — оставить фрагмент нетронутым.
    """
    out: list[str] = []
    pos = 0
    for m in matches:
        out.append(text[pos:m.start])
        repl = replace(m)
        out.append(m.text if repl is None else repl)
        pos = m.end
    out.append(text[pos:])
    return "".join(out)


__all__ = ["Span", "rewrite"]
