"""
Политика включения ассетов.

Упорядоченная цепочка регулярных выражений, каждое может быть отрицанием
(префикс "!"). Побеждает последнее совпавшее правило.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

from .errors import InvalidPatternError


@dataclass(frozen=True)
class PatternRule:
    raw: str
    regex: re.Pattern[str]
    negated: bool

    @classmethod
    def compile(cls, raw: str) -> PatternRule:
        negated = raw.startswith("!")
        source = raw[1:] if negated else raw
        try:
            regex = re.compile(source)
        except re.error as e:
            raise InvalidPatternError(raw, str(e)) from e
        return cls(raw=raw, regex=regex, negated=negated)


class InclusionPolicy:
    """
    Скомпилированная цепочка правил.

    • Начальное решение True, если первое правило отрицательное
      (список описывает «всё, кроме ...»), иначе False.
    • Каждое совпавшее правило выставляет решение в `not negated`.
    """

    __slots__ = ("rules",)

    def __init__(self, patterns: Iterable[str]):
        self.rules: List[PatternRule] = [PatternRule.compile(p) for p in patterns]

    def includes(self, path: Path | str) -> bool:
        if not self.rules:
            return False
        # POSIX-форма, чтобы паттерны вида "/vendor/" работали одинаково везде
        subject = path.as_posix() if isinstance(path, Path) else str(path)
        decision = self.rules[0].negated
        for rule in self.rules:
            if rule.regex.search(subject):
                decision = not rule.negated
        return decision


def should_inline(patterns: Sequence[str], path: Path | str) -> bool:
    """Одноразовая проверка без предварительной компиляции политики."""
    return InclusionPolicy(patterns).includes(path)


__all__ = ["PatternRule", "InclusionPolicy", "should_inline"]
