from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .minify import get_minifier
from .policy import InclusionPolicy
from .types import ContentKind, InlineOptions, Minifier


@dataclass(frozen=True)
class RunContext:
    """
    Неизменяемый контекст одного запуска верхнего уровня.

    Разделяется по ссылке всеми кадрами рекурсии; политика компилируется
    ровно один раз.
    """
    options: InlineOptions
    policy: InclusionPolicy

    @classmethod
    def build(cls, options: InlineOptions) -> RunContext:
        return cls(options=options, policy=InclusionPolicy(options.pattern))

    def report(self, action: str, kind: str, filename: Path, size_before: int, size_after: int) -> None:
        if self.options.verbose is not None:
            self.options.verbose(action, kind, filename, size_before, size_after)

    def minifier(self, kind: ContentKind) -> Minifier:
        return get_minifier(kind, self.options.minifiers)


__all__ = ["RunContext"]
