from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Literal, Mapping, Optional, Protocol, Tuple

from .errors import ConfigError

# ---- Aliases for clarity ----
ContentKind = Literal["HTML", "CSS", "JS", "DATA"]
Minifier = Callable[[str], str]
Content = str | bytes

DEFAULT_PATTERN: Tuple[str, ...] = (".+",)


class Reporter(Protocol):
    """
    Наблюдатель за ходом обработки.

    Вызывается перед каждым шагом (size_after == -1) и после него
    (size_after — итоговый размер).
    """
    def __call__(self, action: str, kind: str, filename: Path, size_before: int, size_after: int) -> None: ...


# -----------------------------
@dataclass(frozen=True)
class InlineOptions:
    """
    Полностью резолвленная конфигурация одного запуска.

    Создаётся один раз на верхнем уровне и передаётся по ссылке
    во все рекурсивные вызовы.
    """
    htmlmin: bool = False
    cssmin: bool = False
    jsmin: bool = False
    # ordered include/exclude regex chain, "!" prefix negates
    pattern: Tuple[str, ...] = DEFAULT_PATTERN
    purge: bool = False
    verbose: Optional[Reporter] = None
    # content kind -> (text) -> text; None means the library defaults
    minifiers: Optional[Mapping[str, Minifier]] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> InlineOptions:
        """
        Build options from a raw mapping (CLI, task files, library callers).

        Missing keys get their defaults; the input mapping is never modified.
        """
        data = dict(raw or {})
        allowed = {f.name for f in fields(cls)}
        extras = set(data) - allowed
        if extras:
            raise ConfigError(f"unknown options: {sorted(extras)!r}")

        kwargs: dict[str, Any] = {}
        for key in ("htmlmin", "cssmin", "jsmin", "purge"):
            if key in data and data[key] is not None:
                val = data[key]
                if not isinstance(val, bool):
                    raise ConfigError(f"option '{key}' must be a boolean, got {type(val).__name__}")
                kwargs[key] = val

        if data.get("pattern") is not None:
            kwargs["pattern"] = _coerce_pattern(data["pattern"])

        verbose = data.get("verbose")
        if verbose is not None:
            if not callable(verbose):
                raise ConfigError("option 'verbose' must be a callable reporter")
            kwargs["verbose"] = verbose

        minifiers = data.get("minifiers")
        if minifiers is not None:
            if not isinstance(minifiers, Mapping):
                raise ConfigError("option 'minifiers' must be a mapping of content kind to callable")
            kwargs["minifiers"] = dict(minifiers)

        return cls(**kwargs)


def _coerce_pattern(val: Any) -> Tuple[str, ...]:
    # CLI-совместимая форма: "a,!b"
    if isinstance(val, str):
        return tuple(val.split(","))
    if isinstance(val, (list, tuple)) and all(isinstance(p, str) for p in val):
        return tuple(val)
    raise ConfigError("option 'pattern' must be a list of strings or a comma-separated string")


__all__ = ["ContentKind", "Minifier", "Content", "Reporter", "InlineOptions", "DEFAULT_PATTERN"]
