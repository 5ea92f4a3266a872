from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Type

from .base import BaseHandler

__all__ = [
    "register_lazy",
    "get_handler_for_path",
    "list_handlers",
]


@dataclass(frozen=True)
class _HandlerRef:
    """Где лежит класс обработчика: модуль (относительно пакета) и имя."""
    module: str
    class_name: str

    def load(self) -> Type[BaseHandler]:
        mod = importlib.import_module(self.module, package=__package__)
        cls = getattr(mod, self.class_name, None)
        if cls is None:
            raise RuntimeError(f"Handler class '{self.class_name}' not found in {self.module}")
        if not issubclass(cls, BaseHandler):
            raise TypeError(f"{self.module}.{self.class_name} is not a subclass of BaseHandler")
        return cls


# расширение (в нижнем регистре) → ссылка на класс
_REFS: Dict[str, _HandlerRef] = {}

# уже импортированные классы: по расширению
_CLASSES: Dict[str, Type[BaseHandler]] = {}

# всё, что не распознано по расширению, встраивается как data: URI
_FALLBACK = _HandlerRef(module=".data", class_name="DataHandler")


def register_lazy(*, module: str, class_name: str, extensions: Iterable[str]) -> None:
    """
    Объявить обработчик без импорта его модуля.

    Модуль импортируется при первом обращении к любому из расширений.
    """
    ref = _HandlerRef(module=module, class_name=class_name)
    for ext in extensions:
        ext = ext.lower()
        _REFS[ext] = ref
        _CLASSES.pop(ext, None)


def _load(ref: _HandlerRef) -> Type[BaseHandler]:
    cls = ref.load()
    # загруженный класс обслуживает все свои расширения, не только объявленные лениво
    for ext in cls.extensions:
        _CLASSES[ext.lower()] = cls
    return cls


def _resolve(ext: str) -> Type[BaseHandler]:
    cls = _CLASSES.get(ext)
    if cls is not None:
        return cls
    ref = _REFS.get(ext)
    if ref is None:
        # DataHandler без собственных расширений: кэшировать нечего
        return _FALLBACK.load()
    cls = _load(ref)
    # ленивое объявление по расширению, которого нет в cls.extensions
    _CLASSES[ext] = cls
    return cls


def get_handler_for_path(path: Path) -> Type[BaseHandler]:
    """Класс обработчика по расширению пути (без учёта регистра)."""
    return _resolve(path.suffix.lower())


def list_handlers() -> Dict[str, str]:
    """Расширение → тип контента для всех известных обработчиков."""
    exts = set(_REFS) | set(_CLASSES)
    return {ext: _resolve(ext).kind for ext in sorted(exts)}
