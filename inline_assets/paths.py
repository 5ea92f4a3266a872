"""
Резолвинг URL ссылок в пути файловой системы.

Все относительные ссылки разрешаются от каталога *ссылающегося* файла
(на каждом уровне рекурсии свой), а не от исходного документа верхнего уровня.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

# data:, http:, https: — уже «встроенные» или внешние ссылки, их не трогаем
_INLINE_SCHEME_RE = re.compile(r"^(?:data|https?):", re.IGNORECASE)
_SUFFIX_RE = re.compile(r"[?#].*$", re.DOTALL)


def is_inline_url(url: str) -> bool:
    """True для URL со схемой data:/http:/https: (регистр не важен)."""
    return bool(_INLINE_SCHEME_RE.match(url.strip()))


def url_to_filename(url: str) -> str:
    """Отрезает query string и fragment: всё, начиная с первого '?' или '#'."""
    return _SUFFIX_RE.sub("", url.strip())


def resolve_url(base_file: Path, url: str) -> Optional[Path]:
    """
    Разрешить ссылку в абсолютный путь относительно каталога base_file.

    Returns:
        Абсолютный путь, либо None если ссылку нужно оставить как есть
        (data:/http:/https: или пустой путь вроде "#frag").
    """
    if is_inline_url(url):
        return None
    fn = url_to_filename(url)
    if not fn:
        return None
    # normpath, без резолва симлинков
    return Path(os.path.abspath(os.path.join(os.path.dirname(os.fspath(base_file)), fn)))


__all__ = ["is_inline_url", "url_to_filename", "resolve_url"]
