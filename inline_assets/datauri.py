from __future__ import annotations

import base64
import mimetypes
from pathlib import Path

DEFAULT_MIME = "application/octet-stream"

# шрифты и часть картинок известны mimetypes не на всех платформах
_KNOWN_TYPES = {
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",
}


def guess_mime(filename: Path | str) -> str:
    known = _KNOWN_TYPES.get(Path(filename).suffix.lower())
    if known:
        return known
    mime, _ = mimetypes.guess_type(str(filename), strict=False)
    return mime or DEFAULT_MIME


def to_data_uri(filename: Path | str, data: bytes) -> str:
    """data:<mime>;base64,<payload> — MIME-тип определяется по имени файла."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{guess_mime(filename)};base64,{payload}"


__all__ = ["DEFAULT_MIME", "guess_mime", "to_data_uri"]
