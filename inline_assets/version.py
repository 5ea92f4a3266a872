from __future__ import annotations

from importlib import metadata

DIST_NAME = "inline-assets"

# версия рабочей копии, не установленной через pip
UNKNOWN_VERSION = "0.0.0"


def tool_version() -> str:
    """Версия установленного дистрибутива inline-assets (для --version)."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION


__all__ = ["DIST_NAME", "UNKNOWN_VERSION", "tool_version"]
