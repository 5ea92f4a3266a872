from __future__ import annotations

# Public API:
#  • process_asset — rewrite a document with all external assets inlined
#  • inline_file — same, reading the source from disk
#  • InlineOptions — per-invocation configuration
from .engine import inline_file, process_asset, read_source
from .errors import (
    ConfigError,
    CyclicImportError,
    InlineAssetsError,
    InvalidPatternError,
    MissingAssetError,
    TaskError,
)
from .policy import InclusionPolicy, should_inline
from .types import InlineOptions, Reporter

__all__ = [
    "process_asset",
    "inline_file",
    "read_source",
    "InlineOptions",
    "Reporter",
    "InclusionPolicy",
    "should_inline",
    "InlineAssetsError",
    "MissingAssetError",
    "CyclicImportError",
    "InvalidPatternError",
    "ConfigError",
    "TaskError",
]
