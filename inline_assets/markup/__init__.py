from __future__ import annotations

# Public API of markup package:
#  • iter_tags / parse_attrs / render_tag — HTML tag matching and re-serialization
#  • iter_css_refs — @import / url() references in stylesheets
#  • rewrite — span-preserving substitution of matches
from .css import CssMatch, iter_css_refs
from .rewrite import rewrite
from .tags import TagMatch, iter_tags, parse_attrs, render_tag

__all__ = [
    "CssMatch",
    "iter_css_refs",
    "TagMatch",
    "iter_tags",
    "parse_attrs",
    "render_tag",
    "rewrite",
]
