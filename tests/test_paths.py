from pathlib import Path

import pytest

from inline_assets.paths import is_inline_url, resolve_url, url_to_filename


@pytest.mark.parametrize("url", [
    "data:image/png;base64,AAAA",
    "DATA:image/png;base64,AAAA",
    "http://example.com/a.css",
    "HTTPS://example.com/a.css",
    "  https://example.com/a.css",
])
def test_inline_schemes_are_recognized(url):
    assert is_inline_url(url)


@pytest.mark.parametrize("url", ["a.css", "../img/x.png", "//cdn.example.com/a.js", "ftp-like.css"])
def test_local_urls_are_not_inline(url):
    assert not is_inline_url(url)


def test_query_and_fragment_are_stripped():
    assert url_to_filename("a.css?v=1#top") == "a.css"
    assert url_to_filename("font.svg#icon?x") == "font.svg"
    assert url_to_filename("plain.png") == "plain.png"


def test_resolves_relative_to_referencing_file(tmp_path: Path):
    base = tmp_path / "css" / "main.css"
    assert resolve_url(base, "../img/a.png?v=2") == tmp_path / "img" / "a.png"
    assert resolve_url(base, "fonts/f.woff") == tmp_path / "css" / "fonts" / "f.woff"


def test_skip_scheme_and_empty_urls_resolve_to_none(tmp_path: Path):
    base = tmp_path / "index.html"
    assert resolve_url(base, "https://example.com/x.css") is None
    assert resolve_url(base, "data:text/css,body{}") is None
    # ссылки на фрагменты (например url(#filter) в SVG/CSS)
    assert resolve_url(base, "#filter") is None
    assert resolve_url(base, "?only-query") is None
