from pathlib import Path

import pytest

from inline_assets import MissingAssetError, process_asset
from tests.infrastructure.file_utils import write, write_bytes
from tests.infrastructure.testing_utils import PNG_B64, PNG_BYTES, make_options


def _html(root: Path, text: str, name: str = "index.html", **opts) -> str:
    src = write(root / name, text)
    return process_asset(None, src, text, make_options(**opts))


def test_script_src_is_inlined_without_src_attribute(tmp_path: Path):
    write(tmp_path / "app.js", "var x=1;")
    assert _html(tmp_path, "<script src=\"app.js\"></script>") == "<script>var x=1;</script>"


def test_script_keeps_other_attributes(tmp_path: Path):
    write(tmp_path / "app.js", "go();")
    out = _html(tmp_path, "<script defer src='app.js' data-q=\"a&amp;b\"></script>")
    assert out == "<script defer data-q=\"a&amp;b\">go();</script>"


def test_script_with_jsmin_is_minified(tmp_path: Path):
    write(tmp_path / "app.js", "var x=1;")
    out = _html(tmp_path, "<script src=\"app.js\"></script>", jsmin=True)
    assert out == "<script>/*min*/var x=1;</script>"


@pytest.mark.parametrize("tag", [
    "<script type=\"module\" src=\"app.mjs\"></script>",
    "<script type=\"text/template\" src=\"tpl.html\"></script>",
    "<script>inline();</script>",
    "<script src=\"https://cdn.example.com/lib.js\"></script>",
])
def test_scripts_that_are_not_local_javascript_stay_untouched(tmp_path: Path, tag: str):
    assert _html(tmp_path, tag) == tag


def test_script_with_js_src_and_foreign_type_is_inlined(tmp_path: Path):
    write(tmp_path / "m.js", "export {};")
    out = _html(tmp_path, "<script type=\"module\" src=\"m.js\"></script>")
    assert out == "<script type=\"module\">export {};</script>"


def test_stylesheet_link_becomes_style_tag(tmp_path: Path):
    write(tmp_path / "s.css", "p{}")
    out = _html(tmp_path, "<head><link rel=\"stylesheet\" href=\"s.css\"/></head>")
    assert out == "<head><style type=\"text/css\">p{}</style></head>"


def test_link_media_wraps_stylesheet(tmp_path: Path):
    write(tmp_path / "print.css", "p{}")
    out = _html(tmp_path, "<link rel=\"stylesheet\" href=\"print.css\" media=\"print\">")
    assert out == "<style type=\"text/css\">@media print {p{} }</style>"


@pytest.mark.parametrize("tag", [
    "<link type=\"text/css\" href=\"s.php\">",
    "<link href=\"s.css?v=2\">",
    "<link rel=\"alternate stylesheet\" href=\"s.php\">",
])
def test_stylesheet_detection_by_rel_type_or_extension(tmp_path: Path, tag: str):
    write(tmp_path / "s.php", "a{}")
    write(tmp_path / "s.css", "a{}")
    assert _html(tmp_path, tag) == "<style type=\"text/css\">a{}</style>"


def test_non_stylesheet_links_stay_untouched(tmp_path: Path):
    tag = "<link rel=\"icon\" href=\"favicon.ico\"><link rel=\"stylesheet\" href=\"https://x.org/a.css\">"
    assert _html(tmp_path, tag) == tag


def test_inline_style_body_is_expanded_in_place(tmp_path: Path):
    write_bytes(tmp_path / "img" / "bg.png", PNG_BYTES)
    text = "<style media=\"screen\" nonce=abc>\nbody{background:url(img/bg.png)}\n</style>"
    out = _html(tmp_path, text)
    assert out == (
        "<style media=\"screen\" nonce=abc>\nbody{background:url(\"data:image/png;base64,"
        + PNG_B64 + "\")}\n</style>"
    )


def test_style_with_foreign_type_stays_untouched(tmp_path: Path):
    text = "<style type=\"text/less\">@import 'x.less';</style>"
    assert _html(tmp_path, text) == text


def test_image_src_becomes_data_uri_keeping_attributes(tmp_path: Path):
    write_bytes(tmp_path / "logo.png", PNG_BYTES)
    out = _html(tmp_path, "<p><img alt='Logo' src=\"logo.png\" class=big hidden></p>")
    assert out == (
        "<p><img alt=\"Logo\" src=\"data:image/png;base64," + PNG_B64 + "\" class=\"big\" hidden></p>"
    )


def test_self_closing_image_stays_self_closing(tmp_path: Path):
    write_bytes(tmp_path / "logo.png", PNG_BYTES)
    out = _html(tmp_path, "<img src=\"logo.png\"/>")
    assert out == "<img src=\"data:image/png;base64," + PNG_B64 + "\"/>"


def test_images_with_unknown_extensions_stay_untouched(tmp_path: Path):
    text = "<img src=\"photo.webp\"><img src=\"data:image/png;base64,AAAA\">"
    assert _html(tmp_path, text) == text


def test_rejected_tags_are_left_or_purged(tmp_path: Path):
    write(tmp_path / "app.js", "app();")
    write(tmp_path / "vendor" / "lib.css", "lib{}")
    text = "<link rel=\"stylesheet\" href=\"vendor/lib.css\">\n<script src=\"app.js\"></script>"
    pattern = [".+", "!/vendor/"]

    kept = _html(tmp_path, text, pattern=pattern)
    assert kept == "<link rel=\"stylesheet\" href=\"vendor/lib.css\">\n<script>app();</script>"

    purged = _html(tmp_path, text, pattern=pattern, purge=True)
    assert purged == "\n<script>app();</script>"


def test_htmlmin_runs_once_over_whole_document(tmp_path: Path):
    write(tmp_path / "s.css", "p{}")
    out = _html(tmp_path, "<link rel=stylesheet href=\"s.css\">", htmlmin=True, cssmin=True)
    assert out == "<!--min--><style type=\"text/css\">/*min*/p{}</style>"


def test_htm_extension_is_dispatched_to_html(tmp_path: Path):
    write(tmp_path / "app.js", "a();")
    out = _html(tmp_path, "<script src=\"app.js\"></script>", name="page.HTM")
    assert out == "<script>a();</script>"


def test_missing_script_fails(tmp_path: Path):
    with pytest.raises(MissingAssetError):
        _html(tmp_path, "<script src=\"missing.js\"></script>")
