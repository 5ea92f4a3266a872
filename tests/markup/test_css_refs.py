from inline_assets.markup import iter_css_refs, rewrite


def test_import_with_url_and_media_epilogue():
    css = "@import url(\"a.css\") screen and (min-width: 10px);\nbody{background:url(img/b.png)}"
    refs = list(iter_css_refs(css))
    assert [r.kind for r in refs] == ["import", "url"]
    assert refs[0].url == "a.css"
    assert refs[0].media == " screen and (min-width: 10px)"
    assert refs[0].text == "@import url(\"a.css\") screen and (min-width: 10px);"
    assert refs[1].url == "img/b.png"
    assert refs[1].media is None


def test_import_quote_variants():
    css = "@import 'one.css';@import \"two.css\";@import url(three.css);@import url('four.css') print;"
    refs = list(iter_css_refs(css))
    assert [r.url for r in refs] == ["one.css", "two.css", "three.css", "four.css"]
    assert all(r.kind == "import" for r in refs)
    assert [r.media for r in refs] == [None, None, None, " print"]


def test_font_face_src_list_with_format_hints():
    css = "src: url(f.woff2) format('woff2'), url(\"f.woff\") format(\"woff\");"
    first, second = iter_css_refs(css)
    assert first.url == "f.woff2"
    assert first.format_hint == "woff2"
    assert first.separator == ","
    assert first.text == "url(f.woff2) format('woff2'),"
    assert second.url == "f.woff"
    assert second.format_hint == "woff"
    assert second.separator is None


def test_url_inside_import_is_not_reported_twice():
    refs = list(iter_css_refs("@import url(a.css);"))
    assert len(refs) == 1


def test_rewrite_keeps_text_between_matches():
    css = "a{background:url(x.png)} b{background:url(y.png)}"
    out = rewrite(css, iter_css_refs(css), lambda m: "url(Z)" if m.url == "x.png" else None)
    assert out == "a{background:url(Z)} b{background:url(y.png)}"
