from pywidget.widget.helpers import render_attrs, script_tag, style_tag, stylesheet_tag


def test_render_attrs_extra_attrs_override_in_place() -> None:
    rendered = render_attrs({"rel": "stylesheet", "href": "a.css"}, {"rel": "preload", "as": "style"})
    assert rendered == ' rel="preload" href="a.css" as="style"'


def test_stylesheet_tag_with_extra_attrs() -> None:
    tag = stylesheet_tag("a.css", (("media", "print"), ("crossorigin", True), ("title", None)))
    assert tag == '<link rel="stylesheet" href="a.css" media="print" crossorigin>'


def test_render_attrs_booleans_and_none() -> None:
    assert render_attrs({"async": True, "defer": False, "nonce": None}) == " async"


def test_render_attrs_escapes_quotes() -> None:
    assert render_attrs({"title": 'say "hi"'}) == ' title="say &quot;hi&quot;"'


def test_reference_tags() -> None:
    assert stylesheet_tag("a.css") == '<link rel="stylesheet" href="a.css">'
    assert script_tag("a.js", (("async", True),)) == '<script src="a.js" async></script>'


def test_style_tag_media() -> None:
    assert style_tag("p{}") == "<style>p{}</style>"
    assert style_tag("p{}", "print") == "<style>@media print{p{}}</style>"
