"""Tests for the template minifier."""

from atflow.template import TemplateMinifier


def test_remove_comments():
    minifier = TemplateMinifier()
    assert minifier.remove_comments("<p>a</p><!-- note\n -->b") == "<p>a</p>b"


def test_remove_comments_keeps_select_loop_markers():
    src = "<!--F:o:opts--><option></option><!--/F-->"
    assert TemplateMinifier().remove_comments(src) == src


def test_whitespace_between_tags_is_dropped():
    src = "<div>\n  <span>a</span>\n</div>"
    assert TemplateMinifier().minify(src) == "<div><span>a</span></div>"


def test_text_runs_collapse():
    assert TemplateMinifier().minify("<p>Hello   big\n world</p>") == (
        "<p>Hello big world</p>"
    )


def test_edge_text_keeps_single_space():
    minifier = TemplateMinifier()
    assert minifier.minify("<br>  trailing   text ") == "<br> trailing text"
    assert minifier.minify("  lead  text <br>") == "lead text <br>"


def test_text_without_tags():
    assert TemplateMinifier().minify("a   b\n c") == "a b c"


def test_minify_attribute_value():
    assert TemplateMinifier().minify_attribute_value("  btn   primary\n") == (
        "btn primary"
    )
