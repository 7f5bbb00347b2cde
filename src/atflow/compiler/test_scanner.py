"""Tests for the block scanner."""

import pytest

from atflow.compiler.scanner import expect_group, find_closing, locate
from atflow.compiler.spec import TextSpan
from atflow.exceptions import MalformedHeader, UnbalancedDelimiter


def test_find_closing_skips_nested_groups():
    assert find_closing("(a(b)c)", 0) == 6
    assert find_closing("{ {x} {y} }", 0) == 10


def test_find_closing_ignores_other_delimiter_kind():
    """A stray ')' in a brace body does not affect brace depth."""
    assert find_closing("{ 1) first }", 0) == 11


def test_find_closing_unbalanced_raises():
    with pytest.raises(UnbalancedDelimiter) as exc:
        find_closing("x (a (b)", 2)
    assert exc.value.position == 2


def test_expect_group_skips_leading_whitespace():
    assert expect_group("  (x)", 0, "(") == TextSpan(2, 5)


def test_expect_group_wrong_opener_raises():
    with pytest.raises(MalformedHeader):
        expect_group("  x", 0, "(")

    with pytest.raises(MalformedHeader):
        expect_group("", 0, "{")


def test_locate_returns_exact_spans():
    text = "<p>@if (a) {b}</p>"
    match = locate(text, "if")

    assert match is not None
    assert match.start == 3
    assert match.header == TextSpan(7, 10)
    assert match.body == TextSpan(11, 14)
    assert match.end == 14
    assert match.header.inner.slice(text) == "a"
    assert match.body.inner.slice(text) == "b"


def test_locate_respects_start_offset():
    text = "@if(a){b} @if(c){d}"
    match = locate(text, "if", 1)

    assert match is not None
    assert match.start == 10


def test_locate_not_found():
    assert locate("plain <b>markup</b>", "if") is None
    assert locate("@iffy (x) {y}", "if") is None
    assert locate("@foreach (x) {y}", "for") is None


def test_locate_nested_expression_delimiters():
    text = "@if (fn(a, {b: 1})) { {x} }"
    match = locate(text, "if")

    assert match is not None
    assert match.header.slice(text) == "(fn(a, {b: 1}))"
    assert match.body.slice(text) == "{ {x} }"


def test_locate_missing_header_reports_keyword_offset():
    with pytest.raises(MalformedHeader) as exc:
        locate("say @for real", "for")
    assert exc.value.position == 4


def test_locate_unbalanced_raises():
    with pytest.raises(UnbalancedDelimiter):
        locate("@if(a{b", "if")

    with pytest.raises(UnbalancedDelimiter):
        locate("@for (x of xs) { <li>", "for")
