"""Tests for the control-flow compiler driver."""

import pytest

from atflow.compiler import ControlFlowTransformer, Renderer, transform


IF_ELSE = (
    '<ng-container *ngIf="C">A</ng-container>\n'
    '<ng-container *ngIf="!(C)">B</ng-container>'
)


def test_if_else():
    assert transform("@if(C){A}@else{B}") == IF_ELSE


def test_if_else_if_else():
    out = transform("@if(C1){A}@else if(C2){B}@else{C}")

    assert out == (
        '<ng-container *ngIf="C1">A</ng-container>\n'
        '<ng-container *ngIf="!(C1) && C2">B</ng-container>\n'
        '<ng-container *ngIf="!(C1) && !(C2)">C</ng-container>'
    )


def test_if_alias():
    out = transform("@if(user; as u){<b>{{u.name}}</b>}")
    assert out == '<ng-container *ngIf="user; let u"><b>{{u.name}}</b></ng-container>'


def test_for_with_track():
    out = transform("@for (item of items; track item.id){<li></li>}")
    assert out == (
        '<ng-container *ngFor="let item of items; trackBy: item.id">'
        "<li></li></ng-container>"
    )


def test_surrounding_markup_is_preserved():
    src = "<ul>\n  @for (i of xs) {<li>{{i}}</li>}\n</ul>"
    assert transform(src) == (
        '<ul>\n  <ng-container *ngFor="let i of xs"><li>{{i}}</li></ng-container>\n</ul>'
    )


def test_if_inside_for():
    out = transform("@for (x of xs){@if (x.on){<b></b>}@else{<i></i>}}")

    assert out == (
        '<ng-container *ngFor="let x of xs">'
        '<ng-container *ngIf="x.on"><b></b></ng-container>\n'
        '<ng-container *ngIf="!(x.on)"><i></i></ng-container>'
        "</ng-container>"
    )


def test_for_inside_if():
    out = transform("@if (show){@for (x of xs){<li></li>}}")

    assert out == (
        '<ng-container *ngIf="show">'
        '<ng-container *ngFor="let x of xs"><li></li></ng-container>'
        "</ng-container>"
    )


def test_if_inside_if():
    out = transform("@if (a){@if (b){X}@else{Y}}@else{Z}")

    assert out == (
        '<ng-container *ngIf="a">'
        '<ng-container *ngIf="b">X</ng-container>\n'
        '<ng-container *ngIf="!(b)">Y</ng-container>'
        "</ng-container>\n"
        '<ng-container *ngIf="!(a)">Z</ng-container>'
    )


def test_for_inside_for():
    out = transform("@for (row of rows){@for (cell of row){<td></td>}}")

    assert out == (
        '<ng-container *ngFor="let row of rows">'
        '<ng-container *ngFor="let cell of row"><td></td></ng-container>'
        "</ng-container>"
    )


def test_sibling_blocks():
    out = transform("@if (a) {A}<hr>@if (b) {B}")
    assert out == (
        '<ng-container *ngIf="a">A</ng-container><hr>'
        '<ng-container *ngIf="b">B</ng-container>'
    )


@pytest.mark.parametrize(
    "src",
    [
        "@if(a{b",
        "@for (item items){<li></li>}",
        "@if @for ((({{{ @else",
        "",
        "no control flow here",
    ],
)
def test_malformed_input_is_returned_unchanged(src):
    assert transform(src) == src


def test_unbalanced_block_stops_pass_after_earlier_blocks():
    out = transform("@if (a) {A} @if (b {B}")
    assert out == '<ng-container *ngIf="a">A</ng-container> @if (b {B}'


def test_keyword_without_header_is_skipped():
    out = transform("email @if you can. @if (ok) {yes}")
    assert out == 'email @if you can. <ng-container *ngIf="ok">yes</ng-container>'


def test_malformed_for_is_skipped():
    out = transform("@for (a b){x}@for (i of xs){y}")
    assert out == '@for (a b){x}<ng-container *ngFor="let i of xs">y</ng-container>'


def test_broken_continuation_left_as_text():
    out = transform("@if (a) {A} @else if (b {B}")
    assert out == '<ng-container *ngIf="a">A</ng-container> @else if (b {B}'


def test_broken_else_body_left_as_text():
    out = transform("@if (a){A}@else {B")
    assert out == '<ng-container *ngIf="a">A</ng-container>@else {B'


def test_else_if_alias():
    out = transform("@if (a) {A} @else if (load(); as data) {{{ data }}}")
    assert out == (
        '<ng-container *ngIf="a">A</ng-container>\n'
        '<ng-container *ngIf="!(a) && load(); let data">{{ data }}</ng-container>'
    )


def test_else_before_else_if_ends_chain():
    out = transform("@if (a){A}@else{B}@else if (c){C}")
    assert out == (
        '<ng-container *ngIf="a">A</ng-container>\n'
        '<ng-container *ngIf="!(a)">B</ng-container>'
        "@else if (c){C}"
    )


@pytest.mark.parametrize(
    "src",
    [
        "@if(C){A}@else{B}",
        "@for (x of xs){@if (x.on){<b></b>}}",
        "<div>@if (a){@for (y of ys; track y){<p>{{y}}</p>}}</div>",
    ],
)
def test_transform_is_idempotent(src):
    once = transform(src)
    assert "@if" not in once and "@for" not in once
    assert transform(once) == once


def test_transformer_uses_custom_renderer():
    transformer = ControlFlowTransformer(Renderer(tag="template"))
    assert transformer.transform("@if (a) {A}") == '<template *ngIf="a">A</template>'


def test_passes_can_run_separately():
    transformer = ControlFlowTransformer()
    src = "@if (a) {@for (x of xs) {X}}"

    for_only = transformer.transform_for_blocks(src)
    assert for_only == '@if (a) {<ng-container *ngFor="let x of xs">X</ng-container>}'
    assert transformer.transform_if_blocks(for_only) == transformer.transform(src)


@pytest.mark.parametrize("opener", ["@if (a) {", "@for (x of xs) {"])
def test_nesting_past_recursion_limit_is_returned_unchanged(opener):
    src = opener * 1000 + "x" + "}" * 1000
    assert transform(src) == src
