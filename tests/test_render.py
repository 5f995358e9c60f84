"""Tests for canonical type rendering."""

from __future__ import annotations

import pytest

from godecl import parse
from godecl.errors import RenderError
from godecl.frontend import parse_source
from godecl.render import SourceRenderer
from tests._fixtures.go_sources import go_source


def _field_type(type_expr: str) -> str:
    registry = parse(
        go_source(
            f"""
            package main

            type Holder struct {{
                Value {type_expr}
            }}
            """
        )
    )
    return registry.records[0].fields[0].type


@pytest.mark.parametrize(
    ("type_expr", "expected"),
    [
        ("string", "string"),
        ("*Dog", "*Dog"),
        ("[]byte", "[]byte"),
        ("map[string]*Dog", "map[string]*Dog"),
        ("map[ string ] []int", "map[string][]int"),
        ("time.Duration", "time.Duration"),
        ("[4]int", "[4]int"),
        ("chan<- int", "chan<- int"),
        ("<-chan error", "<-chan error"),
        ("func(a, b int) (string, error)", "func(a, b int) (string, error)"),
        ("func() []string", "func() []string"),
        ("struct{}", "struct{}"),
        ("interface{}", "interface{}"),
        ("List[T]", "List[T]"),
    ],
)
def test_field_types_render_canonically(type_expr: str, expected: str) -> None:
    assert _field_type(type_expr) == expected


def test_comments_inside_types_are_dropped() -> None:
    assert _field_type("map[string] /* keyed by id */ int") == "map[string]int"


def test_render_requires_a_node() -> None:
    renderer = SourceRenderer(b"")
    with pytest.raises(RenderError):
        renderer.render()


def test_render_rejects_nodes_with_errors() -> None:
    source = parse_source(b"package main\n\ntype Broken struct {\n", strict=False)
    with pytest.raises(RenderError):
        source.renderer.render(source.root)


def test_text_reports_undecodable_bytes() -> None:
    source = parse_source(b'package main\n\nconst Bad = "\xff"\n', strict=False)
    with pytest.raises(RenderError):
        source.renderer.text(source.root)
