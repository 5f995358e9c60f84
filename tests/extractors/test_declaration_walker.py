"""Tests for the shared type declaration walker."""

from __future__ import annotations

from godecl.extractors import DeclShape, iter_type_decls


def test_walker_tags_each_type_declaration_with_its_shape(load_source) -> None:
    source = load_source(
        """
        package main

        type Dog struct{ Name string }

        type (
            Greeter interface{ Greet() }
            Count   int
            Alias = struct{}
        )

        func main() {
            type local struct{}
        }
        """
    )
    decls = list(iter_type_decls(source))

    assert [(decl.name, decl.shape) for decl in decls] == [
        ("Dog", DeclShape.RECORD),
        ("Greeter", DeclShape.INTERFACE),
        ("Count", DeclShape.OTHER),
        ("Alias", DeclShape.RECORD),
    ]
