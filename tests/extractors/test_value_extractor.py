"""Tests for constant and variable extraction."""

from __future__ import annotations

from godecl.extractors import ValueExtractor


def test_literal_kinds(load_source) -> None:
    source = load_source(
        """
        package main

        const (
            Name    = "gopher"
            Raw     = `C:\\path`
            Count   = 42
            Ratio   = 0.5
            Initial = 'g'
            Wave    = 2i
            Empty   = ""
        )
        """
    )
    values = ValueExtractor().extract(source)

    assert [(value.name, value.kind, value.literal) for value in values] == [
        ("Name", "string", "gopher"),
        ("Raw", "string", "C:\\path"),
        ("Count", "int", "42"),
        ("Ratio", "float", "0.5"),
        ("Initial", "char", "'g'"),
        ("Wave", "imaginary", "2i"),
        ("Empty", "string", ""),
    ]


def test_non_literal_initializers_are_skipped(load_source) -> None:
    source = load_source(
        """
        package main

        var (
            Started = time.Now()
            Alias   = Name
            Config  = Settings{Debug: true}
            Negative = -1
            Enabled = true
            Plain   int
        )

        const (
            A = iota
            B
        )

        var Name = "kept"
        """
    )
    values = ValueExtractor().extract(source)

    assert [value.name for value in values] == ["Name"]


def test_only_first_name_of_a_multi_assignment_is_captured(load_source) -> None:
    source = load_source(
        """
        package main

        var Host, Port = "localhost", 8080
        var Unknown, Label = lookup(), "second"
        """
    )
    values = ValueExtractor().extract(source)

    assert [(value.name, value.literal) for value in values] == [("Host", "localhost")]


def test_grouped_value_docs(load_source) -> None:
    source = load_source(
        """
        package main

        // Limits used by the server.
        const (
            // MaxConns caps open connections.
            MaxConns = 100
            Timeout  = 30
        )
        """
    )
    max_conns, timeout = ValueExtractor().extract(source)

    assert max_conns.doc == "MaxConns caps open connections.\n"
    assert timeout.doc == ""
