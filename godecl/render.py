"""Canonical source rendering for tree-sitter nodes."""

from __future__ import annotations

from typing import List, Sequence

from tree_sitter import Node

from .errors import RenderError

# Literal nodes whose children must not be re-joined token by token.
_ATOMIC_TYPES = {
    "interpreted_string_literal",
    "raw_string_literal",
    "rune_literal",
}
_CLOSERS = {")", "]", ",", ";", ".", ":"}
_PREFIX_OPERATORS = {"*", "&", "~", "...", "!", "^", "-", "+"}


class SourceRenderer:
    """Renders syntax nodes back to single-line canonical Go text.

    Comments are dropped and whitespace is rebuilt from the token stream, so
    ``* Base`` renders as ``*Base`` and ``map[ string ]int`` as
    ``map[string]int``. Statement terminators inside struct and interface
    literals render as ``;``.
    """

    def __init__(self, source: bytes, encoding: str = "utf-8") -> None:
        self._source = source
        self._encoding = encoding

    def text(self, node: Node) -> str:
        """Return the verbatim source text of ``node``."""
        raw = self._source[node.start_byte : node.end_byte]
        try:
            return raw.decode(self._encoding)
        except UnicodeDecodeError as exc:
            line = node.start_point[0] + 1
            raise RenderError(f"cannot decode source at line {line}: {exc}") from exc

    def render(self, *nodes: Node) -> str:
        """Render one node, or a run of adjacent sibling nodes, canonically."""
        if not nodes:
            raise RenderError("nothing to render")
        tokens: List[str] = []
        for node in nodes:
            if node.has_error or node.is_missing:
                line = node.start_point[0] + 1
                raise RenderError(f"cannot render {node.type} with syntax errors at line {line}")
            self._collect(node, tokens)
        return _join(tokens)

    def _collect(self, node: Node, tokens: List[str]) -> None:
        if node.type == "comment":
            return
        if node.type in _ATOMIC_TYPES or node.child_count == 0:
            token = self.text(node).strip()
            if not token:
                token = ";"
            tokens.append(token)
            return
        for child in node.children:
            self._collect(child, tokens)


def _join(tokens: Sequence[str]) -> str:
    cleaned = _drop_redundant_terminators(tokens)
    parts: List[str] = []
    for index, token in enumerate(cleaned):
        if index and _needs_space(cleaned, index):
            parts.append(" ")
        parts.append(token)
    return "".join(parts)


def _drop_redundant_terminators(tokens: Sequence[str]) -> List[str]:
    result: List[str] = []
    for index, token in enumerate(tokens):
        if token == ";":
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if not result or result[-1] in {"{", ";"} or following in {"}", None}:
                continue
        result.append(token)
    return result


def _is_word(token: str) -> bool:
    return token[0].isalnum() or token[0] in {"_", '"', "'", "`"} or token[-1].isalnum()


def _needs_space(tokens: Sequence[str], index: int) -> bool:
    prev, cur = tokens[index - 1], tokens[index]
    if prev in {"(", "["} or prev == "." or cur in _CLOSERS:
        return False
    if prev == "{":
        return cur != "}"
    if cur == "}":
        return True
    if cur == "{":
        return prev not in {"struct", "interface"}
    if prev in {",", ";", "|"} or cur == "|":
        return True
    if prev == "<-":
        return index >= 2 and tokens[index - 2] == "chan"
    if cur == "<-":
        return prev != "chan"
    if prev in _PREFIX_OPERATORS:
        return False
    if cur in {"(", "["}:
        return prev == ")"
    if prev == ")":
        return True
    if prev == "]":
        return False
    return _is_word(prev)


__all__ = ["SourceRenderer"]
