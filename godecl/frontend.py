"""Tree-sitter front end for Go sources."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from .errors import SourceSyntaxError
from .render import SourceRenderer

GO_LANGUAGE = Language(tree_sitter_go.language())

_TERMINATORS = {"\n", ";"}
_DIRECTIVE = re.compile(r"^(?:line |extern |export |[a-z0-9]+:[a-z0-9])")


@dataclass
class SourceFile:
    """A parsed Go file together with the bytes it was parsed from."""

    tree: Tree
    source: bytes
    renderer: SourceRenderer

    @property
    def root(self) -> Node:
        return self.tree.root_node


def parse_source(data: bytes, *, encoding: str = "utf-8", strict: bool = True) -> SourceFile:
    """Parse Go source bytes into a :class:`SourceFile`.

    tree-sitter always produces a tree; in strict mode any error or missing
    node is reported as :class:`SourceSyntaxError` pointing at the first one.
    """
    parser = Parser(GO_LANGUAGE)
    tree = parser.parse(data)
    if strict and tree.root_node.has_error:
        problem = _first_error(tree.root_node) or tree.root_node
        line, column = problem.start_point[0] + 1, problem.start_point[1] + 1
        detail = f"missing {problem.type}" if problem.is_missing else "unexpected input"
        raise SourceSyntaxError(f"{line}:{column}: {detail}", line=line, column=column)
    return SourceFile(tree=tree, source=data, renderer=SourceRenderer(data, encoding))


def _first_error(node: Node) -> Optional[Node]:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def leading_comments(node: Node) -> List[Node]:
    """Return the comment group directly above ``node``, in source order.

    The group is the run of comments whose last line is the line before the
    node, with no blank line in between. A comment sharing a line with the
    preceding token is a trailing comment of that token and is excluded.
    """
    comments: List[Node] = []
    expected_row = node.start_point[0]
    sibling = node.prev_sibling
    while sibling is not None:
        if sibling.type == "comment":
            if sibling.end_point[0] < expected_row - 1:
                break
            comments.append(sibling)
            expected_row = sibling.start_point[0]
        elif sibling.type not in _TERMINATORS:
            while comments and comments[-1].start_point[0] <= sibling.end_point[0]:
                comments.pop()
            break
        sibling = sibling.prev_sibling
    comments.reverse()
    return comments


def doc_text(node: Node, renderer: SourceRenderer) -> str:
    """Return the doc comment of ``node`` with comment markers removed.

    Lines keep their relative indentation, trailing whitespace and tool
    directives such as ``//go:generate`` are dropped, leading and trailing blank
    lines are removed and interior blank runs collapse to one. Non-empty docs
    end with a newline.
    """
    lines: List[str] = []
    for comment in leading_comments(node):
        text = renderer.text(comment)
        if text.startswith("//"):
            text = text[2:]
            if text.startswith(" "):
                text = text[1:]
            elif _DIRECTIVE.match(text):
                continue
        elif text.startswith("/*"):
            text = text[2:-2]
        lines.extend(line.rstrip() for line in text.split("\n"))

    collapsed: List[str] = []
    for line in lines:
        if line == "" and (not collapsed or collapsed[-1] == ""):
            continue
        collapsed.append(line)
    while collapsed and collapsed[-1] == "":
        collapsed.pop()
    if not collapsed:
        return ""
    return "\n".join(collapsed) + "\n"


__all__ = ["GO_LANGUAGE", "SourceFile", "doc_text", "leading_comments", "parse_source"]
