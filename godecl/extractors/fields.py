"""Field and signature extraction shared by struct and interface extractors."""

from __future__ import annotations

from typing import List, Optional

from tree_sitter import Node

from ..frontend import SourceFile, doc_text
from ..models import Field
from ..tags import parse_tags


def extract_fields(field_list: Node, source: SourceFile) -> List[Field]:
    """Build a :class:`Field` for every declaration in a field list.

    A declaration listing several names (``A, B int``) is one entry named by
    its first identifier. Embedded fields are named by their rendered type,
    pointer marker included. Tag decoding errors propagate to the caller.
    """
    renderer = source.renderer
    fields: List[Field] = []
    for declaration in field_list.named_children:
        if declaration.type != "field_declaration":
            continue
        type_node = declaration.child_by_field_name("type")
        if type_node is None:
            continue
        names = declaration.children_by_field_name("name")
        anonymous = not names
        if anonymous:
            type_text = renderer.render(*_type_expression(declaration, type_node))
            name = type_text
        else:
            type_text = renderer.render(type_node)
            name = renderer.text(names[0])

        item = Field(
            name=name,
            type=type_text,
            doc=doc_text(declaration, renderer),
            anonymous=anonymous,
        )
        tag_node = declaration.child_by_field_name("tag")
        if tag_node is not None:
            literal = renderer.text(tag_node)
            if len(literal) > 2:
                item.tag = literal[1:-1]
                tags = parse_tags(item.tag)
                item.tags = tags if len(tags) else None
        fields.append(item)
    return fields


def _type_expression(declaration: Node, type_node: Node) -> List[Node]:
    # An embedded field's type starts at the optional '*' before the type node.
    return [child for child in declaration.children if child.end_byte <= type_node.end_byte]


def extract_param_types(node: Optional[Node], source: SourceFile) -> List[str]:
    """Return the identifier-shaped types of a parameter or result list.

    ``T`` and ``*T`` contribute ``T``; qualified, generic, slice, map, function
    and variadic parameter types are left out. ``node`` may also be a bare
    result type such as the ``error`` in ``Close() error``.
    """
    if node is None:
        return []
    if node.type != "parameter_list":
        name = _identifier_type(node, source)
        return [name] if name is not None else []

    results: List[str] = []
    for parameter in node.named_children:
        if parameter.type != "parameter_declaration":
            continue
        type_node = parameter.child_by_field_name("type")
        if type_node is None:
            continue
        name = _identifier_type(type_node, source)
        if name is not None:
            results.append(name)
    return results


def _identifier_type(type_node: Node, source: SourceFile) -> Optional[str]:
    if type_node.type == "pointer_type" and type_node.named_child_count:
        type_node = type_node.named_children[0]
    if type_node.type == "type_identifier":
        return source.renderer.text(type_node)
    return None


__all__ = ["extract_fields", "extract_param_types"]
