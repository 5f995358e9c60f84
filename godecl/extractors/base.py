"""Base classes and the shared declaration walker for extractors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, List, TypeVar

from tree_sitter import Node

from ..frontend import SourceFile, doc_text

T = TypeVar("T")

_TYPE_SPEC_TYPES = {"type_spec", "type_alias"}


class Extractor(ABC, Generic[T]):
    """Contract for extractors that turn a parsed file into declaration entities."""

    name: str = "extractor"

    @abstractmethod
    def extract(self, source: SourceFile) -> List[T]:
        """Return the entities of this extractor's category, in source order."""


class DeclShape(Enum):
    """Underlying shape of a named type declaration."""

    RECORD = "record"
    INTERFACE = "interface"
    OTHER = "other"

    @classmethod
    def of(cls, type_node: Node) -> "DeclShape":
        if type_node.type == "struct_type":
            return cls.RECORD
        if type_node.type == "interface_type":
            return cls.INTERFACE
        return cls.OTHER


@dataclass
class TypeDecl:
    """A top-level ``type`` entry tagged with the shape of its definition."""

    name: str
    doc: str
    shape: DeclShape
    type_node: Node
    node: Node


def iter_type_decls(source: SourceFile) -> Iterator[TypeDecl]:
    """Yield every top-level type declaration that has a definition.

    Both single and grouped declarations are visited. Classification is left
    to the caller, which filters on :attr:`TypeDecl.shape`.
    """
    renderer = source.renderer
    for declaration in source.root.children:
        if declaration.type != "type_declaration":
            continue
        for spec in iter_specs(declaration, _TYPE_SPEC_TYPES):
            name_node = spec.child_by_field_name("name")
            type_node = spec.child_by_field_name("type")
            if name_node is None or type_node is None:
                continue
            yield TypeDecl(
                name=renderer.text(name_node),
                doc=spec_doc(declaration, spec, source),
                shape=DeclShape.of(type_node),
                type_node=type_node,
                node=spec,
            )


def iter_specs(declaration: Node, spec_types: set[str]) -> Iterator[Node]:
    """Yield the specs of a declaration, looking through ``(...)`` groups."""
    for child in declaration.named_children:
        if child.type in spec_types:
            yield child
        elif child.type.endswith("_spec_list"):
            for grouped in child.named_children:
                if grouped.type in spec_types:
                    yield grouped


def spec_doc(declaration: Node, spec: Node, source: SourceFile) -> str:
    """Doc comment of a spec; an ungrouped spec inherits its declaration's.

    Go's parser attaches the comment above an ungrouped ``type``/``const``/``var``
    keyword to the declaration rather than to the spec. It is lifted to the spec
    here so that ``// Dog ...`` above ``type Dog struct`` documents ``Dog``.
    """
    doc = doc_text(spec, source.renderer)
    if doc or is_grouped(declaration):
        return doc
    return doc_text(declaration, source.renderer)


def is_grouped(declaration: Node) -> bool:
    return any(child.type == "(" for child in declaration.children) or any(
        child.type.endswith("_spec_list") for child in declaration.named_children
    )


__all__ = [
    "DeclShape",
    "Extractor",
    "TypeDecl",
    "is_grouped",
    "iter_specs",
    "iter_type_decls",
    "spec_doc",
]
