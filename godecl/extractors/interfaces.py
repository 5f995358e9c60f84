"""Interface extraction."""

from __future__ import annotations

from typing import List, Optional

from tree_sitter import Node

from ..errors import ParseError
from ..frontend import SourceFile, doc_text
from ..logging import get_logger
from ..models import Function, Interface
from .base import DeclShape, Extractor, iter_type_decls
from .fields import extract_param_types

_logger = get_logger("extractors.interfaces")

_METHOD_TYPES = {"method_elem", "method_spec"}
_EMBEDDED_TYPES = {"type_elem", "constraint_elem", "interface_type_name", "struct_elem"}


class InterfaceExtractor(Extractor[Interface]):
    """Builds an :class:`Interface` for every top-level interface type.

    Embedded interfaces and type-set elements become anonymous functions named
    by their rendered text. Failures abort the whole pass.
    """

    name = "interfaces"

    def extract(self, source: SourceFile) -> List[Interface]:
        interfaces: List[Interface] = []
        for decl in iter_type_decls(source):
            if decl.shape is not DeclShape.INTERFACE:
                continue
            interface = Interface(name=decl.name, doc=decl.doc)
            try:
                interface.functions = self._functions(decl.type_node, source)
            except ParseError as exc:
                raise exc.__class__(f"interface {decl.name}: {exc}") from exc
            interfaces.append(interface)
        _logger.debug("Extracted %d interfaces", len(interfaces))
        return interfaces

    def _functions(self, type_node: Node, source: SourceFile) -> List[Function]:
        functions: List[Function] = []
        for element in type_node.named_children:
            if element.type in _EMBEDDED_TYPES:
                functions.append(
                    Function(
                        name=source.renderer.render(element),
                        doc=doc_text(element, source.renderer),
                        anonymous=True,
                    )
                )
            elif element.type in _METHOD_TYPES:
                function = self._method(element, source)
                if function is not None:
                    functions.append(function)
        return functions

    @staticmethod
    def _method(element: Node, source: SourceFile) -> Optional[Function]:
        name_node = element.child_by_field_name("name")
        parameters = element.child_by_field_name("parameters")
        if name_node is None or parameters is None:
            _logger.debug("Skipping interface element without a signature at line %d", element.start_point[0] + 1)
            return None
        return Function(
            name=source.renderer.text(name_node),
            doc=doc_text(element, source.renderer),
            input_params=extract_param_types(parameters, source),
            return_params=extract_param_types(element.child_by_field_name("result"), source),
        )


__all__ = ["InterfaceExtractor"]
