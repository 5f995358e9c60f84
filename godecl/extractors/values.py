"""Constant and variable extraction."""

from __future__ import annotations

from typing import List, Optional

from tree_sitter import Node

from ..errors import RenderError
from ..frontend import SourceFile
from ..logging import get_logger
from ..models import Value
from .base import Extractor, iter_specs, spec_doc

_logger = get_logger("extractors.values")

_DECLARATION_TYPES = {"const_declaration", "var_declaration"}
_SPEC_TYPES = {"const_spec", "var_spec"}
_LITERAL_KINDS = {
    "interpreted_string_literal": "string",
    "raw_string_literal": "string",
    "int_literal": "int",
    "float_literal": "float",
    "rune_literal": "char",
    "imaginary_literal": "imaginary",
}


class ValueExtractor(Extractor[Value]):
    """Collects constants and variables initialised with a literal.

    Only the first name and first initializer of each spec are examined, so
    ``var a, b = 1, 2`` yields a single value for ``a``. Specs without an
    initializer, or whose initializer is not a literal, are skipped. This
    extractor never fails: entries that cannot be read are dropped one by one.
    """

    name = "values"

    def extract(self, source: SourceFile) -> List[Value]:
        values: List[Value] = []
        for declaration in source.root.children:
            if declaration.type not in _DECLARATION_TYPES:
                continue
            for spec in iter_specs(declaration, _SPEC_TYPES):
                try:
                    value = self._value(declaration, spec, source)
                except RenderError as exc:
                    _logger.debug("Skipping value at line %d: %s", spec.start_point[0] + 1, exc)
                    continue
                if value is not None:
                    values.append(value)
        _logger.debug("Extracted %d values", len(values))
        return values

    @staticmethod
    def _value(declaration: Node, spec: Node, source: SourceFile) -> Optional[Value]:
        names = spec.children_by_field_name("name")
        initializers = spec.child_by_field_name("value")
        if not names or initializers is None:
            return None
        expressions = [child for child in initializers.named_children if child.type != "comment"]
        if not expressions:
            return None

        literal = expressions[0]
        kind = _LITERAL_KINDS.get(literal.type)
        if kind is None:
            return None

        text = source.renderer.text(literal)
        if kind == "string" and len(text) >= 2:
            text = text[1:-1]
        return Value(
            name=source.renderer.text(names[0]),
            kind=kind,
            literal=text,
            doc=spec_doc(declaration, spec, source),
        )


__all__ = ["ValueExtractor"]
