"""Struct extraction."""

from __future__ import annotations

from typing import List

from ..errors import ParseError
from ..frontend import SourceFile
from ..logging import get_logger
from ..models import Record
from .base import DeclShape, Extractor, iter_type_decls
from .fields import extract_fields

_logger = get_logger("extractors.records")


class RecordExtractor(Extractor[Record]):
    """Builds a :class:`Record` for every top-level struct type.

    Extraction is all-or-nothing: a field that cannot be rendered or whose tag
    cannot be decoded fails the whole pass, so callers never see a partial
    list of structs.
    """

    name = "records"

    def extract(self, source: SourceFile) -> List[Record]:
        records: List[Record] = []
        for decl in iter_type_decls(source):
            if decl.shape is not DeclShape.RECORD:
                continue
            record = Record(name=decl.name, doc=decl.doc)
            field_list = next(
                (child for child in decl.type_node.named_children if child.type == "field_declaration_list"),
                None,
            )
            if field_list is not None:
                try:
                    record.fields = extract_fields(field_list, source)
                except ParseError as exc:
                    raise exc.__class__(f"struct {decl.name}: {exc}") from exc
            records.append(record)
        _logger.debug("Extracted %d structs", len(records))
        return records


__all__ = ["RecordExtractor"]
