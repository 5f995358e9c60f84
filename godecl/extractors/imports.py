"""Import path extraction."""

from __future__ import annotations

from typing import List

from ..frontend import SourceFile
from ..logging import get_logger
from .base import Extractor, iter_specs

_logger = get_logger("extractors.imports")


class ImportExtractor(Extractor[str]):
    """Collects import paths in declaration order, without their quotes."""

    name = "imports"

    def extract(self, source: SourceFile) -> List[str]:
        imports: List[str] = []
        for declaration in source.root.children:
            if declaration.type != "import_declaration":
                continue
            for spec in iter_specs(declaration, {"import_spec"}):
                path_node = spec.child_by_field_name("path")
                if path_node is None:
                    continue
                text = source.renderer.text(path_node)
                imports.append(text[1:-1] if len(text) >= 2 else text)
        _logger.debug("Extracted %d imports", len(imports))
        return imports


__all__ = ["ImportExtractor"]
