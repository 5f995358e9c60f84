"""Declaration extractors run by :func:`godecl.parser.parse_bytes`."""

from __future__ import annotations

from .base import DeclShape, Extractor, TypeDecl, iter_type_decls
from .imports import ImportExtractor
from .interfaces import InterfaceExtractor
from .records import RecordExtractor
from .values import ValueExtractor

__all__ = [
    "DeclShape",
    "Extractor",
    "ImportExtractor",
    "InterfaceExtractor",
    "RecordExtractor",
    "TypeDecl",
    "ValueExtractor",
    "iter_type_decls",
]
