"""Entry points that turn Go source into a :class:`Registry`."""

from __future__ import annotations

from typing import Optional

from .config import ExtractorConfig
from .errors import ParseError, SourceSyntaxError
from .extractors import ImportExtractor, InterfaceExtractor, RecordExtractor, ValueExtractor
from .frontend import parse_source
from .logging import get_logger
from .models import Registry

_logger = get_logger("parser")


def parse(code: str, config: Optional[ExtractorConfig] = None) -> Registry:
    """Parse Go source text and return its declarations."""
    config = config or ExtractorConfig()
    try:
        data = code.encode(config.encoding)
    except UnicodeEncodeError as exc:
        raise SourceSyntaxError(f"cannot encode source as {config.encoding}: {exc}") from exc
    return parse_bytes(data, config)


def parse_bytes(code: bytes, config: Optional[ExtractorConfig] = None) -> Registry:
    """Parse Go source bytes and return its declarations.

    Imports, structs and interfaces are all-or-nothing: any
    :class:`~godecl.errors.ParseError` they raise aborts the call. Values are
    best effort and never fail the parse.
    """
    config = config or ExtractorConfig()
    try:
        source = parse_source(code, encoding=config.encoding, strict=config.strict_syntax)
        imports = ImportExtractor().extract(source)
        records = RecordExtractor().extract(source)
        values = ValueExtractor().extract(source)
        interfaces = InterfaceExtractor().extract(source)
    except ParseError as exc:
        _logger.warning("Parse failed: %s", exc)
        raise

    registry = Registry(imports=imports, records=records, values=values, interfaces=interfaces)
    _logger.debug(
        "Parsed %d imports, %d structs, %d values, %d interfaces",
        len(imports),
        len(records),
        len(values),
        len(interfaces),
    )
    return registry


__all__ = ["parse", "parse_bytes"]
