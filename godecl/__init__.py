"""Extract struct, interface, value and import metadata from Go source files."""

from .config import ConfigError, ExtractorConfig, load_config
from .errors import DecodeError, ParseError, RenderError, SourceSyntaxError
from .models import Field, Function, Interface, Record, Registry, Value
from .parser import parse, parse_bytes
from .tags import Tag, Tags, TagSyntaxError, parse_tags

__all__ = [
    "ConfigError",
    "DecodeError",
    "ExtractorConfig",
    "Field",
    "Function",
    "Interface",
    "ParseError",
    "Record",
    "Registry",
    "RenderError",
    "SourceSyntaxError",
    "Tag",
    "TagSyntaxError",
    "Tags",
    "Value",
    "load_config",
    "parse",
    "parse_bytes",
    "parse_tags",
]
