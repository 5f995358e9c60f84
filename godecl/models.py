"""Declaration metadata extracted from a Go source file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .tags import Tags

TagVisitor = Callable[[Tags, "Field", bool], bool]


@dataclass
class Field:
    """A struct field."""

    name: str
    type: str
    doc: str = ""
    anonymous: bool = False
    # Raw tag text without its delimiters; empty when the field has no tag.
    tag: str = ""
    tags: Optional[Tags] = None

    def commit_tags(self, tags: Tags) -> None:
        """Store ``tags`` on the field and regenerate the raw tag text."""
        self.tags = tags if len(tags) else None
        self.tag = str(tags)


@dataclass
class Record:
    """A named struct type."""

    name: str
    doc: str = ""
    fields: List[Field] = field(default_factory=list)

    def rewrite_tags(self, visitor: TagVisitor) -> None:
        """Visit each field's tags in order and write accepted edits back.

        ``visitor(tags, field, anonymous)`` may mutate ``tags``. Returning
        ``True`` commits the tags to the field's raw text and moves on; returning
        ``False`` stops the walk and leaves that field's raw text as it was.
        Fields without a tag are visited with an empty :class:`Tags`.
        """
        for item in self.fields:
            tags = item.tags if item.tags is not None else Tags()
            if not visitor(tags, item, item.anonymous):
                break
            item.commit_tags(tags)


@dataclass
class Function:
    """A method of an interface, or an embedded element when anonymous."""

    name: str
    doc: str = ""
    anonymous: bool = False
    input_params: List[str] = field(default_factory=list)
    return_params: List[str] = field(default_factory=list)


@dataclass
class Interface:
    """A named interface type and its method set."""

    name: str
    doc: str = ""
    functions: List[Function] = field(default_factory=list)


@dataclass
class Value:
    """A constant or variable initialised with a single literal."""

    name: str
    kind: str
    literal: str
    doc: str = ""


@dataclass
class Registry:
    """All declarations extracted from one file, with name lookups.

    The lists keep every declaration in source order, duplicates included.
    The lookup indexes map each name to its last declaration.
    """

    imports: List[str] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)
    values: List[Value] = field(default_factory=list)
    interfaces: List[Interface] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.reindex()

    def reindex(self) -> None:
        """Rebuild the name indexes from the current lists."""
        self._record_index: Dict[str, Record] = {record.name: record for record in self.records}
        self._value_index: Dict[str, Value] = {value.name: value for value in self.values}
        self._interface_index: Dict[str, Interface] = {
            interface.name: interface for interface in self.interfaces
        }

    def find_record(self, name: str) -> Optional[Record]:
        return self._record_index.get(name)

    def find_interface(self, name: str) -> Optional[Interface]:
        return self._interface_index.get(name)

    def find_value(self, name: str) -> Optional[Value]:
        return self._value_index.get(name)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable snapshot of the registry."""
        return {
            "imports": list(self.imports),
            "records": [_record_to_dict(record) for record in self.records],
            "values": [
                {"name": value.name, "doc": value.doc, "kind": value.kind, "literal": value.literal}
                for value in self.values
            ],
            "interfaces": [_interface_to_dict(interface) for interface in self.interfaces],
        }


def _record_to_dict(record: Record) -> Dict[str, Any]:
    return {
        "name": record.name,
        "doc": record.doc,
        "fields": [
            {
                "name": item.name,
                "type": item.type,
                "doc": item.doc,
                "anonymous": item.anonymous,
                "tag": item.tag,
                "tags": item.tags.as_dict() if item.tags is not None else {},
            }
            for item in record.fields
        ],
    }


def _interface_to_dict(interface: Interface) -> Dict[str, Any]:
    return {
        "name": interface.name,
        "doc": interface.doc,
        "functions": [
            {
                "name": function.name,
                "doc": function.doc,
                "anonymous": function.anonymous,
                "input_params": list(function.input_params),
                "return_params": list(function.return_params),
            }
            for function in interface.functions
        ],
    }


__all__ = ["Field", "Function", "Interface", "Record", "Registry", "TagVisitor", "Value"]
