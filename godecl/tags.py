"""Struct tag codec: parses and serializes ``key:"value"`` tag strings."""

from __future__ import annotations

import ast
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .errors import DecodeError

_ESCAPE = re.compile(r'\\(?:[abfnrtv\\"]|x[0-9A-Fa-f]{2}|[0-7]{3}|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8})')


class TagSyntaxError(DecodeError):
    """Raised when tag text does not follow the ``key:"value"`` grammar."""


@dataclass
class Tag:
    """A single ``key:"name,opt1,opt2"`` entry."""

    key: str
    name: str
    options: List[str] = field(default_factory=list)

    @property
    def value(self) -> str:
        return ",".join([self.name, *self.options])

    def has_option(self, option: str) -> bool:
        return option in self.options

    def __str__(self) -> str:
        return f"{self.key}:{quote(self.value)}"


class Tags:
    """Ordered collection of struct tags keyed by tag key."""

    def __init__(self, tags: Optional[List[Tag]] = None) -> None:
        self._tags: List[Tag] = list(tags or [])

    def get(self, key: str) -> Optional[Tag]:
        for tag in self._tags:
            if tag.key == key:
                return tag
        return None

    def __getitem__(self, key: str) -> Tag:
        tag = self.get(key)
        if tag is None:
            raise KeyError(key)
        return tag

    def __contains__(self, key: object) -> bool:
        return any(tag.key == key for tag in self._tags)

    def set(self, tag: Tag) -> None:
        """Replace the tag with the same key in place, or append it."""
        if not tag.key:
            raise TagSyntaxError("tag key is not set")
        for index, existing in enumerate(self._tags):
            if existing.key == tag.key:
                self._tags[index] = tag
                return
        self._tags.append(tag)

    def add_options(self, key: str, *options: str) -> None:
        tag = self.get(key)
        if tag is None:
            return
        for option in options:
            if option not in tag.options:
                tag.options.append(option)

    def delete_options(self, key: str, *options: str) -> None:
        tag = self.get(key)
        if tag is None:
            return
        tag.options = [option for option in tag.options if option not in options]

    def delete(self, *keys: str) -> None:
        self._tags = [tag for tag in self._tags if tag.key not in keys]

    def keys(self) -> List[str]:
        return [tag.key for tag in self._tags]

    def as_dict(self) -> Dict[str, str]:
        return {tag.key: tag.value for tag in self._tags}

    def sort(self) -> None:
        self._tags.sort(key=lambda tag: tag.key)

    def __iter__(self) -> Iterator[Tag]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tags):
            return NotImplemented
        return self._tags == other._tags

    def __str__(self) -> str:
        return " ".join(str(tag) for tag in self._tags)

    def __repr__(self) -> str:
        return f"Tags({str(self)!r})"


def parse_tags(text: str) -> Tags:
    """Decode tag text such as ``json:"id,omitempty" db:"id"``.

    Keys run up to the colon and may not contain spaces, quotes or control
    characters. Values are double-quoted strings using Go escape rules. A value
    is split on commas into a name and its options.
    """
    tags: List[Tag] = []
    remaining = text
    while remaining:
        remaining = remaining.lstrip(" ")
        if not remaining:
            break

        index = 0
        while index < len(remaining) and _is_key_char(remaining[index]):
            index += 1
        if index == 0:
            raise TagSyntaxError(f"bad syntax for struct tag key in {text!r}")
        if index + 1 >= len(remaining) or remaining[index] != ":":
            raise TagSyntaxError(f"bad syntax for struct tag pair in {text!r}")
        if remaining[index + 1] != '"':
            raise TagSyntaxError(f"bad syntax for struct tag value in {text!r}")
        key = remaining[:index]
        remaining = remaining[index + 1 :]

        index = 1
        while index < len(remaining) and remaining[index] != '"':
            if remaining[index] == "\\":
                index += 1
            index += 1
        if index >= len(remaining):
            raise TagSyntaxError(f"bad syntax for struct tag value in {text!r}")
        quoted = remaining[: index + 1]
        remaining = remaining[index + 1 :]

        value = _unquote(quoted)
        name, *options = value.split(",")
        tags.append(Tag(key=key, name=name, options=options))
    return Tags(tags)


def _is_key_char(char: str) -> bool:
    return char > " " and char not in {":", '"', "\x7f"}


_QUOTE_ESCAPES = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


def quote(value: str) -> str:
    """Double-quote ``value`` using Go ``strconv.Quote`` escaping."""
    parts: List[str] = ['"']
    for char in value:
        escaped = _QUOTE_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif char.isprintable():
            parts.append(char)
        elif char < " " or char == "\x7f":
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) < 0x10000:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    parts.append('"')
    return "".join(parts)


def _unquote(quoted: str) -> str:
    body = quoted[1:-1]
    if "\n" in body:
        raise TagSyntaxError(f"bad syntax for struct tag value {quoted!r}")
    # Every backslash must open an escape sequence Go understands.
    stripped = _ESCAPE.sub("", body)
    if "\\" in stripped:
        raise TagSyntaxError(f"invalid escape in struct tag value {quoted!r}")
    try:
        value = ast.literal_eval(quoted)
    except (SyntaxError, ValueError) as exc:
        raise TagSyntaxError(f"bad syntax for struct tag value {quoted!r}") from exc
    if not isinstance(value, str):
        raise TagSyntaxError(f"bad syntax for struct tag value {quoted!r}")
    return value


__all__ = ["Tag", "TagSyntaxError", "Tags", "parse_tags", "quote"]
