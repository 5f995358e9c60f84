"""Tests for the struct tag codec."""

from __future__ import annotations

import pytest

from godecl.errors import DecodeError
from godecl.tags import Tag, Tags, TagSyntaxError, parse_tags, quote


def test_parse_tags_splits_name_and_options() -> None:
    tags = parse_tags('json:"name,omitempty" db:"user_name"')

    assert tags.keys() == ["json", "db"]
    assert tags["json"].name == "name"
    assert tags["json"].options == ["omitempty"]
    assert tags["db"].options == []


@pytest.mark.parametrize(
    "text",
    [
        'json:"id"',
        'json:"id,omitempty" xml:"id,attr" validate:"required,min=1"',
        'json:"-"',
        'gorm:"column:created_at;not null"',
        r'help:"say \"hi\"\tnow"',
        r'pattern:"^\\d+$"',
        r'validate:"regexp=^\\d+$" json:"code"',
    ],
)
def test_parse_tags_round_trips_canonical_text(text: str) -> None:
    assert str(parse_tags(text)) == text


def test_parse_tags_tolerates_extra_spaces_between_pairs() -> None:
    tags = parse_tags('  json:"a"   db:"b" ')

    assert str(tags) == 'json:"a" db:"b"'


def test_parse_tags_decodes_escapes() -> None:
    tags = parse_tags(r'help:"say \"hi\"\tnow"')

    assert tags["help"].name == 'say "hi"\tnow'


def test_whitespace_only_text_decodes_to_empty_tags() -> None:
    assert len(parse_tags("   ")) == 0
    assert str(parse_tags("")) == ""


@pytest.mark.parametrize(
    "text",
    [
        ':"value"',
        "json",
        "json:name",
        'json:"unterminated',
        'json :"value"',
        r'json:"bad \q escape"',
    ],
)
def test_parse_tags_rejects_malformed_text(text: str) -> None:
    with pytest.raises(TagSyntaxError):
        parse_tags(text)


def test_tag_syntax_error_is_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        parse_tags("json:name")


def test_set_replaces_in_place_and_appends_new_keys() -> None:
    tags = parse_tags('json:"a" db:"b"')

    tags.set(Tag(key="json", name="renamed"))
    tags.set(Tag(key="yaml", name="c", options=["flow"]))

    assert str(tags) == 'json:"renamed" db:"b" yaml:"c,flow"'


def test_set_requires_a_key() -> None:
    with pytest.raises(TagSyntaxError):
        Tags().set(Tag(key="", name="x"))


def test_option_editing() -> None:
    tags = parse_tags('json:"id,omitempty"')

    tags.add_options("json", "string", "omitempty")
    assert tags["json"].value == "id,omitempty,string"

    tags.delete_options("json", "omitempty")
    assert tags["json"].value == "id,string"
    assert tags["json"].has_option("string")

    tags.add_options("missing", "x")
    assert "missing" not in tags


def test_delete_and_sort() -> None:
    tags = parse_tags('yaml:"c" json:"a" db:"b"')

    tags.delete("db", "unknown")
    tags.sort()

    assert tags.keys() == ["json", "yaml"]
    assert tags.as_dict() == {"json": "a", "yaml": "c"}


def test_get_returns_none_and_getitem_raises_for_missing_keys() -> None:
    tags = parse_tags('json:"a"')

    assert tags.get("db") is None
    with pytest.raises(KeyError):
        tags["db"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", '"plain"'),
        ('a"b', r'"a\"b"'),
        (r"^\d+$", r'"^\\d+$"'),
        ("tab\there\n", r'"tab\there\n"'),
        ("bell\x07esc\x1b", r'"bell\aesc\x1b"'),
        ("nbsp\u00a0", r'"nbsp\u00a0"'),
        ("olá", '"olá"'),
    ],
)
def test_quote_escapes_like_go(value: str, expected: str) -> None:
    assert quote(value) == expected


def test_encoded_values_decode_back_to_the_same_tags() -> None:
    tags = Tags([Tag(key="help", name='say "hi"', options=["C:\\tmp"])])

    assert parse_tags(str(tags)) == tags
