"""Field descriptors for scaffolded resources.

A field is declared on the command line as ``name[:type]``.  The type tag is
resolved against the closed ``FieldType`` vocabulary; anything outside it
falls back to ``FieldType.TEXT`` without raising.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_RAW_TYPE = "string"


# ---------------------------------------------------------------------------
# Type vocabulary
# ---------------------------------------------------------------------------

class FieldType(str, Enum):
    """Abstract field type tags understood by the generator."""

    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    DATE = "date"
    UUID = "uuid"
    TEXT = "string"

    @classmethod
    def from_tag(cls, tag: str) -> "FieldType":
        """Resolve *tag* case-insensitively, returning ``TEXT`` when unknown."""
        try:
            return cls(tag.lower())
        except ValueError:
            return cls.TEXT

    @property
    def swift_type(self) -> str:
        return _SWIFT_TYPES[self]

    @property
    def fluent_type(self) -> str:
        return _FLUENT_TYPES[self]


_SWIFT_TYPES: dict[FieldType, str] = {
    FieldType.INT: "Int",
    FieldType.DOUBLE: "Double",
    FieldType.BOOL: "Bool",
    FieldType.DATE: "Date",
    FieldType.UUID: "UUID",
    FieldType.TEXT: "String",
}

_FLUENT_TYPES: dict[FieldType, str] = {
    FieldType.INT: ".int",
    FieldType.DOUBLE: ".double",
    FieldType.BOOL: ".bool",
    FieldType.DATE: ".datetime",
    FieldType.UUID: ".uuid",
    FieldType.TEXT: ".string",
}


# ---------------------------------------------------------------------------
# Field descriptor
# ---------------------------------------------------------------------------

class ResourceField(BaseModel):
    """A single ``name:type`` declaration of a resource."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Property and column name")
    raw_type: str = Field(default=DEFAULT_RAW_TYPE, description="Type tag as typed by the user")

    @property
    def field_type(self) -> FieldType:
        return FieldType.from_tag(self.raw_type)

    @property
    def swift_type(self) -> str:
        """Swift property type, e.g. ``Int``."""
        return self.field_type.swift_type

    @property
    def fluent_type(self) -> str:
        """Fluent schema data type, e.g. ``.int``."""
        return self.field_type.fluent_type


def parse_field(token: str) -> ResourceField:
    """Parse a ``name[:type]`` token.

    The token is split on the first colon only.  Without a colon the type
    defaults to ``"string"``; with one, whatever follows it is kept as the
    raw type, so ``"a:int:x"`` has type ``"int:x"`` (a ``String``) and
    ``"title:"`` has an empty type (also a ``String``).  Parsing never fails:
    ``":int"`` yields a field with an empty name, which the generator reports
    as an invalid identifier.

    Examples::

        parse_field("price:int")  -> ResourceField(name="price", raw_type="int")
        parse_field("title")      -> ResourceField(name="title", raw_type="string")
    """
    name, sep, raw_type = token.partition(":")
    if not sep:
        raw_type = DEFAULT_RAW_TYPE
    return ResourceField(name=name, raw_type=raw_type)


def parse_fields(tokens: Iterable[str]) -> list[ResourceField]:
    """Parse every token, preserving declaration order."""
    return [parse_field(token) for token in tokens]


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

_SWIFT_KEYWORDS = frozenset({
    "as", "associatedtype", "break", "case", "catch", "class", "continue",
    "default", "defer", "deinit", "do", "else", "enum", "extension",
    "fallthrough", "false", "fileprivate", "for", "func", "guard", "if",
    "import", "in", "init", "inout", "internal", "is", "let", "nil",
    "operator", "private", "protocol", "public", "repeat", "rethrows",
    "return", "self", "Self", "static", "struct", "subscript", "super",
    "switch", "throw", "throws", "true", "try", "typealias", "var", "where",
    "while",
})


def capitalize_name(name: str) -> str:
    """Capitalize each whitespace-separated word of a resource name.

    The first character of a word is upper-cased and the rest lower-cased;
    punctuation and digits do not start a new word.

    Examples::

        capitalize_name("blog post")   -> "Blog Post"
        capitalize_name("order_item")  -> "Order_item"
        capitalize_name("mp3file")     -> "Mp3file"
    """
    return re.sub(r"\S+", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), name)


def collection_name(name: str) -> str:
    """Lower-cased naive plural used for schemas and routes.

    ``"Product"`` -> ``"products"``.  Irregular plurals are not handled.
    """
    return f"{name.lower()}s"


def is_swift_identifier(name: str) -> bool:
    """Return ``True`` if *name* can be used as a Swift identifier as-is.

    Reserved words such as ``class`` or ``default`` are rejected since they
    would need backticks in the generated code.
    """
    return bool(name) and name.isidentifier() and name not in _SWIFT_KEYWORDS
