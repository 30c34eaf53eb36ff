"""
Rustic Parsers - structural validation of plain data objects.

Usage:
    from rustic.parsers import validate, parse_object, to_pydantic

    fields = [
        ("age", "number"),
        ("species", [("variant", "string"), ("location", "string")]),
    ]

    result = validate(data, fields)
    Dog = to_pydantic("Dog", fields)
    dog = parse_object(data, fields, into=Dog)
"""

from .core import is_of_type, to_type_node
from .markup import HtmlElement, parse_html
from .schema import is_pydantic_model, parse_object, to_pydantic, validate
from .text import parse_json
from .types import (
    DataType,
    FieldSpec,
    HTMLParseError,
    Nested,
    ObjectValidationError,
    Primitive,
    TextParseError,
    TypeNode,
    type_tag,
)

__all__ = [
    # Types
    "DataType",
    "ObjectValidationError",
    "TextParseError",
    "HTMLParseError",
    "FieldSpec",
    "Primitive",
    "Nested",
    "TypeNode",
    "type_tag",
    # Core
    "is_of_type",
    "to_type_node",
    # Schema
    "validate",
    "parse_object",
    "to_pydantic",
    "is_pydantic_model",
    # Text
    "parse_json",
    "parse_html",
    "HtmlElement",
]
