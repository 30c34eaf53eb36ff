"""
Type definitions for rustic parsers.

Provides the primitive type tags, the validator's error kinds, the
normalized spec nodes and runtime type tagging.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union

from ..context import is_legacy_array_tag


class DataType(str, Enum):
    """Primitive type tags a field can be declared with."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    UNDEFINED = "undefined"
    FUNCTION = "function"
    SYMBOL = "symbol"
    BIGINT = "bigint"
    ARRAY = "array"

    def __str__(self) -> str:
        return self.value


class ObjectValidationError(str, Enum):
    """Error kinds reported by the structural validator."""

    DATA_TYPE_SPECIFICATION_ERROR = "DataTypeSpecificationError"
    KEY_MISMATCH_ERROR = "KeyMismatchError"
    TYPE_ERROR = "TypeError"
    PARSE_ERROR = "ParseError"

    def __str__(self) -> str:
        return self.value


class TextParseError(str, Enum):
    """Error kinds reported when decoding a text payload."""

    JSON_PARSE_ERROR = "JsonParseError"
    TEXT_PARSE_ERROR = "TextParseError"

    def __str__(self) -> str:
        return self.value


class HTMLParseError(str, Enum):
    """Error kinds reported by parse_html."""

    STRING_PARSE_FAILED = "StringParseFailed"
    QUERY_PARSE_FAILED = "QueryParseFailed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Primitive:
    """Spec node: the field must carry this runtime type tag."""

    tag: DataType


@dataclass(frozen=True, slots=True)
class Nested:
    """Spec node: the field must be an object matching these fields."""

    fields: tuple[Any, ...]


# Type aliases
TypeNode = Union[Primitive, Nested]
TypeSpec = Union[DataType, str, Sequence[Any], TypeNode]
FieldEntry = tuple[str, TypeSpec]
FieldSpec = Sequence[FieldEntry]


def type_tag(value: Any) -> DataType:
    """
    Report the runtime type tag of a value.

    Mapping:
        None -> undefined
        bool -> boolean
        int, float -> number
        str -> string
        list, tuple -> array ("object" under legacy array tagging)
        Enum member -> symbol
        other callables -> function
        anything else -> object

    Python has a single integer type, so "bigint" is never reported.
    """
    if value is None:
        return DataType.UNDEFINED
    if isinstance(value, bool):
        return DataType.BOOLEAN
    if isinstance(value, (int, float)):
        return DataType.NUMBER
    if isinstance(value, str):
        return DataType.STRING
    if isinstance(value, (list, tuple)):
        return DataType.OBJECT if is_legacy_array_tag() else DataType.ARRAY
    if isinstance(value, Enum):
        return DataType.SYMBOL
    if callable(value):
        return DataType.FUNCTION
    return DataType.OBJECT
