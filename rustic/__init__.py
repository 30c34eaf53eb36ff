from .context import parsing_context
from .dispatch import Panic, match, panic, vmatch
from .option import NOTHING, Nothing, Option, Some, from_nullable
from .parsers import (
    DataType,
    HTMLParseError,
    ObjectValidationError,
    TextParseError,
    is_of_type,
    parse_html,
    parse_json,
    parse_object,
    to_pydantic,
    type_tag,
    validate,
)
from .result import Err, Ok, Result, err, ok

__all__ = [
    "Ok",
    "Err",
    "Result",
    "ok",
    "err",
    "Some",
    "Nothing",
    "NOTHING",
    "Option",
    "from_nullable",
    "match",
    "vmatch",
    "panic",
    "Panic",
    "DataType",
    "ObjectValidationError",
    "TextParseError",
    "HTMLParseError",
    "validate",
    "parse_object",
    "is_of_type",
    "type_tag",
    "to_pydantic",
    "parse_json",
    "parse_html",
    "parsing_context",
]
