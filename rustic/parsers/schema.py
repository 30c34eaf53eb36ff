"""
Schema operations for rustic parsers.

Provides validate(), parse_object() and to_pydantic() functions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Union

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr, create_model

from ..result import Err, Ok
from .core import check_fields, read_entry
from .types import DataType, Nested, ObjectValidationError, Primitive

logger = logging.getLogger(__name__)

_PRIMITIVE_ANNOTATIONS: dict[DataType, Any] = {
    DataType.STRING: StrictStr,
    DataType.NUMBER: Union[StrictInt, StrictFloat],
    DataType.BOOLEAN: StrictBool,
    DataType.OBJECT: Any,
    DataType.UNDEFINED: None,
    DataType.FUNCTION: Callable[..., Any],
    DataType.SYMBOL: Any,
    DataType.BIGINT: StrictInt,
    DataType.ARRAY: list[Any],
}


def validate(obj: Any, fields: Any) -> Ok[Any] | Err[ObjectValidationError]:
    """
    Validate an object against a field specification.

    Args:
        obj: A mapping or attribute object to check
        fields: Ordered (name, type) pairs; a type is a primitive tag or a
            nested list of pairs

    Returns:
        Ok(obj) if validation passes (the same object, not a copy)
        Err(kind, detail) for the first failing field in spec order

    Usage:
        fields = [
            ("age", "number"),
            ("species", [("variant", "string"), ("location", "string")]),
        ]
        result = validate({"age": 21, "species": {...}}, fields)
    """
    result = check_fields(obj, fields)
    if isinstance(result, Err):
        logger.debug("Validation failed (%s): %s", result.kind, result.detail)
    return result


def parse_object(
    obj: Any, fields: Any, into: type | None = None
) -> Ok[Any] | Err[ObjectValidationError]:
    """
    Validate an object, then optionally convert it into a target type.

    Args:
        obj: A mapping or attribute object to check
        fields: Ordered (name, type) pairs
        into: Optional Pydantic model (or any callable taking the object)
            used to build the final value once every field has passed

    Returns:
        Ok(obj) or Ok(into instance) if validation passes
        Err(kind, detail) if a field fails, or Err(ParseError, exc) if the
        final conversion raised
    """
    result = validate(obj, fields)
    if isinstance(result, Err) or into is None:
        return result

    try:
        if is_pydantic_model(into):
            converted = into.model_validate(obj, from_attributes=not isinstance(obj, Mapping))
        else:
            converted = into(obj)
    except Exception as e:
        logger.debug("Conversion into %s failed: %s", getattr(into, "__name__", into), e)
        return Err(ObjectValidationError.PARSE_ERROR, e)

    return Ok(converted)


def to_pydantic(name: str, fields: Any) -> type[BaseModel]:
    """
    Compile a field specification to a Pydantic model.

    Args:
        name: Name of the generated model class
        fields: Ordered (name, type) pairs; nested lists become nested models

    Returns:
        A Pydantic BaseModel subclass with every field required

    Raises:
        ValueError: if the field specification is malformed

    Usage:
        Dog = to_pydantic("Dog", [("age", "number"), ("name", "string")])
        dog = Dog(age=3, name="Rex")
    """
    if not isinstance(fields, (list, tuple)):
        raise ValueError("Field spec must be a list of (name, type) pairs")

    model_fields: dict[str, Any] = {}

    for entry in fields:
        read = read_entry(entry)
        if isinstance(read, Err):
            raise ValueError(read.detail)
        field, node = read.value
        model_fields[field] = (_extract_annotation(name, field, node), ...)

    return create_model(name, **model_fields)


def is_pydantic_model(model_class: Any) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    try:
        return isinstance(model_class, type) and issubclass(model_class, BaseModel)
    except TypeError:
        return False


def _extract_annotation(model_name: str, field: str, node: Primitive | Nested) -> Any:
    """Extract the Pydantic annotation for one spec node."""
    match node:
        case Primitive(tag=tag):
            return _PRIMITIVE_ANNOTATIONS[tag]
        case Nested(fields=nested):
            return to_pydantic(f"{model_name}_{field}", list(nested))

    raise ValueError(f"Unsupported spec node for key: {field}")
