"""
Core structural validation for rustic parsers.

Walks a field specification against an object graph, fail-fast, in spec
order. Every outcome is a Result; nested failures keep their original kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..dispatch import vmatch
from ..result import Err, Ok
from .types import DataType, Nested, ObjectValidationError, Primitive, TypeNode, type_tag

_MISSING = object()


def to_type_node(spec: Any) -> TypeNode:
    """
    Normalize one level of a type spec.

    Conversion rules:
        Primitive | Nested -> pass through
        DataType | tag string -> Primitive
        list | tuple -> Nested (entries are normalized lazily)

    Raises:
        ValueError: if `spec` is not a known tag or a field list
    """
    if isinstance(spec, (Primitive, Nested)):
        return spec

    if isinstance(spec, str):
        try:
            return Primitive(DataType(spec))
        except ValueError:
            raise ValueError(f"Unknown data type: {spec!r}") from None

    if isinstance(spec, (list, tuple)):
        return Nested(tuple(spec))

    raise ValueError(f"Cannot convert {type(spec).__name__} to a data type")


def read_entry(entry: Any) -> Ok[tuple[str, TypeNode]] | Err[ObjectValidationError]:
    """Split a `(field_name, type_spec)` pair into its name and normalized node."""
    if not isinstance(entry, (list, tuple)) or len(entry) != 2:
        return Err(
            ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR,
            f"Field entry must be a (name, type) pair, got {entry!r}",
        )

    field, spec = entry
    if not isinstance(field, str):
        return Err(
            ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR,
            f"Field name must be a string, got {type(field).__name__}",
        )

    try:
        node = to_type_node(spec)
    except ValueError as e:
        return Err(
            ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR,
            f"DataType for key: {field} is invalid: {e}",
        )

    if isinstance(node, Nested) and not node.fields:
        return Err(
            ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR,
            f"DataType for key: {field} is an empty field list, which is not allowed.",
        )

    return Ok((field, node))


def check_fields(obj: Any, fields: Any) -> Ok[Any] | Err[ObjectValidationError]:
    """
    Validate `obj` against `fields`, stopping at the first failure.

    Returns:
        Ok(obj) (same reference) if every field is present with a matching type
        Err(kind, detail) for the first failing field in spec order
    """
    if not isinstance(fields, (list, tuple)):
        return Err(
            ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR,
            f"Field spec must be a list of (name, type) pairs, got {type(fields).__name__}",
        )

    for entry in fields:
        read = read_entry(entry)
        if isinstance(read, Err):
            return read
        field, node = read.value

        try:
            current = _lookup(obj, field)
        except Exception as e:
            return Err(ObjectValidationError.PARSE_ERROR, e)
        if current is _MISSING:
            return Err(ObjectValidationError.KEY_MISMATCH_ERROR, f"Missing key: {field}")

        def on_checked(checked: Ok[bool]) -> Ok[Any] | Err[ObjectValidationError]:
            if not checked.value:
                return Err(
                    ObjectValidationError.TYPE_ERROR,
                    f"Incorrect type for key: {field}. "
                    f"Expected {_describe(node)}, got {type_tag(current)}",
                )
            return Ok(obj)

        result = vmatch(
            is_of_type(current, node),
            {
                "Ok": on_checked,
                "Err": lambda e: e,
            },
        )
        if isinstance(result, Err):
            return result

    return Ok(obj)


def is_of_type(value: Any, spec: Any) -> Ok[bool] | Err[ObjectValidationError]:
    """
    Check `value` against a single type spec.

    Returns:
        Ok(True) / Ok(False) for match / mismatch
        Err(kind, detail) if a nested validation failed
    """
    try:
        node = to_type_node(spec)
    except ValueError as e:
        return Err(ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR, str(e))

    if isinstance(node, Primitive):
        return Ok(type_tag(value) is node.tag)

    if not node.fields:
        return Ok(False)
    if type_tag(value) is not DataType.OBJECT:
        return Ok(False)

    return vmatch(
        check_fields(value, list(node.fields)),
        {
            "Ok": lambda _: Ok(True),
            "Err": lambda e: Err(e.kind, e.detail),
        },
    )


def _lookup(obj: Any, field: str) -> Any:
    """Read `field` from a mapping or an attribute object, or return _MISSING."""
    if isinstance(obj, Mapping):
        return obj[field] if field in obj else _MISSING
    if type_tag(obj) is DataType.OBJECT and not isinstance(obj, (list, tuple)):
        # __getattr__ backed by a dict reports absence as KeyError
        try:
            return getattr(obj, field, _MISSING)
        except KeyError:
            return _MISSING
    return _MISSING


def _describe(node: TypeNode) -> str:
    if isinstance(node, Primitive):
        return str(node.tag)
    names = ", ".join(
        str(entry[0]) for entry in node.fields if isinstance(entry, (list, tuple)) and entry
    )
    return f"object with fields ({names})"
