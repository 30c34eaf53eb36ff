"""
Exhaustive dispatch helpers.

`match` branches on a plain string key, `vmatch` branches on the
discriminant of a tagged value (``Ok``/``Err``, ``Some``/``None``, or any
mapping/object carrying a ``variant`` field).
"""

from collections.abc import Mapping
from typing import Any, Callable, NoReturn, TypeVar

R = TypeVar("R")


class Panic(RuntimeError):
    """Unrecoverable programming error (unwrapping an Err, unmatched variant)."""


def panic(message: str) -> NoReturn:
    """Abort with a Panic carrying `message`."""
    raise Panic(message)


def match(key: str, cases: Mapping[str, Callable[[], R]]) -> R:
    """
    Call the zero-argument handler registered for `key`.

    Usage:
        match(pet["kind"], {
            "Water": lambda: "Place it in the tank",
            "Land": lambda: "Put it on the ground",
        })
    """
    handler = cases.get(key)
    if handler is None:
        panic(f"Unmatched case: {key}")
    return handler()


def vmatch(
    value: Any,
    cases: Mapping[str, Callable[[Any], R]],
    *,
    discriminant: str = "variant",
) -> R:
    """
    Call the handler registered for the discriminant of `value`.

    The handler receives `value` itself. The discriminant is read as a key
    for mappings and as an attribute otherwise.

    Usage:
        vmatch(result, {
            "Ok": lambda ok: ok.value,
            "Err": lambda err: err.kind,
        })
    """
    if isinstance(value, Mapping):
        tag = value.get(discriminant)
    else:
        tag = getattr(value, discriminant, None)

    handler = cases.get(tag) if isinstance(tag, str) else None
    if handler is None:
        panic(f"Unmatched variant: {tag}")
    return handler(value)
