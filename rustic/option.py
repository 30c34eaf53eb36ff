"""
Option type for rustic: a None-free replacement for nullable values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeVar, Union

from .dispatch import panic

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """An Option holding a value."""

    value: T

    variant: ClassVar[str] = "Some"

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_or_else(self, callback: Callable[[], Any]) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Some[U]:
        return Some(fn(self.value))

    def let_some(self, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def let_none(self, fn: Callable[[], Any]) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Nothing:
    """An Option holding no value."""

    variant: ClassVar[str] = "None"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Any:
        panic("Value doesn't exist")

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_else(self, callback: Callable[[], U]) -> U:
        return callback()

    def map(self, fn: Callable[[Any], Any]) -> Nothing:
        return self

    def let_some(self, fn: Callable[[Any], Any]) -> None:
        return None

    def let_none(self, fn: Callable[[], U]) -> U:
        return fn()


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def from_nullable(value: Any) -> Some[Any] | Nothing:
    """
    Convert a nullable value into an Option.

    Conversion rules:
        None -> Nothing
        Some | Nothing -> pass through
        {"variant": "None"} -> Nothing
        {"variant": "Some", "value": x} -> Some(x)
        anything else -> Some(value)
    """
    if value is None:
        return NOTHING

    if isinstance(value, (Some, Nothing)):
        return value

    # Raw option payloads, e.g. decoded from JSON
    if isinstance(value, Mapping) and "variant" in value:
        if value["variant"] == "None":
            return NOTHING
        if value["variant"] == "Some" and "value" in value:
            return Some(value["value"])

    return Some(value)
