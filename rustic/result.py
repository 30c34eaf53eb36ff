"""
Tagged Result type for rustic.

Every fallible operation in the library returns either ``Ok(value)`` or
``Err(kind, detail)``. Inspect ``variant`` (or use `vmatch`) before trusting
``value``; unwrapping an Err is a Panic.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeVar, Union

from .dispatch import panic

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    variant: ClassVar[str] = "Ok"

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_or_else(self, callback: Callable[[], Any]) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def let_ok(self, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def let_err(self, fn: Callable[[Any], Any]) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Err(Generic[K]):
    """
    Error result containing a closed-set error kind.

    `detail` is optional free-form diagnostic context meant for humans, it is
    never parsed by the library.
    """

    kind: K
    detail: Any = None

    variant: ClassVar[str] = "Err"

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        panic(str(self.kind))

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_else(self, callback: Callable[[], U]) -> U:
        return callback()

    def map(self, fn: Callable[[Any], Any]) -> Err[K]:
        return self

    def let_ok(self, fn: Callable[[Any], Any]) -> None:
        return None

    def let_err(self, fn: Callable[[K], U]) -> U:
        return fn(self.kind)

    def __str__(self) -> str:
        text = f"ErrorState: {self.kind}"
        if self.detail:
            text += f"\nDebugMessage: {json.dumps(self.detail, default=str)}"
        return text


Result = Union[Ok[T], Err[K]]


def ok(value: T) -> Ok[T]:
    """Build an Ok result."""
    return Ok(value)


def err(kind: K, detail: Any = None) -> Err[K]:
    """Build an Err result."""
    return Err(kind, detail)
