from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome holding ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"called unwrap_err() on Ok({self.value!r})")


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome holding ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"called unwrap() on Err({self.error!r})")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]
# An element of the input sequence; the aggregate uses the same shape.
Outcome = Result
