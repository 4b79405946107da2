from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import chain
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from .result import Err, Ok, Outcome, Result

T = TypeVar("T")
E = TypeVar("E")
C = TypeVar("C")
D = TypeVar("D")

logger: logging.Logger = logging.getLogger(__name__)


def _not_an_outcome(item: object, position: int) -> TypeError:
    return TypeError(
        f"item {position} is {type(item).__name__}, expected Ok or Err"
    )


def _later_errors(iterator: Iterator[Outcome[T, E]], start: int) -> Iterator[E]:
    position: int
    outcome: Outcome[T, E]
    for position, outcome in enumerate(iterator, start):
        if isinstance(outcome, Err):
            yield outcome.error
        elif not isinstance(outcome, Ok):
            raise _not_an_outcome(outcome, position)


def _gather(
    outcomes: Iterable[Outcome[T, E]],
    ok_into: Callable[[Iterable[T]], C],
    err_into: Callable[[Iterable[E]], D],
) -> Result[C, D]:
    iterator: Iterator[Outcome[T, E]] = iter(outcomes)
    successes: list[T] = []
    position: int
    outcome: Outcome[T, E]
    for position, outcome in enumerate(iterator):
        if isinstance(outcome, Ok):
            successes.append(outcome.value)
        elif isinstance(outcome, Err):
            logger.debug(
                "first failure at item %d, dropping %d successes",
                position,
                len(successes),
            )
            # the result can only be Err from here on
            del successes
            errors: D = err_into(
                chain((outcome.error,), _later_errors(iterator, position + 1))
            )
            return Err(errors)
        else:
            raise _not_an_outcome(outcome, position)
    logger.debug("no failures among %d items", len(successes))
    return Ok(ok_into(successes))


@dataclass(frozen=True, slots=True)
class Gatherr(Generic[C, D]):
    """Aggregate of a sequence of outcomes that keeps every error.

    Collecting ``Ok``/``Err`` values the usual way stops at the first
    ``Err``. ``Gatherr`` instead holds ``Ok`` of all success values when no
    error occurred, or ``Err`` of all error values in input order otherwise:

    >>> Gatherr.from_iter([Ok("a"), Err(1), Ok("b"), Err(2)]).result
    Err(error=[1, 2])

    ``ok_into`` and ``err_into`` build the collections from an iterable
    and default to ``list``. Prefer :meth:`Outcomes.gatherr` or the
    :func:`gatherr` function when the wrapper itself is not needed.
    """

    result: Result[C, D]

    @classmethod
    def from_iter(
        cls,
        outcomes: Iterable[Outcome[T, E]],
        ok_into: Callable[[Iterable[T]], C] = list,  # type: ignore[assignment]
        err_into: Callable[[Iterable[E]], D] = list,  # type: ignore[assignment]
    ) -> Gatherr[C, D]:
        return cls(_gather(outcomes, ok_into, err_into))


class Outcomes(Generic[T, E]):
    """Fluent view over an iterable of outcomes.

    >>> Outcomes(iter([Ok("a"), Ok("b")])).gatherr(ok_into=tuple)
    Ok(value=('a', 'b'))
    """

    __slots__ = ("_iterator",)

    def __init__(self, iterable: Iterable[Outcome[T, E]]) -> None:
        self._iterator: Iterator[Outcome[T, E]] = iter(iterable)

    def __iter__(self) -> Iterator[Outcome[T, E]]:
        return self._iterator

    def gatherr(
        self,
        ok_into: Callable[[Iterable[T]], C] = list,  # type: ignore[assignment]
        err_into: Callable[[Iterable[E]], D] = list,  # type: ignore[assignment]
    ) -> Result[C, D]:
        """Collect all ``Ok`` or all ``Err`` values into a single result."""
        wrapped: Gatherr[C, D] = Gatherr.from_iter(self, ok_into, err_into)
        return wrapped.result


def gatherr(
    outcomes: Iterable[Outcome[T, E]],
    ok_into: Callable[[Iterable[T]], C] = list,  # type: ignore[assignment]
    err_into: Callable[[Iterable[E]], D] = list,  # type: ignore[assignment]
) -> Result[C, D]:
    """Collect all ``Ok`` or all ``Err`` values from ``outcomes``.

    >>> gatherr([Ok("a"), Err(1), Ok("b"), Err(2)])
    Err(error=[1, 2])
    >>> gatherr([])
    Ok(value=[])
    """
    wrapped: Gatherr[C, D] = Gatherr.from_iter(outcomes, ok_into, err_into)
    return wrapped.result
