"""Fluent requirements for assertions and validations.

Usage::

    require(value).to_satisfy(is_not_blank).and_(starts_with("a")).otherwise_raise(
        lambda: ValueError("value must start with 'a'")
    )

Composition with `and_` / `or_` applies NO precedence: links are folded in the
order they were added, so `A.or_(B).and_(C)` is `(A or B) and C`, never
`A or (B and C)`. Each binary step still short-circuits.

Builders hold mutable chain state and do no locking; a chain belongs to the
caller that started it and must not be shared across threads.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, Optional

from fluent_checks.errors import ChainConsumedError, RequirementFailed
from fluent_checks.types import (
    CONNECTIVE_AND,
    CONNECTIVE_NONE,
    CONNECTIVE_OR,
    ErrorFactory,
    Link,
    Predicate,
    T,
)

logger = logging.getLogger(__name__)


def evaluate_chain(chain: List[Link], subject: Any) -> bool:
    """Fold `chain` left-to-right over `subject`.

    Predicate exceptions propagate unchanged.
    """
    if not chain:
        raise ValueError("composition chain must have at least one link")
    if chain[0].connective != CONNECTIVE_NONE:
        raise ValueError("first link of a composition chain must have no connective")

    result = bool(chain[0].predicate(subject))
    for link in chain[1:]:
        if link.connective == CONNECTIVE_AND:
            result = result and bool(link.predicate(subject))
        elif link.connective == CONNECTIVE_OR:
            result = result or bool(link.predicate(subject))
        else:
            raise ValueError(f"unexpected connective in chain body: {link.connective!r}")
    return result


class PredicateBuilder(Generic[T]):
    """Accumulates a left-to-right composed test over one bound subject."""

    def __init__(self, subject: T, predicate: Predicate[T]) -> None:
        self._subject = subject
        self._chain: List[Link] = [Link(predicate=predicate, connective=CONNECTIVE_NONE)]
        self._consumed = False

    @property
    def links(self) -> List[Link]:
        return list(self._chain)

    def and_(self, predicate: Predicate[T]) -> "PredicateBuilder[T]":
        return self._append(predicate, CONNECTIVE_AND)

    def or_(self, predicate: Predicate[T]) -> "PredicateBuilder[T]":
        return self._append(predicate, CONNECTIVE_OR)

    def test(self) -> bool:
        self._ensure_open()
        result = evaluate_chain(self._chain, self._subject)
        logger.debug("requirement evaluated: links=%d result=%s", len(self._chain), result)
        return result

    def otherwise_raise(self, error_factory: ErrorFactory) -> None:
        """Raise the error built by `error_factory` if the composed predicate is false.

        The factory is called at most once, and only on failure. The produced
        exception is raised as-is. The chain is consumed either way.
        """
        if not callable(error_factory):
            raise TypeError(
                f"error_factory must be callable, got {type(error_factory).__name__}"
            )
        if self._finish():
            return

        error = error_factory()
        if not isinstance(error, BaseException):
            raise TypeError(
                f"error_factory must return an exception, got {type(error).__name__}"
            )
        raise error

    def otherwise_fail(self, message: Optional[str] = None) -> None:
        if self._finish():
            return
        raise RequirementFailed(message, subject=self._subject)

    def _finish(self) -> bool:
        result = self.test()
        self._consumed = True
        return result

    def _append(self, predicate: Predicate[T], connective: str) -> "PredicateBuilder[T]":
        self._ensure_open()
        self._chain.append(Link(predicate=predicate, connective=connective))
        return self

    def _ensure_open(self) -> None:
        if self._consumed:
            raise ChainConsumedError()


class RequirementBuilder(Generic[T]):
    def __init__(self, subject: T) -> None:
        self._subject = subject

    @property
    def subject(self) -> T:
        return self._subject

    def to_satisfy(self, predicate: Callable[[T], Any]) -> PredicateBuilder[T]:
        return PredicateBuilder(self._subject, predicate)


def require(subject: T) -> RequirementBuilder[T]:
    """Start a requirement on `subject`. Any value is accepted, including None."""
    return RequirementBuilder(subject)
