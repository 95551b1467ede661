"""Small predicate helpers for use with `require(...).to_satisfy(...)`."""

from __future__ import annotations

from typing import Any, Callable


def is_none(value: Any) -> bool:
    return value is None


def is_not_none(value: Any) -> bool:
    return value is not None


def is_not_blank(value: Any) -> bool:
    """True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def equals(expected: Any) -> Callable[[Any], bool]:
    def _equals(value: Any) -> bool:
        return value == expected

    return _equals


def starts_with(prefix: str) -> Callable[[str], bool]:
    def _starts_with(value: str) -> bool:
        return value.startswith(prefix)

    return _starts_with


def ends_with(suffix: str) -> Callable[[str], bool]:
    def _ends_with(value: str) -> bool:
        return value.endswith(suffix)

    return _ends_with


def negate(predicate: Callable[[Any], Any]) -> Callable[[Any], bool]:
    if not callable(predicate):
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")

    def _negated(value: Any) -> bool:
        return not predicate(value)

    return _negated
