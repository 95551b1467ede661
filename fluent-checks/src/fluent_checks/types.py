from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Tuple, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], Any]
ErrorFactory = Callable[[], BaseException]

CONNECTIVE_NONE = "none"
CONNECTIVE_AND = "and"
CONNECTIVE_OR = "or"

ALLOWED_CONNECTIVES = {CONNECTIVE_NONE, CONNECTIVE_AND, CONNECTIVE_OR}

ParameterRow = Tuple[Any, ...]
ParameterTable = Tuple[ParameterRow, ...]


@dataclass(frozen=True)
class Link:
    """One step of a composition chain: a predicate and how it joins the running result."""

    predicate: Callable[[Any], Any]
    connective: str = CONNECTIVE_NONE

    def __post_init__(self) -> None:
        if self.connective not in ALLOWED_CONNECTIVES:
            raise ValueError(f"connective must be one of {sorted(ALLOWED_CONNECTIVES)}")
        if not callable(self.predicate):
            raise TypeError(f"predicate must be callable, got {type(self.predicate).__name__}")
