from __future__ import annotations

from typing import Any, Optional


class FluentChecksError(Exception):
    pass


class RequirementFailed(FluentChecksError, AssertionError):
    """Raised by `otherwise_fail` when the composed predicate is false."""

    def __init__(self, message: Optional[str] = None, *, subject: Any = None) -> None:
        self.subject = subject
        if message is None:
            message = f"requirement not satisfied by {subject!r}"
        super().__init__(message)


class ChainConsumedError(FluentChecksError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("requirement chain was already evaluated; start a new one with require()")


class EmptyTableError(FluentChecksError, ValueError):
    def __init__(self) -> None:
        super().__init__("There are no test cases")


class CaseFileError(FluentChecksError, ValueError):
    pass
