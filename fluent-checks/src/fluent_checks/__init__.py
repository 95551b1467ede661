"""fluent-checks.

Provides:
- `require(...)`: fluent, left-to-right predicate composition that raises a
  caller-supplied error when the requirement is not met
- `fluent_checks.testing`: a parameter-table builder for pytest parametrization
"""

from __future__ import annotations

from fluent_checks.errors import (
    CaseFileError,
    ChainConsumedError,
    EmptyTableError,
    FluentChecksError,
    RequirementFailed,
)
from fluent_checks.requirements import PredicateBuilder, RequirementBuilder, require

__all__ = [
    "CaseFileError",
    "ChainConsumedError",
    "EmptyTableError",
    "FluentChecksError",
    "PredicateBuilder",
    "RequirementBuilder",
    "RequirementFailed",
    "require",
]
