"""Import shim for the src/ layout.

This repo keeps the real package under `fluent-checks/src/fluent_checks/`.
When running CLIs directly from the repo root (e.g. `python -m fluent_checks.cli...`),
Python won't find that path unless PYTHONPATH is set.

This shim makes the repo root runnable without extra env configuration by
extending the package search path to include the src directory and
re-exporting the public API.
"""

from __future__ import annotations

from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[1]
_REAL_PKG = _REPO_ROOT / "fluent-checks" / "src" / "fluent_checks"
if _REAL_PKG.is_dir():
    __path__.append(str(_REAL_PKG))  # type: ignore[name-defined]

from fluent_checks.errors import (  # noqa: E402
    CaseFileError,
    ChainConsumedError,
    EmptyTableError,
    FluentChecksError,
    RequirementFailed,
)
from fluent_checks.requirements import (  # noqa: E402
    PredicateBuilder,
    RequirementBuilder,
    require,
)

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
