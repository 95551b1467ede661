"""Helpers for table-driven tests."""

from __future__ import annotations

from fluent_checks.testing.case_loader import load_case_table
from fluent_checks.testing.parametric import ParameterCaseCollector, new_table

__all__ = [
    "ParameterCaseCollector",
    "load_case_table",
    "new_table",
]
