"""Value types for version ranges and engine check results."""

from __future__ import annotations

from .comparator import LOWER_OPERATORS, UPPER_OPERATORS, Comparator
from .engine_check import EngineConstraint, ProjectResult, Violation
from .range_expression import EMPTY_RANGE_TEXT, Clause, RangeExpression

__all__ = [
    "EMPTY_RANGE_TEXT",
    "LOWER_OPERATORS",
    "UPPER_OPERATORS",
    "Clause",
    "Comparator",
    "EngineConstraint",
    "ProjectResult",
    "RangeExpression",
    "Violation",
]
