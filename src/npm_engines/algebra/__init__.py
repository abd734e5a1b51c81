"""Version-range algebra.

Canonicalises, merges and intersects range expressions (unions of
conjunctive clauses) without touching files, environment or output.

Main API
--------
* :func:`simplify` - sorted, minimal, non-overlapping form of an expression
* :func:`intersect_ranges` - versions matched by both expressions
* :func:`reduce_intersection` - versions matched by every expression in a list
* :func:`dedupe_ranges` - parse distinct range strings
"""

from __future__ import annotations

from .bounds import lower_bound, min_satisfying, upper_bound
from .clauses import MalformedClauseError, decompose, recompose, require_well_formed
from .engine import intersect, merge
from .intersector import dedupe_ranges, intersect_ranges, reduce_intersection
from .simplifier import simplify

__all__ = [
    "MalformedClauseError",
    "decompose",
    "dedupe_ranges",
    "intersect",
    "intersect_ranges",
    "lower_bound",
    "merge",
    "min_satisfying",
    "recompose",
    "reduce_intersection",
    "require_well_formed",
    "simplify",
    "upper_bound",
]
