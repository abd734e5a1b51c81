"""Canonicalisation of range expressions."""

from __future__ import annotations

from ..models import Clause, RangeExpression
from ..versions import is_satisfiable
from .bounds import min_satisfying
from .clauses import decompose, recompose
from .engine import merge


def simplify(expr: RangeExpression) -> RangeExpression:
    """Return ``expr`` as a sorted union of non-overlapping clauses.

    Clauses are ordered by their minimum satisfying version and adjacent
    overlapping clauses are merged in a single forward pass. Clauses that
    no version satisfies are dropped.
    """
    ordered = sorted(
        (clause for clause in decompose(expr) if is_satisfiable(clause)),
        key=min_satisfying,
    )

    survivors: list[Clause] = []
    for clause in ordered:
        if survivors:
            merged = merge(survivors[-1], clause)
            if merged is not None:
                survivors[-1] = merged
                continue
        survivors.append(clause)

    return recompose(survivors)
