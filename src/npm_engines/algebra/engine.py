"""Pairwise union and intersection of overlapping clauses."""

from __future__ import annotations

from ..models import Clause
from ..versions import intersects, is_subset
from .bounds import lower_bound, min_satisfying, upper_bound
from .clauses import require_well_formed


def _ordered(a: Clause, b: Clause) -> tuple[Clause, Clause]:
    # ties keep argument order
    if min_satisfying(b) < min_satisfying(a):
        return b, a
    return a, b


def merge(a: Clause, b: Clause) -> Clause | None:
    """Attempt to merge two overlapping clauses into one.

    Returns None if the clauses do not overlap. If either clause is a
    superset of the other, returns it. Otherwise returns a new clause
    spanning both.
    """
    require_well_formed(a)
    require_well_formed(b)

    if not intersects(a, b):
        return None
    if is_subset(a, b):
        return b
    if is_subset(b, a):
        return a

    first, last = _ordered(a, b)
    return Clause.of(lower_bound(first), upper_bound(last))


def intersect(a: Clause, b: Clause) -> Clause | None:
    """Attempt to find the intersection of two overlapping clauses.

    Returns None if the clauses do not overlap. If either clause is a
    subset of the other, returns it. Otherwise returns a new clause covering
    only the shared versions.
    """
    require_well_formed(a)
    require_well_formed(b)

    if not intersects(a, b):
        return None
    if is_subset(a, b):
        return a
    if is_subset(b, a):
        return b

    first, last = _ordered(a, b)
    # Partial overlap: first has an upper bound and last has a lower bound.
    return Clause.of(lower_bound(last), upper_bound(first))
