"""Intersection of range expressions and of whole lists of them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce

from ..models import Clause, RangeExpression
from ..parsers.semver import parse_range
from .clauses import decompose, recompose
from .engine import intersect
from .simplifier import simplify


def intersect_ranges(a: RangeExpression, b: RangeExpression) -> RangeExpression:
    """Return the versions matched by both ``a`` and ``b``.

    The result is not canonical; pass it through :func:`simplify` when a
    minimal form is needed.
    """
    kept: list[Clause] = []
    for left in decompose(a):
        for right in decompose(b):
            clause = intersect(left, right)
            if clause is not None:
                kept.append(clause)
    return recompose(kept)


def reduce_intersection(ranges: Sequence[RangeExpression]) -> RangeExpression:
    """Return the versions common to every expression in ``ranges``.

    An empty list imposes no constraint and yields the universal expression.
    """
    if not ranges:
        return RangeExpression.universal()
    return reduce(intersect_ranges, [simplify(r) for r in ranges])


def dedupe_ranges(range_strings: Iterable[str]) -> list[RangeExpression]:
    """Parse each distinct range string once, keeping first-seen order.

    Strings are compared textually; equivalent ranges spelled differently
    are both kept.
    """
    return [parse_range(text) for text in dict.fromkeys(range_strings)]
