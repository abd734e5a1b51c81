"""Bound extraction for single clauses."""

from __future__ import annotations

from collections.abc import Set

from semantic_version import Version

from ..models import LOWER_OPERATORS, UPPER_OPERATORS, Clause, Comparator
from ..versions import LOWEST_VERSION, interval_start
from .clauses import MalformedClauseError


def _single(clause: Clause, operators: Set[str], direction: str) -> Comparator | None:
    found = [c for c in clause.comparators if c.operator in operators]
    if len(found) > 1:
        raise MalformedClauseError(
            f"Clause has {len(found)} {direction} comparators, expected at most one: {clause}"
        )
    return found[0] if found else None


def lower_bound(clause: Clause) -> Comparator | None:
    """Return the ``>``/``>=`` comparator of ``clause``, if any."""
    return _single(clause, LOWER_OPERATORS, "lower")


def upper_bound(clause: Clause) -> Comparator | None:
    """Return the ``<``/``<=`` comparator of ``clause``, if any."""
    return _single(clause, UPPER_OPERATORS, "upper")


def min_satisfying(clause: Clause) -> Version:
    """Return the lowest version satisfying ``clause``, prereleases included.

    An exclusive lower bound starts at the very next version (``>1.0.0``
    starts at ``1.0.1-0``), so clauses sort in the same order
    :func:`~npm_engines.versions.is_subset` compares them. Clauses without a
    lower bound, and unsatisfiable ones, report ``0.0.0-0``.
    """
    if lower_bound(clause) is None:
        return LOWEST_VERSION
    return interval_start(clause) or LOWEST_VERSION
