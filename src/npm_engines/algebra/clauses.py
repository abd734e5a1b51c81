"""Split range expressions into clauses and join clauses back together."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import Clause, RangeExpression


class MalformedClauseError(ValueError):
    """Raised when a clause breaks the one-lower/one-upper comparator contract."""


def decompose(expr: RangeExpression) -> list[Clause]:
    """Return the OR-clauses of ``expr`` in their original order."""
    return list(expr.clauses)


def recompose(clauses: Iterable[Clause]) -> RangeExpression:
    """Return the expression matching any of ``clauses``, kept in the given order."""
    return RangeExpression.from_clauses(clauses)


def require_well_formed(clause: Clause) -> Clause:
    """Return ``clause`` unchanged, or raise if it is not a simple interval.

    A well-formed clause holds at most one ``>``/``>=`` comparator, at most
    one ``<``/``<=`` comparator and no ``=`` comparator.
    """
    lowers = sum(1 for c in clause.comparators if c.is_lower)
    uppers = sum(1 for c in clause.comparators if c.is_upper)
    exact = any(c.operator == "=" for c in clause.comparators)
    if lowers > 1 or uppers > 1 or exact:
        raise MalformedClauseError(
            f"Clause must only have one lower and one upper comparator, found: {clause}"
        )
    return clause
