"""Clause and range expression value types.

A :class:`Clause` is a conjunction of comparators describing one contiguous
band of versions; a :class:`RangeExpression` is a disjunction of clauses.
Both are immutable: operations over them always build new values.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable

from .comparator import Comparator

# Nothing sorts below 0.0.0-0, so this range admits no version.
EMPTY_RANGE_TEXT = "<0.0.0-0"


@dataclass(frozen=True, slots=True)
class Clause:
    """Comparators that must all hold (logical AND)."""

    comparators: tuple[Comparator, ...] = ()

    def __post_init__(self) -> None:
        if any(not isinstance(c, Comparator) for c in self.comparators):
            raise TypeError("Clause members must be Comparator instances")

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.comparators) or "*"

    @classmethod
    def of(cls, *comparators: Comparator | None) -> Clause:
        """Build a clause from the given comparators, skipping ``None``."""
        return cls(tuple(c for c in comparators if c is not None))


@dataclass(frozen=True, slots=True)
class RangeExpression:
    """Clauses of which at least one must hold (logical OR).

    No clauses means no version satisfies the expression; a single empty
    clause means every version does.
    """

    clauses: tuple[Clause, ...] = ()

    def __post_init__(self) -> None:
        if any(not isinstance(c, Clause) for c in self.clauses):
            raise TypeError("RangeExpression members must be Clause instances")

    def __str__(self) -> str:
        if not self.clauses:
            return EMPTY_RANGE_TEXT
        return " || ".join(str(c) for c in self.clauses)

    @classmethod
    def universal(cls) -> RangeExpression:
        return cls((Clause(),))

    @classmethod
    def from_clauses(cls, clauses: Iterable[Clause]) -> RangeExpression:
        return cls(tuple(clauses))
