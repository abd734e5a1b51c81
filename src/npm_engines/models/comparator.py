"""Comparator model: an operator paired with a version."""

from __future__ import annotations

from dataclasses import dataclass

from semantic_version import Version

LOWER_OPERATORS = frozenset({">", ">="})
UPPER_OPERATORS = frozenset({"<", "<="})
_VALID_OPERATORS = LOWER_OPERATORS | UPPER_OPERATORS | {"="}


@dataclass(frozen=True, slots=True)
class Comparator:
    """A single version predicate such as ``>=1.2.0``."""

    operator: str
    version: Version

    def __post_init__(self) -> None:
        if self.operator not in _VALID_OPERATORS:
            raise ValueError(f"Invalid comparator operator: {self.operator!r}")
        if not isinstance(self.version, Version):
            raise TypeError("Comparator version must be a semantic_version.Version")

    def __str__(self) -> str:
        return f"{self.operator}{self.version}"

    @property
    def is_lower(self) -> bool:
        return self.operator in LOWER_OPERATORS

    @property
    def is_upper(self) -> bool:
        return self.operator in UPPER_OPERATORS

    @property
    def inclusive(self) -> bool:
        return self.operator in {">=", "<=", "="}

    def test(self, version: Version) -> bool:
        """Return True when ``version`` satisfies this comparator."""
        if self.operator == ">":
            return version > self.version
        if self.operator == ">=":
            return version >= self.version
        if self.operator == "<":
            return version < self.version
        if self.operator == "<=":
            return version <= self.version
        return version == self.version
