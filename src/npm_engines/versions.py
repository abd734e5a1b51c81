"""Version library primitives over parsed clauses.

Clauses are treated as intervals over the total semver order: every
comparator narrows the lower or the upper end, and ``=`` narrows both. The
range algebra only talks to versions through the functions defined here
(``compare``, ``intersects``, ``is_subset``, ``interval_start``), so it
never depends on how range strings are spelled.
"""

from __future__ import annotations

from collections.abc import Iterable

from semantic_version import Version

from .models import Clause, Comparator, RangeExpression

# Lower than every publishable version.
LOWEST_VERSION = Version("0.0.0-0")
_ZERO = Version("0.0.0")


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 following semver precedence."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _tighter_lower(current: Comparator | None, candidate: Comparator) -> Comparator:
    if current is None:
        return candidate
    order = compare(candidate.version, current.version)
    if order > 0 or (order == 0 and not candidate.inclusive):
        return candidate
    return current


def _tighter_upper(current: Comparator | None, candidate: Comparator) -> Comparator:
    if current is None:
        return candidate
    order = compare(candidate.version, current.version)
    if order < 0 or (order == 0 and not candidate.inclusive):
        return candidate
    return current


def tightest_bounds(
    comparators: Iterable[Comparator],
) -> tuple[Comparator | None, Comparator | None]:
    """Collapse comparators into the strictest lower and upper bound."""
    lower: Comparator | None = None
    upper: Comparator | None = None
    for comparator in comparators:
        if comparator.operator == "=":
            lower = _tighter_lower(lower, Comparator(">=", comparator.version))
            upper = _tighter_upper(upper, Comparator("<=", comparator.version))
        elif comparator.is_lower:
            lower = _tighter_lower(lower, comparator)
        else:
            upper = _tighter_upper(upper, comparator)
    return lower, upper


def successor(version: Version) -> Version:
    """Return the version immediately after ``version`` in semver precedence.

    Nothing sorts between ``1.2.3`` and ``1.2.4-0``, nor between ``1.2.3-rc``
    and ``1.2.3-rc.0``.
    """
    if version.prerelease:
        return Version(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            prerelease=version.prerelease + ("0",),
        )
    return Version(
        major=version.major, minor=version.minor, patch=version.patch + 1, prerelease=("0",)
    )


def _interval(clause: Clause) -> tuple[Version, Version | None]:
    """Return the clause as a half-open ``[start, end)`` interval; no end is unbounded."""
    lower, upper = tightest_bounds(clause.comparators)
    if lower is None:
        start = LOWEST_VERSION
    else:
        start = lower.version if lower.inclusive else successor(lower.version)
    if upper is None:
        end = None
    else:
        end = successor(upper.version) if upper.inclusive else upper.version
    return start, end


def _below(version: Version, end: Version | None) -> bool:
    return end is None or version < end


def is_satisfiable(clause: Clause) -> bool:
    start, end = _interval(clause)
    return _below(start, end)


def intersects(a: Clause, b: Clause) -> bool:
    """Return True when some version satisfies both clauses."""
    return is_satisfiable(Clause(a.comparators + b.comparators))


def is_subset(a: Clause, b: Clause) -> bool:
    """Return True when every version satisfying ``a`` also satisfies ``b``."""
    a_start, a_end = _interval(a)
    if not _below(a_start, a_end):
        return True
    b_start, b_end = _interval(b)
    if a_start < b_start:
        return False
    if b_end is None:
        return True
    return a_end is not None and a_end <= b_end


def interval_start(clause: Clause) -> Version | None:
    """Return the lowest version of any kind, prereleases included, in ``clause``.

    Unlike :func:`min_version` an exclusive bound is not rounded up to the next
    release, so clauses order exactly as :func:`is_subset` compares them.
    """
    start, end = _interval(clause)
    return start if _below(start, end) else None


def _release_after(version: Version) -> Version:
    if version.prerelease:
        return successor(version)
    return Version(major=version.major, minor=version.minor, patch=version.patch + 1)


def _clause_minimum(clause: Clause) -> Version | None:
    lower, _ = tightest_bounds(clause.comparators)
    start, end = _interval(clause)
    if not _below(start, end):
        return None
    if lower is None:
        candidate = _ZERO if _below(_ZERO, end) else LOWEST_VERSION
    elif lower.inclusive:
        candidate = lower.version
    else:
        candidate = _release_after(lower.version)
    return candidate if _below(candidate, end) else None


def min_version(target: Clause | RangeExpression) -> Version | None:
    """Return the lowest version satisfying ``target``, or None if undetermined."""
    clauses = target.clauses if isinstance(target, RangeExpression) else (target,)
    candidates = [v for v in map(_clause_minimum, clauses) if v is not None]
    return min(candidates, default=None)


def _clause_test(clause: Clause, version: Version, include_prerelease: bool) -> bool:
    if not all(c.test(version) for c in clause.comparators):
        return False
    if not version.prerelease or include_prerelease:
        return True
    core = (version.major, version.minor, version.patch)
    return any(
        c.version.prerelease and (c.version.major, c.version.minor, c.version.patch) == core
        for c in clause.comparators
    )


def satisfies(
    version: Version,
    target: Clause | RangeExpression,
    include_prerelease: bool = False,
) -> bool:
    """npm-style membership test.

    A prerelease version only matches a clause that mentions a prerelease of
    the same ``major.minor.patch``, unless ``include_prerelease`` is set.
    """
    clauses = target.clauses if isinstance(target, RangeExpression) else (target,)
    return any(_clause_test(c, version, include_prerelease) for c in clauses)
