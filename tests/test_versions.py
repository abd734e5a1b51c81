"""Version library primitives: interval semantics over parsed clauses."""

from __future__ import annotations

import pytest
from semantic_version import Version

from npm_engines.models import Clause, Comparator, RangeExpression
from npm_engines.parsers.semver import parse_range, parse_version
from npm_engines.versions import (
    LOWEST_VERSION,
    compare,
    interval_start,
    intersects,
    is_satisfiable,
    is_subset,
    min_version,
    satisfies,
    successor,
)


def clause(text: str) -> Clause:
    (only,) = parse_range(text).clauses
    return only


def test_compare_follows_semver_precedence() -> None:
    assert compare(Version("1.0.0-alpha"), Version("1.0.0")) == -1
    assert compare(Version("1.10.0"), Version("1.9.0")) == 1
    assert compare(Version("2.0.0"), Version("2.0.0")) == 0


def test_lowest_version_sorts_below_every_release() -> None:
    assert LOWEST_VERSION < Version("0.0.0")
    assert LOWEST_VERSION < Version("0.0.0-alpha")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (">=1.2.3", "1.2.3"),
        (">1.2.3", "1.2.4"),
        (">1.2.3-alpha", "1.2.3-alpha.0"),
        ("<2.0.0", "0.0.0"),
        ("<0.0.0", "0.0.0-0"),
        ("^1.0.0 || ^0.5.0", "0.5.0"),
        ("*", "0.0.0"),
    ],
)
def test_min_version_finds_lowest_satisfying_version(text: str, expected: str) -> None:
    assert min_version(parse_range(text)) == Version(expected)


@pytest.mark.parametrize("text", [">1.0.0 <1.0.1", ">=2.0.0 <1.0.0", "<*"])
def test_min_version_is_none_when_undetermined(text: str) -> None:
    assert min_version(parse_range(text)) is None


def test_min_version_of_empty_expression_is_none() -> None:
    assert min_version(RangeExpression()) is None


@pytest.mark.parametrize(
    ("version", "expected"),
    [("1.2.3", "1.2.4-0"), ("1.2.3-rc.1", "1.2.3-rc.1.0"), ("0.0.0-0", "0.0.0-0.0")],
)
def test_successor_is_the_next_version(version: str, expected: str) -> None:
    assert successor(Version(version)) == Version(expected)
    assert Version(version) < successor(Version(version))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (">=1.2.3", "1.2.3"),
        (">1.2.3", "1.2.4-0"),
        (">1.0.0 <1.0.1", "1.0.1-0"),
        ("<2.0.0", "0.0.0-0"),
        ("*", "0.0.0-0"),
    ],
)
def test_interval_start_counts_prereleases(text: str, expected: str) -> None:
    assert interval_start(clause(text)) == Version(expected)


def test_interval_start_of_unsatisfiable_clause_is_none() -> None:
    assert interval_start(clause(">=2.0.0 <1.0.0")) is None


def test_is_satisfiable_detects_crossed_bounds() -> None:
    assert is_satisfiable(clause(">=1.0.0 <=1.0.0"))
    assert not is_satisfiable(clause(">1.0.0 <=1.0.0"))
    assert not is_satisfiable(clause("<0.0.0-0"))
    assert is_satisfiable(Clause())


def test_is_satisfiable_treats_equality_as_both_bounds() -> None:
    exact = Clause((Comparator("=", Version("1.0.0")), Comparator("<", Version("1.0.0"))))

    assert not is_satisfiable(exact)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (">=1.0.0 <2.0.0", ">=1.5.0 <3.0.0", True),
        (">=1.0.0 <2.0.0", ">=2.0.0 <3.0.0", False),
        ("<=2.0.0", ">=2.0.0", True),
        ("*", "<1.0.0", True),
        (">=3.0.0 <1.0.0", "*", False),
    ],
)
def test_intersects(a: str, b: str, expected: bool) -> None:
    assert intersects(clause(a), clause(b)) is expected
    assert intersects(clause(b), clause(a)) is expected


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (">=2.0.0 <3.0.0", ">=1.0.0 <5.0.0", True),
        (">=1.0.0 <5.0.0", ">=2.0.0 <3.0.0", False),
        ("^1.2.0", "*", True),
        ("*", "^1.2.0", False),
        (">1.0.0", ">=1.0.0", True),
        (">=1.0.0", ">1.0.0", False),
        ("<2.0.0", "<=2.0.0", True),
        ("<=2.0.0", "<2.0.0", False),
        (">=3.0.0 <1.0.0", ">=5.0.0 <6.0.0", True),
        ("<1.0.0", ">=0.0.0-0", True),
        (">1.0.0 <2.0.0", ">=1.0.1-0 <2.0.0", True),
        (">=1.0.1-0 <2.0.0", ">1.0.0 <2.0.0", True),
        (">1.0.0 <2.0.0", ">=1.0.1 <3.0.0", False),
        ("<=1.9.9 >=1.0.0", "<1.9.10-0", True),
    ],
)
def test_is_subset(a: str, b: str, expected: bool) -> None:
    assert is_subset(clause(a), clause(b)) is expected


def test_satisfies_checks_any_clause() -> None:
    expr = parse_range("^12.22.0 || >=14.17.0")

    assert satisfies(parse_version("12.22.1"), expr)
    assert satisfies(parse_version("16.0.0"), expr)
    assert not satisfies(parse_version("13.0.0"), expr)
    assert not satisfies(parse_version("14.0.0"), expr)


def test_satisfies_excludes_prereleases_from_other_releases() -> None:
    assert not satisfies(parse_version("2.0.0-rc.1"), parse_range(">=1.0.0"))
    assert satisfies(parse_version("2.0.0-rc.1"), parse_range(">=1.0.0"), include_prerelease=True)
    assert satisfies(parse_version("2.0.0-rc.1"), parse_range(">=2.0.0-rc.0"))


def test_satisfies_with_empty_expression_is_false() -> None:
    assert not satisfies(parse_version("1.0.0"), parse_range("<*"))
