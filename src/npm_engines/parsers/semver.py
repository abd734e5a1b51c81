"""npm semver range handling built atop semantic_version.

Range strings are desugared the way node-semver does it (strict mode,
prereleases excluded) into plain ``>``/``>=``/``<``/``<=`` comparators:

- ``||`` separates alternatives; ``*``, ``x`` and an empty string match all
- hyphen ranges ``1.2 - 2.3`` → ``>=1.2.0 <2.4.0-0``
- x-ranges ``1.x`` → ``>=1.0.0 <2.0.0-0``
- tilde ranges ``~1.2.3`` → ``>=1.2.3 <1.3.0-0``
- caret ranges ``^0.2.3`` → ``>=0.2.3 <0.3.0-0``
- exact versions ``1.2.3`` → ``>=1.2.3 <=1.2.3``

Each clause keeps only its strictest lower and upper comparator.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from semantic_version import Version

from ..models import Clause, Comparator, RangeExpression
from ..versions import tightest_bounds


class InvalidVersionError(ValueError):
    """Raised when a version string is not valid semver."""


class InvalidRangeError(ValueError):
    """Raised when a range string cannot be parsed."""


_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_PART = r"0|[1-9]\d*|[xX*]"
_PARTIAL = re.compile(
    rf"^v?(?P<major>{_PART})"
    rf"(?:\.(?P<minor>{_PART})"
    rf"(?:\.(?P<patch>{_PART})"
    rf"(?:-(?P<prerelease>{_IDENT}))?"
    rf"(?:\+{_IDENT})?"
    r")?)?$"
)
_TOKEN = re.compile(r"^(?P<op>~>|~|\^|>=|<=|>|<|=)?(?P<version>.*)$")
_HYPHEN = re.compile(r"^(?P<start>\S+)\s+-\s+(?P<end>\S+)$")
_OP_SPACE = re.compile(r"(~>|~|\^|>=|<=|>|<|=)\s+")


class _Partial(NamedTuple):
    major: int | None
    minor: int | None
    patch: int | None
    prerelease: tuple[str, ...]

    @property
    def is_full(self) -> bool:
        return self.patch is not None


def _number(text: str | None) -> int | None:
    if text is None or text in {"x", "X", "*"}:
        return None
    return int(text)


def _partial(text: str) -> _Partial:
    match = _PARTIAL.match(text.lstrip("="))
    if not match:
        raise InvalidRangeError(f"Invalid version in range: {text!r}")
    major = _number(match.group("major"))
    minor = _number(match.group("minor")) if major is not None else None
    patch = _number(match.group("patch")) if minor is not None else None
    prerelease = match.group("prerelease") if patch is not None else None
    return _Partial(major, minor, patch, tuple(prerelease.split(".")) if prerelease else ())


def _version(major: int, minor: int, patch: int, prerelease: tuple[str, ...] = ()) -> Version:
    try:
        return Version(major=major, minor=minor, patch=patch, prerelease=prerelease)
    except ValueError as exc:
        raise InvalidRangeError(str(exc)) from exc


def _floor(p: _Partial) -> Version:
    return _version(p.major or 0, p.minor or 0, p.patch or 0, p.prerelease)


def _bump(p: _Partial) -> Version:
    """First prerelease of the next release the partial version does not cover."""
    if p.minor is None:
        return _version(p.major + 1, 0, 0, ("0",))
    return _version(p.major, p.minor + 1, 0, ("0",))


def _primitive(op: str, p: _Partial) -> list[Comparator]:
    if p.major is None:
        if op in {">", "<"}:
            return [Comparator("<", _version(0, 0, 0, ("0",)))]
        return []

    if p.is_full:
        version = _floor(p)
        if op in {"", "="}:
            return [Comparator(">=", version), Comparator("<=", version)]
        return [Comparator(op, version)]

    if op in {"", "="}:
        return [Comparator(">=", _floor(p)), Comparator("<", _bump(p))]
    if op == ">":
        bumped = _bump(p)
        return [Comparator(">=", _version(bumped.major, bumped.minor, 0))]
    if op == ">=":
        return [Comparator(">=", _floor(p))]
    if op == "<":
        return [Comparator("<", _version(p.major, p.minor or 0, 0, ("0",)))]
    # <=
    return [Comparator("<", _bump(p))]


def _tilde(p: _Partial) -> list[Comparator]:
    if p.major is None:
        return []
    if p.minor is None:
        return [Comparator(">=", _floor(p)), Comparator("<", _bump(p))]
    return [
        Comparator(">=", _floor(p)),
        Comparator("<", _version(p.major, p.minor + 1, 0, ("0",))),
    ]


def _caret(p: _Partial) -> list[Comparator]:
    if p.major is None:
        return []
    lower = Comparator(">=", _floor(p))
    if p.minor is None:
        return [lower, Comparator("<", _bump(p))]
    if p.major != 0:
        return [lower, Comparator("<", _version(p.major + 1, 0, 0, ("0",)))]
    if p.patch is None or p.minor != 0:
        return [lower, Comparator("<", _version(0, p.minor + 1, 0, ("0",)))]
    return [lower, Comparator("<", _version(0, 0, p.patch + 1, ("0",)))]


def _hyphen(start: str, end: str) -> list[Comparator]:
    lo = _partial(start)
    hi = _partial(end)
    comparators: list[Comparator] = []
    if lo.major is not None:
        comparators.append(Comparator(">=", _floor(lo)))
    if hi.major is not None:
        if hi.is_full:
            comparators.append(Comparator("<=", _floor(hi)))
        else:
            comparators.append(Comparator("<", _bump(hi)))
    return comparators


def _token(text: str) -> list[Comparator]:
    match = _TOKEN.match(text)
    if not match:  # pragma: no cover - the pattern accepts any string
        raise InvalidRangeError(f"Invalid comparator: {text!r}")
    op = match.group("op") or ""
    partial = _partial(match.group("version"))
    if op in {"~", "~>"}:
        return _tilde(partial)
    if op == "^":
        return _caret(partial)
    return _primitive(op, partial)


def _parse_clause(text: str) -> Clause:
    text = text.strip()
    hyphen = _HYPHEN.match(text)
    if hyphen:
        comparators = _hyphen(hyphen.group("start"), hyphen.group("end"))
    else:
        comparators = []
        for token in _OP_SPACE.sub(r"\1", text).split():
            comparators.extend(_token(token))
    return Clause.of(*tightest_bounds(comparators))


def parse_range(text: str) -> RangeExpression:
    """Parse an npm range string into a :class:`RangeExpression`."""
    if not isinstance(text, str):
        raise InvalidRangeError(f"Range must be a string, got {type(text).__name__}")
    return RangeExpression(tuple(_parse_clause(part) for part in text.split("||")))


def parse_version(text: str) -> Version:
    """Parse a full semver version, ignoring a leading ``v``/``=`` and build metadata."""
    match = _PARTIAL.match(text.strip().lstrip("="))
    if not match or any(
        match.group(part) in {None, "x", "X", "*"} for part in ("major", "minor", "patch")
    ):
        raise InvalidVersionError(f"Invalid version: {text!r}")
    prerelease = match.group("prerelease")
    try:
        return Version(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
        )
    except ValueError as exc:
        raise InvalidVersionError(str(exc)) from exc
