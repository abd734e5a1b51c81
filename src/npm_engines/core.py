"""Core engine check entrypoints.

This module MUST NOT contain GitHub-specific behaviour so it can be used by
both the Action wrapper and the standalone CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .algebra import dedupe_ranges, reduce_intersection, simplify
from .config import Settings
from .discovery import discover_projects
from .models import EngineConstraint, ProjectResult, Violation
from .models.engine_check import INVALID_RANGE_REASON
from .parsers.package_json import read_engine_range
from .parsers.package_lock import parse as parse_package_lock
from .parsers.pnpm_lock import parse as parse_pnpm_lock
from .parsers.semver import InvalidRangeError, parse_range
from .validators.manifests import ManifestError
from .versions import min_version, satisfies

logger = logging.getLogger(__name__)

NO_ENGINE_REASON = "Valid Node version/range not specified in package.json"

# Later lockfiles override earlier ones for the same package version.
_LOCKFILES: tuple[tuple[str, Callable[[Path], list[EngineConstraint]]], ...] = (
    ("pnpm-lock.yaml", parse_pnpm_lock),
    ("package-lock.json", parse_package_lock),
)


def collect_constraints(project: Path, settings: Settings) -> list[EngineConstraint]:
    """Gather engine constraints from every lockfile present in ``project``."""
    by_package: dict[tuple[str, str | None], EngineConstraint] = {}
    for name, parser in _LOCKFILES:
        path = project / name
        if not path.is_file():
            continue
        logger.debug("Reading %s", path)
        for constraint in parser(path):
            by_package[(constraint.package, constraint.version)] = constraint

    selected: list[EngineConstraint] = []
    for constraint in by_package.values():
        if constraint.dev and not settings.include_dev:
            continue
        if constraint.package in settings.ignore:
            logger.debug("Ignoring %s by configuration", constraint.label)
            continue
        selected.append(constraint)
    return selected


def check_project(
    project: Path,
    settings: Settings | None = None,
    root: Path | None = None,
) -> ProjectResult:
    """Check one project's declared Node range against its dependencies.

    Params:
        project: directory holding package.json and a lockfile
        settings: filters to apply; defaults when None
        root: scan root used to label the project; the project itself when None

    Returns: ProjectResult listing every violating dependency and the
        combined window the dependencies allow
    """
    settings = settings or Settings()
    project = project.resolve()
    label = project.relative_to((root or project).resolve()).as_posix()

    declared = read_engine_range(project / "package.json")
    minimum = min_version(parse_range(declared)) if declared is not None else None
    if minimum is None:
        logger.warning("%s: %s", label, NO_ENGINE_REASON)
        return ProjectResult(path=label, declared_range=declared, skipped_reason=NO_ENGINE_REASON)

    logger.info("%s: minimum Node version %s from %r", label, minimum, declared)

    constraints = collect_constraints(project, settings)
    violations: list[Violation] = []
    valid_ranges: list[str] = []
    for constraint in constraints:
        try:
            expr = parse_range(constraint.range)
        except InvalidRangeError as exc:
            logger.warning("%s declares an invalid engines.node range: %s", constraint.label, exc)
            violations.append(
                Violation(constraint.label, constraint.range, reason=INVALID_RANGE_REASON)
            )
            continue
        valid_ranges.append(constraint.range)
        if not satisfies(minimum, expr):
            violations.append(Violation(constraint.label, constraint.range))

    combined = simplify(reduce_intersection(dedupe_ranges(valid_ranges)))
    combined_minimum = min_version(combined)
    logger.info(
        "%s: %d constraint(s), %d violation(s), combined window %s",
        label,
        len(constraints),
        len(violations),
        combined,
    )

    return ProjectResult(
        path=label,
        declared_range=declared,
        minimum_version=str(minimum),
        constraints_checked=len(constraints),
        violations=tuple(violations),
        combined_range=str(combined),
        combined_minimum=str(combined_minimum) if combined_minimum is not None else None,
    )


def check_repository(
    root: Path,
    settings: Settings | None = None,
    recursive: bool = False,
) -> list[ProjectResult]:
    """Check every project found under ``root``."""
    root = root.resolve()
    projects = discover_projects(root, recursive=recursive)
    if not projects:
        raise ManifestError(f"No package.json found under {root}")
    return [check_project(project, settings, root=root) for project in projects]
