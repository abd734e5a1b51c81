"""Human-readable rendering: console text and $GITHUB_STEP_SUMMARY Markdown."""

from __future__ import annotations

from typing import Any

from .models import ProjectResult
from .models.engine_check import EXCLUDES_MINIMUM_REASON


def _cell(value: Any) -> str:
    # "||" in a range would otherwise split the table cell
    return str(value).replace("|", "\\|")


def render_text(result: ProjectResult) -> str:
    """Return the console report for a single project."""
    if result.skipped:
        return f"{result.skipped_reason}\n"

    lines = [f"Minimum Node version {result.minimum_version} specified in package.json"]

    if result.violations:
        lines.append("Dependency errors found:")
        for violation in result.violations:
            line = f"- Package {violation.package} requires Node version {violation.constraint}"
            if violation.reason != EXCLUDES_MINIMUM_REASON:
                line += f" ({violation.reason})"
            lines.append(line)
    else:
        lines.append("No errors found")

    if result.combined_minimum:
        lines.append(f"Minimum Node version from dependencies {result.combined_minimum}")
    else:
        lines.append("No compatible minimum Node version in dependencies!")

    return "\n".join(lines) + "\n"


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of violating packages."""
    totals = report.get("totals", {})
    projects = report.get("projects", [])

    lines = []
    lines.append("# Node engines check")
    lines.append("")
    lines.append(
        f"Total projects: {totals.get('projects', 0)} | "
        f"Skipped: {totals.get('skipped', 0)} | "
        f"Violations: {totals.get('violations', 0)}"
    )
    lines.append("")
    lines.append("| Project | Declared | Dependency window | Package | Requires |")
    lines.append("| --- | --- | --- | --- | --- |")

    has_rows = False

    for proj in projects:
        path = _cell(proj.get("path") or "(unknown project)")
        declared = _cell(proj.get("declaredRange") or "n/a")
        if proj.get("skippedReason"):
            lines.append(
                f"| {path} | {declared} | n/a | Skipped: {_cell(proj['skippedReason'])} | n/a |"
            )
            has_rows = True
            continue

        window = _cell(proj.get("combinedRange") or "n/a")
        violations = proj.get("violations") or []
        if not violations:
            lines.append(f"| {path} | {declared} | {window} | No violations | n/a |")
            has_rows = True
            continue

        for violation in violations:
            pkg = _cell(violation.get("package", ""))
            constraint = _cell(violation.get("constraint", ""))
            lines.append(f"| {path} | {declared} | {window} | {pkg} | {constraint} |")
            has_rows = True

    if not has_rows:
        lines.append("| (no projects scanned) | n/a | n/a | No violations | n/a |")

    return "\n".join(lines) + "\n"
