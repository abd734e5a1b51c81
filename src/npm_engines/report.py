"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .models import ProjectResult


def aggregate(results: list[ProjectResult]) -> dict[str, Any]:
    """Aggregate per-project results into a single JSON-serialisable report.

    Computes totals and the top-level ``hasFindings`` flag and passes each
    project through its ``to_dict`` form.
    """

    total_violations = sum(len(r.violations) for r in results)

    report: dict[str, Any] = {
        "version": "1",
        "hasFindings": total_violations > 0,
        "projects": [r.to_dict() for r in results],
        "totals": {
            "projects": len(results),
            "skipped": sum(1 for r in results if r.skipped),
            "violations": total_violations,
        },
    }

    return report
