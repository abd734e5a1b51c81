"""Engine constraint and check result models."""

from __future__ import annotations

from dataclasses import dataclass

INVALID_RANGE_REASON = "invalid range"
EXCLUDES_MINIMUM_REASON = "excludes minimum"


@dataclass(frozen=True)
class EngineConstraint:
    """An ``engines.node`` range declared by one locked package."""

    package: str
    range: str
    version: str | None = None
    dev: bool = False

    def __post_init__(self) -> None:
        if not self.package:
            raise ValueError("Package name must be non-empty")

    @property
    def label(self) -> str:
        if self.version:
            return f"{self.package}@{self.version}"
        return self.package


@dataclass(frozen=True)
class Violation:
    """A dependency whose constraint rejects the project's minimum Node version."""

    package: str
    constraint: str
    reason: str = EXCLUDES_MINIMUM_REASON

    def to_dict(self) -> dict[str, str]:
        return {
            "package": self.package,
            "constraint": self.constraint,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class ProjectResult:
    """Outcome of checking one project directory."""

    path: str
    declared_range: str | None
    minimum_version: str | None = None
    constraints_checked: int = 0
    violations: tuple[Violation, ...] = ()
    combined_range: str | None = None
    combined_minimum: str | None = None
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "path": self.path,
            "declaredRange": self.declared_range,
            "minimumVersion": self.minimum_version,
            "constraintsChecked": self.constraints_checked,
            "violations": [v.to_dict() for v in self.violations],
            "combinedRange": self.combined_range,
            "combinedMinimum": self.combined_minimum,
        }
        if self.skipped_reason is not None:
            data["skippedReason"] = self.skipped_reason
        return data
