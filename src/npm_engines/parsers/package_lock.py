"""Parse npm package-lock.json to capture Node engine constraints of installed packages."""

from __future__ import annotations

from pathlib import Path

from ..models import EngineConstraint
from ..validators.manifests import PACKAGE_LOCK_SCHEMA, ManifestError, validate_document

_MODULES = "node_modules/"


def parse(path: Path) -> list[EngineConstraint]:
    """Return engine constraints from the lockfile's ``packages`` map.

    Only npm v2+ lockfiles carry ``engines``; v1 lockfiles yield nothing.
    """
    import json

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc

    validate_document(data, PACKAGE_LOCK_SCHEMA, str(path))

    constraints: list[EngineConstraint] = []
    for key, meta in (data.get("packages") or {}).items():
        if _MODULES not in key:
            continue
        engines = meta.get("engines")
        if not isinstance(engines, dict) or "node" not in engines:
            continue
        name = key.rsplit(_MODULES, 1)[1]
        constraints.append(
            EngineConstraint(
                package=name,
                range=engines["node"],
                version=meta.get("version"),
                dev=meta.get("dev") is True,
            )
        )

    return constraints
