"""Parse pnpm-lock.yaml to capture the Node engine constraints of locked packages."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..models import EngineConstraint
from ..validators.manifests import PNPM_LOCK_SCHEMA, ManifestError, validate_document


def _split_key(key: str) -> tuple[str, str | None]:
    """Split a lockfile key into (package, version).

    Keys look like "/name@1.2.3", "/@scope/name@1.2.3(peer@1.0.0)",
    "name@1.2.3" (v9) or "/name/1.2.3" (v5).
    """
    ref = key[1:] if key.startswith("/") else key
    ref = ref.split("(", 1)[0]
    at = ref.rfind("@")
    if at > 0:
        return ref[:at], ref[at + 1 :] or None
    head, sep, tail = ref.rpartition("/")
    if sep and head and tail[:1].isdigit():
        return head, tail
    return ref, None


def _constraint(key: str, meta: Any, *, dev: bool) -> EngineConstraint | None:
    if not isinstance(meta, dict):
        return None
    engines = meta.get("engines")
    if not isinstance(engines, dict) or not isinstance(engines.get("node"), str):
        return None
    name, version = _split_key(key)
    return EngineConstraint(
        package=name,
        range=engines["node"],
        version=version,
        dev=dev or meta.get("dev") is True,
    )


def parse(path: Path) -> list[EngineConstraint]:
    """Return engine constraints from a pnpm lock file.

    Entries under ``devDependencies`` come first and are always dev; entries
    under ``packages`` follow.
    """
    import yaml

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc

    validate_document(data, PNPM_LOCK_SCHEMA, str(path))

    constraints: list[EngineConstraint] = []
    for section, dev in (("devDependencies", True), ("packages", False)):
        for key, meta in (data.get(section) or {}).items():
            constraint = _constraint(str(key), meta, dev=dev)
            if constraint is not None:
                constraints.append(constraint)

    return constraints
