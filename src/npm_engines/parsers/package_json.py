"""Parse package.json and extract the declared Node engine range."""

from __future__ import annotations

from pathlib import Path

from ..validators.manifests import PACKAGE_JSON_SCHEMA, ManifestError, validate_document


def read_engine_range(path: Path) -> str | None:
    """Return ``engines.node`` from a package.json, or None when it is not declared."""
    import json

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"Missing package.json: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc

    validate_document(data, PACKAGE_JSON_SCHEMA, str(path))
    engines = data.get("engines") or {}
    return engines.get("node")
