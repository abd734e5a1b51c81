"""JSON schema validation for package manifests and lockfiles."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

_DRAFT = "https://json-schema.org/draft/2020-12/schema"

_ENGINES = {
    "type": "object",
    "properties": {"node": {"type": "string"}},
}

PACKAGE_JSON_SCHEMA: dict[str, Any] = {
    "$schema": _DRAFT,
    "type": "object",
    "properties": {"engines": _ENGINES},
}

_LOCKED_PACKAGE = {
    "type": "object",
    "properties": {
        # npm 6 and older wrote engines as a list of strings
        "engines": {"anyOf": [_ENGINES, {"type": "array"}]},
        "dev": {"type": "boolean"},
        "version": {"type": "string"},
    },
}

PNPM_LOCK_SCHEMA: dict[str, Any] = {
    "$schema": _DRAFT,
    "type": "object",
    "properties": {
        "packages": {"type": ["object", "null"], "additionalProperties": _LOCKED_PACKAGE},
        # lockfile v5 maps names straight to version strings here
        "devDependencies": {
            "type": ["object", "null"],
            "additionalProperties": {"anyOf": [{"type": "string"}, _LOCKED_PACKAGE]},
        },
    },
}

PACKAGE_LOCK_SCHEMA: dict[str, Any] = {
    "$schema": _DRAFT,
    "type": "object",
    "properties": {
        "packages": {"type": "object", "additionalProperties": _LOCKED_PACKAGE},
    },
}


class ManifestError(RuntimeError):
    """Raised when a manifest or lockfile cannot be read or has an unexpected shape."""


def _format_errors(errors: Iterable[ValidationError]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_document(document: Any, schema: dict[str, Any], source: str) -> None:
    """Raise :class:`ManifestError` listing every schema violation in ``document``."""
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ManifestError(f"{source} failed validation:\n" + _format_errors(errors))
