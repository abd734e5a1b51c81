"""Project discovery utilities."""

from __future__ import annotations

from pathlib import Path


EXCLUDES = {"node_modules", ".git", ".venv"}
MANIFEST = "package.json"


def discover_projects(root: Path, recursive: bool = False) -> list[Path]:
    """Find project directories (those holding a package.json) under root.

    Without ``recursive`` only root itself is considered. Vendor and VCS
    directories are never descended into.
    """
    root = root.resolve()
    if not recursive:
        return [root] if (root / MANIFEST).is_file() else []

    found: list[Path] = []

    def should_skip(p: Path) -> bool:
        parts = set(p.parts)
        return any(ex in parts for ex in EXCLUDES)

    for path in root.rglob(MANIFEST):
        if not path.is_file():
            continue
        if should_skip(path.relative_to(root)):
            continue
        found.append(path.parent)

    return sorted(found)
