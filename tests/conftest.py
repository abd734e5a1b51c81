from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

PNPM_LOCK = """\
lockfileVersion: '6.0'

devDependencies:
  typescript:
    specifier: ^5.0.0
    version: 5.0.4

packages:

  /typescript@5.0.4:
    resolution: {integrity: sha512-abc}
    engines: {node: '>=12.20'}
    dev: true

  '/vite@5.0.0(@types/node@20.0.0)':
    resolution: {integrity: sha512-def}
    engines: {node: '^18.0.0 || >=20.0.0'}
    dev: false

  /@scope/lib@1.0.0:
    resolution: {integrity: sha512-ghi}
    engines: {node: '>=10'}
    dev: false

  /no-engines@1.0.0:
    resolution: {integrity: sha512-jkl}
    dev: false
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NPM_ENGINES_CONFIG", "NPM_ENGINES_WARN_ONLY", "GITHUB_STEP_SUMMARY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_project(tmp_path: Path):
    """Return a factory writing package.json and lockfiles into a directory."""

    def _write(
        engines: str | None = ">=14.0.0",
        pnpm_lock: str | None = PNPM_LOCK,
        package_lock: dict[str, Any] | None = None,
        subdir: str = "",
    ) -> Path:
        project = tmp_path / subdir if subdir else tmp_path
        project.mkdir(parents=True, exist_ok=True)
        manifest: dict[str, Any] = {"name": "app", "version": "1.0.0"}
        if engines is not None:
            manifest["engines"] = {"node": engines}
        (project / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
        if pnpm_lock is not None:
            (project / "pnpm-lock.yaml").write_text(pnpm_lock, encoding="utf-8")
        if package_lock is not None:
            (project / "package-lock.json").write_text(json.dumps(package_lock), encoding="utf-8")
        return project

    return _write
