from __future__ import annotations

import json
from pathlib import Path

import pytest

from npm_engines.discovery import discover_projects
from npm_engines.parsers import package_lock, pnpm_lock
from npm_engines.parsers.package_json import read_engine_range
from npm_engines.validators.manifests import ManifestError


# ---- package.json ----------------------------------------------------------------------


def test_read_engine_range(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"engines": {"node": ">=18"}}), encoding="utf-8")

    assert read_engine_range(path) == ">=18"


@pytest.mark.parametrize("document", [{}, {"engines": {}}, {"engines": {"npm": ">=9"}}])
def test_read_engine_range_without_node(tmp_path: Path, document: dict) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    assert read_engine_range(path) is None


def test_read_engine_range_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Missing package.json"):
        read_engine_range(tmp_path / "package.json")


def test_read_engine_range_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError):
        read_engine_range(path)


def test_read_engine_range_rejects_non_string_node(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"engines": {"node": 18}}), encoding="utf-8")

    with pytest.raises(ManifestError):
        read_engine_range(path)


# ---- pnpm-lock.yaml --------------------------------------------------------------------


def test_pnpm_lock_collects_packages_with_engines(write_project) -> None:
    project = write_project()

    constraints = pnpm_lock.parse(project / "pnpm-lock.yaml")

    assert [(c.package, c.version, c.range, c.dev) for c in constraints] == [
        ("typescript", "5.0.4", ">=12.20", True),
        ("vite", "5.0.0", "^18.0.0 || >=20.0.0", False),
        ("@scope/lib", "1.0.0", ">=10", False),
    ]
    assert constraints[1].label == "vite@5.0.0"


def test_pnpm_lock_reads_v5_and_v9_keys(tmp_path: Path) -> None:
    path = tmp_path / "pnpm-lock.yaml"
    path.write_text(
        "lockfileVersion: 5.4\n"
        "devDependencies:\n"
        "  eslint: 8.0.0\n"
        "packages:\n"
        "  /left-pad/1.3.0:\n"
        "    engines: {node: '>=4'}\n"
        "  'esbuild@0.19.0':\n"
        "    engines: {node: '>=12'}\n",
        encoding="utf-8",
    )

    constraints = pnpm_lock.parse(path)

    assert [(c.package, c.version) for c in constraints] == [
        ("left-pad", "1.3.0"),
        ("esbuild", "0.19.0"),
    ]


def test_pnpm_lock_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "pnpm-lock.yaml"
    path.write_text("", encoding="utf-8")

    assert pnpm_lock.parse(path) == []


def test_pnpm_lock_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "pnpm-lock.yaml"
    path.write_text("packages: [unclosed", encoding="utf-8")

    with pytest.raises(ManifestError):
        pnpm_lock.parse(path)


def test_pnpm_lock_rejects_wrong_shape(tmp_path: Path) -> None:
    path = tmp_path / "pnpm-lock.yaml"
    path.write_text("packages:\n  - not-a-mapping\n", encoding="utf-8")

    with pytest.raises(ManifestError):
        pnpm_lock.parse(path)


# ---- package-lock.json -----------------------------------------------------------------


def test_package_lock_collects_installed_packages(tmp_path: Path) -> None:
    path = tmp_path / "package-lock.json"
    path.write_text(
        json.dumps(
            {
                "lockfileVersion": 3,
                "packages": {
                    "": {"name": "app", "engines": {"node": ">=14"}},
                    "node_modules/express": {"version": "4.18.2", "engines": {"node": ">= 0.10.0"}},
                    "node_modules/a/node_modules/@types/b": {
                        "version": "1.0.0",
                        "engines": {"node": ">=16"},
                        "dev": True,
                    },
                    "node_modules/legacy": {"version": "0.1.0", "engines": ["node >= 0.4"]},
                    "node_modules/npm-only": {"version": "2.0.0", "engines": {"npm": ">=7"}},
                    "node_modules/plain": {"version": "1.0.0"},
                },
            }
        ),
        encoding="utf-8",
    )

    constraints = package_lock.parse(path)

    assert [(c.package, c.version, c.range, c.dev) for c in constraints] == [
        ("express", "4.18.2", ">= 0.10.0", False),
        ("@types/b", "1.0.0", ">=16", True),
    ]


def test_package_lock_v1_has_no_constraints(tmp_path: Path) -> None:
    path = tmp_path / "package-lock.json"
    path.write_text(
        json.dumps({"lockfileVersion": 1, "dependencies": {"x": {"version": "1.0.0"}}}),
        encoding="utf-8",
    )

    assert package_lock.parse(path) == []


def test_package_lock_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "package-lock.json"
    path.write_text("[", encoding="utf-8")

    with pytest.raises(ManifestError):
        package_lock.parse(path)


# ---- discovery -------------------------------------------------------------------------


def test_discover_root_only(write_project, tmp_path: Path) -> None:
    write_project()
    write_project(subdir="packages/a")

    assert discover_projects(tmp_path) == [tmp_path.resolve()]


def test_discover_recursive_skips_vendor_dirs(write_project, tmp_path: Path) -> None:
    write_project()
    write_project(subdir="packages/a")
    write_project(subdir="node_modules/dep")

    found = discover_projects(tmp_path, recursive=True)

    assert found == [tmp_path.resolve(), (tmp_path / "packages" / "a").resolve()]


def test_discover_nothing(tmp_path: Path) -> None:
    assert discover_projects(tmp_path) == []
    assert discover_projects(tmp_path, recursive=True) == []
