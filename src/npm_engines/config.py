"""Configuration loader for engine checks.

Reads optional settings from a JSON file (default: ``.npm-engines.json`` in the
scanned root). Recognised keys are ``includeDev`` (bool, default True),
``ignore`` (list of package names, default empty) and ``warnOnly`` (bool,
default False). Unknown keys are rejected so typos do not pass silently.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any


DEFAULT_CONFIG_NAME = ".npm-engines.json"
CONFIG_PATH_ENV_VAR = "NPM_ENGINES_CONFIG"
WARN_ONLY_ENV_VAR = "NPM_ENGINES_WARN_ONLY"

_TRUTHY = {"1", "true", "yes", "y"}
_KNOWN_KEYS = {"includeDev", "ignore", "warnOnly"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    include_dev: bool = True
    ignore: frozenset[str] = field(default_factory=frozenset)
    warn_only: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating every field."""
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        include_dev = data.get("includeDev", True)
        if not isinstance(include_dev, bool):
            raise ConfigError("'includeDev' must be a boolean")

        warn_only = data.get("warnOnly", False)
        if not isinstance(warn_only, bool):
            raise ConfigError("'warnOnly' must be a boolean")

        ignore = data.get("ignore", [])
        if not isinstance(ignore, list) or any(
            not isinstance(name, str) or not name for name in ignore
        ):
            raise ConfigError("'ignore' must be an array of non-empty package names")

        return cls(include_dev=include_dev, ignore=frozenset(ignore), warn_only=warn_only)

    def with_overrides(
        self,
        *,
        warn_only: bool | None = None,
        include_dev: bool | None = None,
    ) -> Settings:
        """Return a copy with any non-None overrides applied."""
        changes: dict[str, Any] = {}
        if warn_only is not None:
            changes["warn_only"] = warn_only
        if include_dev is not None:
            changes["include_dev"] = include_dev
        return replace(self, **changes)


def _resolve_config_path(root: Path, path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the configuration file path and whether it was asked for explicitly.

    Priority:
    1. Explicit path argument
    2. NPM_ENGINES_CONFIG environment variable
    3. Default path (.npm-engines.json in the scanned root)
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return root / DEFAULT_CONFIG_NAME, False


def load_settings(root: Path, path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        root: Directory being scanned; holds the default config file.
        path: Optional explicit config path.

    Returns:
        Settings, with defaults when no default config file exists.

    Raises:
        ConfigError: If an explicitly named file is missing, or any file is
            unreadable or invalid.
    """
    config_path, explicit = _resolve_config_path(root, path)

    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Configuration file not found: {config_path}")
        settings = Settings()
    else:
        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration file: {exc}") from exc

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        settings = Settings.from_dict(data)

    if warn_only_from_env():
        settings = settings.with_overrides(warn_only=True)
    return settings


def warn_only_from_env() -> bool:
    return os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in _TRUTHY
