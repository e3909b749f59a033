"""Settings management for sourceloader.

Simple, scope-aware YAML settings. Loader options live under a ``loader``
key in each settings file:

    loader:
      root: /srv/app
      fallback_paths: [vendor, lib]
      extension: py
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import ValidationError

from .exceptions import InvalidSettingsError
from .models import LoaderConfig
from .models import check_fallback_path

Scope = Literal["local", "project", "global"]

ROOT_ENV_VAR = "SOURCELOADER_ROOT"

logger = logging.getLogger(__name__)


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path
    local_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        """Create default paths for the standard sourceloader layout."""
        return cls(
            global_settings=Path.home() / ".sourceloader" / "settings.yaml",
            project_settings=Path.cwd() / ".sourceloader" / "settings.yaml",
            local_settings=Path.cwd() / ".sourceloader" / "settings.local.yaml",
        )


class AppSettings:
    """Settings manager with scope-aware merging.

    Scope priority (most specific wins):
    1. local (.sourceloader/settings.local.yaml) - gitignored, machine-specific
    2. project (.sourceloader/settings.yaml) - committed, team-shared
    3. global (~/.sourceloader/settings.yaml) - user defaults

    Usage:
        settings = AppSettings()
        config = settings.get_loader_config()
        settings.add_fallback_path("vendor", scope="project")
    """

    def __init__(self, paths: SettingsPaths | None = None) -> None:
        self.paths = paths or SettingsPaths.default()

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and merge settings from all scopes."""
        result: dict[str, Any] = {}
        for path in [self.paths.global_settings, self.paths.project_settings, self.paths.local_settings]:
            if path.exists():
                try:
                    with open(path) as f:
                        content = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    logger.warning(f"Failed to read {path}: {e}")
                    continue
                if not isinstance(content, dict):
                    logger.warning(f"Ignoring {path}: top level is not a mapping")
                    continue
                result = self._deep_merge(result, content)
        return result

    # ----- Loader settings -----

    def get_loader_settings(self) -> dict[str, Any]:
        """Get the merged ``loader`` section, with the root env override applied."""
        section = self.get_merged_settings().get("loader") or {}
        if not isinstance(section, dict):
            raise InvalidSettingsError("The 'loader' settings section must be a mapping")
        section = dict(section)
        if env_root := os.getenv(ROOT_ENV_VAR):
            section["root"] = env_root
        return section

    def get_loader_config(self, **overrides: Any) -> LoaderConfig:
        """Validate merged settings plus non-None overrides into a LoaderConfig.

        Raises:
            InvalidSettingsError: A value does not validate
        """
        values = self.get_loader_settings()
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return LoaderConfig.model_validate(values)
        except ValidationError as e:
            raise InvalidSettingsError(f"Invalid loader settings: {e}") from e

    def set_root(self, root: str | Path, scope: Scope = "project") -> None:
        """Set the loader root at the specified scope."""
        self._update_loader_setting("root", str(root), scope)

    def add_fallback_path(self, fallback: str, scope: Scope = "project") -> None:
        """Append a fallback path at the specified scope, keeping declared order."""
        try:
            fallback = check_fallback_path(fallback)
        except ValueError as e:
            raise InvalidSettingsError(str(e)) from e
        section = self._read_scope(scope).get("loader") or {}
        fallbacks = list(section.get("fallback_paths") or [])
        if fallback not in fallbacks:
            fallbacks.append(fallback)
        self._update_loader_setting("fallback_paths", fallbacks, scope)

    def clear_fallback_paths(self, scope: Scope = "project") -> None:
        """Remove fallback paths from the specified scope."""
        settings = self._read_scope(scope)
        section = settings.get("loader")
        if isinstance(section, dict) and "fallback_paths" in section:
            del section["fallback_paths"]
            self._write_scope(scope, settings)

    # ----- Scope utilities -----

    def _get_scope_path(self, scope: Scope) -> Path:
        """Get settings file path for scope."""
        return {
            "local": self.paths.local_settings,
            "project": self.paths.project_settings,
            "global": self.paths.global_settings,
        }[scope]

    def _read_scope(self, scope: Scope) -> dict[str, Any]:
        """Read settings from a specific scope."""
        path = self._get_scope_path(scope)
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return {}
        return content if isinstance(content, dict) else {}

    def _write_scope(self, scope: Scope, settings: dict[str, Any]) -> None:
        """Write settings to a specific scope."""
        path = self._get_scope_path(scope)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(settings, f, default_flow_style=False)

    def _update_loader_setting(self, key: str, value: Any, scope: Scope) -> None:
        """Update a single key of the ``loader`` section at specified scope."""
        settings = self._read_scope(scope)
        section = settings.get("loader")
        if not isinstance(section, dict):
            section = {}
        section[key] = value
        settings["loader"] = section
        self._write_scope(scope, settings)

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dicts, overlay wins."""
        result = base.copy()
        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


def get_settings() -> AppSettings:
    """Get a settings instance with default paths."""
    return AppSettings()
