"""Settings for the file loader, read from settings.yaml files.

Three scopes, merged in order (later overrides earlier):
- User global (~/.file-loader/settings.yaml)
- Project (.file-loader/settings.yaml)
- Local (.file-loader/settings.local.yaml)

Loader options live under the ``loader:`` key.
"""

import logging
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import BaseModel
from pydantic import Field

logger = logging.getLogger(__name__)

Scope = Literal["user", "project", "local"]

SETTINGS_SECTION = "loader"


class LoaderSettings(BaseModel):
    """Effective loader configuration."""

    project_root: str = "."
    http_timeout: float = Field(default=10.0, gt=0)
    follow_redirects: bool = True
    content_type: str = "text"


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two settings dicts (overlay takes precedence)."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class SettingsManager:
    """Manages loader settings across user/project/local scopes."""

    def __init__(self, config_dir: Path | None = None, user_config_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            config_dir: Base directory for project/local settings (for testing).
                If None, uses .file-loader in current directory.
            user_config_dir: Base directory for user settings (for testing).
                If None, uses ~/.file-loader.
        """
        if config_dir is None:
            config_dir = Path(".file-loader")
        if user_config_dir is None:
            user_config_dir = Path.home() / ".file-loader"

        self.user_settings_file = user_config_dir / "settings.yaml"
        self.project_settings_file = config_dir / "settings.yaml"
        self.local_settings_file = config_dir / "settings.local.yaml"

    def _scope_file(self, scope: Scope) -> Path:
        file_map = {
            "user": self.user_settings_file,
            "project": self.project_settings_file,
            "local": self.local_settings_file,
        }
        return file_map[scope]

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Returns:
            Merged settings dictionary
        """
        merged: dict[str, Any] = {}
        for path in (self.user_settings_file, self.project_settings_file, self.local_settings_file):
            data = self._read_settings(path)
            if data:
                merged = deep_merge(merged, data)
        return merged

    def get_loader_settings(self) -> LoaderSettings:
        """Get validated loader settings.

        Raises:
            pydantic.ValidationError: A scope holds an invalid value
        """
        section = self.get_merged_settings().get(SETTINGS_SECTION) or {}
        return LoaderSettings.model_validate(section)

    def set_loader_value(self, key: str, value: Any, scope: Scope = "local") -> None:
        """Set one loader option in a scope.

        Args:
            key: LoaderSettings field name
            value: New value (validated against LoaderSettings)
            scope: "user", "project", or "local"

        Raises:
            KeyError: Unknown option
            pydantic.ValidationError: Invalid value
        """
        if key not in LoaderSettings.model_fields:
            raise KeyError(key)

        # Validate (and coerce CLI strings) before touching the file
        value = getattr(LoaderSettings.model_validate({key: value}), key)

        path = self._scope_file(scope)
        settings = self._read_settings(path) or {}
        settings = deep_merge(settings, {SETTINGS_SECTION: {key: value}})
        self._write_settings(path, settings)
        logger.info(f"Set {scope} loader option {key} = {value!r}")

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Returns:
            Settings dict, or None if the file doesn't exist or is malformed
        """
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings file {path}: expected a mapping")
            return None
        return data

    def _write_settings(self, path: Path, settings: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(settings, f, default_flow_style=False, sort_keys=False)
