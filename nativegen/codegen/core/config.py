"""
Configuration management for code generation.

Handles converting backend settings to and from plain dictionaries and
persisting them in a JSON settings store keyed per backend.
"""

import dataclasses
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ...logging_config import get_logger
from ...utils import JSONLoaderError, load_json_object
from .options import OptionValueError

logger = get_logger(__name__)

SETTINGS_KEY_PREFIX = "Pages.GenerateCode."
SETTINGS_ENV_VAR = "NATIVEGEN_SETTINGS"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


def settings_key(language_name: str) -> str:
    """Persistence key of a backend's settings."""
    return f"{SETTINGS_KEY_PREFIX}{language_name}"


def settings_to_dict(settings: Any) -> Dict[str, Any]:
    """Convert a settings dataclass into a JSON-compatible dictionary."""
    return dataclasses.asdict(settings)


def settings_from_dict(settings_class: type, data: Mapping[str, Any]) -> Any:
    """
    Build settings from a dictionary, starting from defaults.

    Unknown keys are dropped so settings written by another version of a
    backend still load.

    Args:
        settings_class: Settings dataclass of the backend
        data: Stored values

    Returns:
        Settings instance
    """
    known_fields = {f.name: f for f in dataclasses.fields(settings_class)}
    defaults = settings_class()
    values = {}

    for key, value in data.items():
        if key not in known_fields:
            logger.debug("Dropping unknown setting %s for %s", key, settings_class.__name__)
            continue

        default = getattr(defaults, key)
        if isinstance(default, bool) and not isinstance(value, bool):
            raise ConfigError(f"Setting '{key}' must be true or false, got {value!r}")
        if isinstance(default, str) and not isinstance(value, str):
            raise ConfigError(f"Setting '{key}' must be a string, got {value!r}")

        values[key] = value

    return dataclasses.replace(defaults, **values)


def _load_json_object(path: Path, description: str) -> Dict[str, Any]:
    try:
        return load_json_object(path, description)
    except JSONLoaderError as e:
        raise ConfigError(str(e)) from e


def _checked(spec, settings: Any) -> Any:
    try:
        return spec.editor().validate(settings)
    except OptionValueError as e:
        raise ConfigError(f"Invalid {spec.name} settings: {e}") from e


def default_settings_path() -> Path:
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "nativegen" / "settings.json"


class SettingsStore:
    """Persists backend settings in a single JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize settings store.

        Args:
            path: JSON file to use; defaults to the per-user settings file
        """
        self.path = Path(path) if path else default_settings_path()

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        return _load_json_object(self.path, "settings store")

    def load(self, spec) -> Any:
        """
        Load settings for a backend, falling back to its defaults.

        Args:
            spec: LanguageSpec of the backend

        Returns:
            Settings instance
        """
        stored = self._read_all().get(spec.settings_key)
        if stored is None:
            return spec.default_settings()
        if not isinstance(stored, dict):
            raise ConfigError(f"Stored settings for {spec.name} must be an object")
        return _checked(spec, settings_from_dict(spec.settings_class, stored))

    def save(self, spec, settings: Any) -> None:
        """Store settings for a backend, keeping other backends' entries."""
        data = self._read_all()
        data[spec.settings_key] = settings_to_dict(settings)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {self.path}: {str(e)}") from e

        logger.info("Saved %s settings to %s", spec.name, self.path)

    def reset(self, spec) -> None:
        """Remove the stored settings of a backend."""
        data = self._read_all()
        if data.pop(spec.settings_key, None) is not None:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)


def load_settings(
    spec,
    overrides: Optional[Mapping[str, Any]] = None,
    settings_file: Optional[Union[str, Path]] = None,
) -> Any:
    """
    Convenience function to build settings for a backend.

    Values are merged in order: defaults, settings file, overrides.

    Args:
        spec: LanguageSpec of the backend
        overrides: Individual field overrides
        settings_file: JSON file with a flat settings object

    Returns:
        Settings instance
    """
    merged: Dict[str, Any] = {}

    if settings_file:
        merged.update(_load_json_object(Path(settings_file), "settings file"))

    if overrides:
        merged.update(overrides)

    return _checked(spec, settings_from_dict(spec.settings_class, merged))
