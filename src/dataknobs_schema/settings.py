"""Process-wide settings that tune how fields validate and report.

Settings can come from a dictionary, a YAML or JSON file, or environment
variables named ``DATAKNOBS_SCHEMA_<KEY>``:

    ```python
    from dataknobs_schema import configure, get_settings

    configure(bool_is_number=True)
    get_settings().get_setting("max_value_repr")  # 80
    ```
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    # Whether True/False count as numbers for numeric fields
    "bool_is_number": False,
    # Values quoted in error messages are shortened to this many characters
    "max_value_repr": 80,
}


class SchemaSettings:
    """Holds the validation settings.

    Only the keys listed in ``DEFAULT_SETTINGS`` are accepted; anything else
    raises ConfigurationError so that typos surface immediately.
    """

    ENV_PREFIX = "DATAKNOBS_SCHEMA_"

    def __init__(self, settings: dict[str, Any] | None = None) -> None:
        self._settings: dict[str, Any] = dict(DEFAULT_SETTINGS)
        if settings:
            self.load_settings(settings)

    @classmethod
    def from_file(cls, path: str | Path) -> SchemaSettings:
        """Create settings from a YAML or JSON file.

        Args:
            path: Path to the settings file

        Returns:
            SchemaSettings instance
        """
        instance = cls()
        instance.load_file(path)
        return instance

    def load_file(self, path: str | Path) -> None:
        """Load settings from a YAML or JSON file.

        Args:
            path: Path to the settings file
        """
        path = Path(path).resolve()

        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {path}", context={"path": str(path)}
            )

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported settings format: {suffix}", context={"path": str(path)}
                )

        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping: {path}", context={"path": str(path)}
            )
        logger.debug("Loading schema settings from %s", path)
        self.load_settings(data)

    def load_settings(self, settings: dict[str, Any]) -> None:
        """Load settings from a dictionary, replacing current values.

        Args:
            settings: Settings dictionary
        """
        for key, value in settings.items():
            self.set_setting(key, value)

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if not found

        Returns:
            Setting value or default
        """
        return self._settings.get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        """Set a setting value.

        Args:
            key: Setting key
            value: Setting value
        """
        if key not in DEFAULT_SETTINGS:
            raise ConfigurationError(
                f"Unknown schema setting: {key}",
                context={"key": key, "available_keys": sorted(DEFAULT_SETTINGS)},
            )
        expected = type(DEFAULT_SETTINGS[key])
        # bool is an int subclass, so compare exact types
        if type(value) is not expected:
            raise ConfigurationError(
                f"Schema setting {key} must be {expected.__name__}, got {value!r}",
                context={"key": key, "value": value, "expected_type": expected.__name__},
            )
        self._settings[key] = value

    def apply_environment(self, environ: dict[str, str] | None = None) -> None:
        """Override settings from ``DATAKNOBS_SCHEMA_<KEY>`` variables.

        Variables that name no known setting are skipped. A known setting
        with a value of the wrong type raises ConfigurationError.

        Args:
            environ: Mapping to read instead of ``os.environ``
        """
        environ = os.environ if environ is None else environ
        for name, raw in environ.items():
            if not name.startswith(self.ENV_PREFIX):
                continue
            key = name[len(self.ENV_PREFIX) :].lower()
            if key not in DEFAULT_SETTINGS:
                logger.debug("Skipping unknown environment setting %s", name)
                continue
            value = self._parse_value(raw)
            logger.debug("Environment override %s=%r", key, value)
            self.set_setting(key, value)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the current settings."""
        return dict(self._settings)

    @property
    def bool_is_number(self) -> bool:
        """Whether True/False are accepted by numeric fields."""
        return bool(self._settings["bool_is_number"])

    @property
    def max_value_repr(self) -> int:
        """Length limit for values quoted in error messages."""
        return int(self._settings["max_value_repr"])

    def _parse_value(self, value: str) -> Any:
        """Parse an environment variable value to appropriate type.

        Args:
            value: String value from environment

        Returns:
            Parsed value (bool, int, float, or original string)
        """
        if value.lower() in ["true", "yes"]:
            return True
        elif value.lower() in ["false", "no"]:
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value


_settings = SchemaSettings()


def get_settings() -> SchemaSettings:
    """Return the process-wide settings instance."""
    return _settings


def configure(**settings: Any) -> SchemaSettings:
    """Update the process-wide settings.

    Settings must be configured before fields are shared between threads.
    """
    _settings.load_settings(settings)
    return _settings


def reset_settings() -> SchemaSettings:
    """Restore every setting to its default value."""
    _settings.load_settings(DEFAULT_SETTINGS)
    return _settings


__all__ = [
    "DEFAULT_SETTINGS",
    "SchemaSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
