"""Konfigurations-Management für wp-versioning.

Lädt Konfiguration aus YAML-Datei mit Fallback auf Default-Werte.
"""

import copy
from pathlib import Path
from typing import Any, Optional

import yaml


class Config:
    """Zentrale Konfigurations-Klasse.

    Lädt Konfiguration aus versioning.yaml oder verwendet Defaults.

    Example:
        >>> config = Config()
        >>> print(config.get("output.metadata_file"))
        ./metadata.json
        >>> print(config.input.default_index_file)
        style.css
    """

    DEFAULT_CONFIG = {
        "input": {"default_index_file": "style.css", "manifest_path": "./package.json"},
        "output": {"metadata_file": "./metadata.json", "output_name": "version", "json_indent": 2},
        "logging": {"level": "INFO", "file": None},
    }

    def __init__(self, config_path: Path = Path("versioning.yaml")):
        """Initialisiert Konfiguration.

        Args:
            config_path: Pfad zur YAML-Konfigurationsdatei (Default: versioning.yaml).
        """
        self._config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                user_config = yaml.safe_load(f) or {}
                self._merge_config(user_config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merged User-Config mit Defaults (Deep Merge)."""

        def deep_merge(base: dict, override: dict) -> dict:
            result = base.copy()
            for key, value in override.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = deep_merge(result[key], value)
                else:
                    result[key] = value
            return result

        self._config = deep_merge(self._config, user_config)

    def get(self, key: str, default: Any = None) -> Any:
        """Holt Konfigurations-Wert mit Dot-Notation.

        Args:
            key: Konfigurations-Key in Dot-Notation (z.B. "output.metadata_file").
            default: Rückgabewert falls Key nicht existiert.

        Returns:
            Konfigurations-Wert oder default.

        Example:
            >>> config = Config()
            >>> config.get("input.manifest_path")
            './package.json'
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def input(self) -> "InputConfig":
        """Zugriff auf Eingabe-Konfiguration."""
        return InputConfig(self._config["input"])

    @property
    def output(self) -> "OutputConfig":
        """Zugriff auf Ausgabe-Konfiguration."""
        return OutputConfig(self._config["output"])

    @property
    def logging(self) -> "LoggingConfig":
        """Zugriff auf Logging-Konfiguration."""
        return LoggingConfig(self._config["logging"])


class InputConfig:
    """Helper-Klasse für Eingabe-Pfade."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def default_index_file(self) -> str:
        return str(self._config["default_index_file"])

    @property
    def manifest_path(self) -> str:
        return str(self._config["manifest_path"])


class OutputConfig:
    """Helper-Klasse für Ausgabe-Parameter."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def metadata_file(self) -> Path:
        return Path(self._config["metadata_file"])

    @property
    def output_name(self) -> str:
        return str(self._config["output_name"])

    @property
    def json_indent(self) -> int:
        return int(self._config["json_indent"])


class LoggingConfig:
    """Helper-Klasse für Logging-Parameter."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def level(self) -> str:
        return str(self._config["level"])

    @property
    def file(self) -> Optional[Path]:
        value = self._config.get("file")
        return Path(value) if value else None


# Globale Config-Instanz
_global_config: Config = None


def get_config() -> Config:
    """Holt globale Konfigurations-Instanz (Singleton).

    Returns:
        Config-Instanz.
    """
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def set_config(config: Config) -> None:
    """Ersetzt die globale Konfigurations-Instanz (z.B. nach --config)."""
    global _global_config
    _global_config = config
