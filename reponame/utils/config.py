"""
Configuration System for reponame.

This module provides a unified configuration interface backed by a single
JSON or YAML file, with environment variable overrides for the settings
that build tooling typically flips per invocation.
"""

import json
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CaseSensitivity,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    ENV_CASE_SENSITIVITY,
    ENV_CONFIG_FILE,
    ENV_SIBLING_LAYOUT,
    TRUE_VALUES,
)
from .logging import get_logger

logger = get_logger(__name__)


def parse_bool(value: Any, default: bool) -> bool:
    """
    Read a boolean setting from a config file.

    Strings follow the same rule as environment overrides, so a quoted
    ``"false"`` is False. None falls back to ``default``.
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)


@dataclass
class LayoutConfig:
    """Filesystem layout of external repositories."""

    sibling_repository_layout: bool = False


@dataclass
class PathConfig:
    """Path comparison configuration."""

    case_sensitivity: str = CaseSensitivity.AUTO.value


@dataclass
class RegistryConfig:
    """Canonical name registry configuration."""

    intern_names: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


class ReponameConfig:
    """
    Unified configuration manager for reponame.

    Reads every section from one configuration file. A missing file yields
    the defaults; an unreadable one is logged and also yields the defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses
                ``$REPONAME_CONFIG`` or the packaged default location.
        """
        self._explicit_file = config_file is not None or bool(os.getenv(ENV_CONFIG_FILE))
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.layout = self._create_layout_config()
        self.paths = self._create_path_config()
        self.registry = self._create_registry_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv(ENV_CONFIG_FILE)
        if env_file:
            return Path(env_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "reponame_config.yaml"
        json_config = config_dir / "reponame_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            if self._explicit_file:
                logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration from {self.config_file}: {e}")
            return {}

        if not isinstance(config_data, dict):
            logger.error(f"Configuration file {self.config_file} does not contain a mapping")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._config_data.get(name) or {}
        return section if isinstance(section, dict) else {}

    def _create_layout_config(self) -> LayoutConfig:
        """Create layout configuration from loaded data."""
        layout_data = self._section("layout")

        sibling = parse_bool(layout_data.get("sibling_repository_layout"), False)
        env_value = os.getenv(ENV_SIBLING_LAYOUT)
        if env_value is not None and env_value != "":
            sibling = parse_bool(env_value, sibling)

        return LayoutConfig(sibling_repository_layout=sibling)

    def _create_path_config(self) -> PathConfig:
        """Create path comparison configuration from loaded data."""
        path_data = self._section("paths")

        sensitivity = os.getenv(ENV_CASE_SENSITIVITY) or path_data.get(
            "case_sensitivity", CaseSensitivity.AUTO.value
        )
        sensitivity = str(sensitivity).lower()
        valid = {member.value for member in CaseSensitivity}
        if sensitivity not in valid:
            logger.warning(
                f"Unknown case_sensitivity '{sensitivity}', expected one of {sorted(valid)}; using 'auto'"
            )
            sensitivity = CaseSensitivity.AUTO.value

        return PathConfig(case_sensitivity=sensitivity)

    def _create_registry_config(self) -> RegistryConfig:
        """Create registry configuration from loaded data."""
        registry_data = self._section("registry")

        return RegistryConfig(
            intern_names=parse_bool(registry_data.get("intern_names"), True),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=log_data.get("level", DEFAULT_LOG_LEVEL),
            enable_file_logging=parse_bool(log_data.get("enable_file_logging"), False),
            log_file=log_data.get("log_file", DEFAULT_LOG_FILE),
        )

    def is_sibling_layout(self) -> bool:
        """Check if the sibling repository layout is the default."""
        return self.layout.sibling_repository_layout

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective configuration as plain data."""
        return {
            "version": "1.0",
            "description": "reponame configuration",
            "layout": {
                "sibling_repository_layout": self.layout.sibling_repository_layout,
            },
            "paths": {
                "case_sensitivity": self.paths.case_sensitivity,
            },
            "registry": {
                "intern_names": self.registry.intern_names,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = self.to_dict()

        try:
            with open(self.config_file, "w") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    yaml.safe_dump(config_data, f, sort_keys=False)
                else:
                    json.dump(config_data, f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[ReponameConfig] = None
_config_lock = threading.Lock()


def get_config() -> ReponameConfig:
    """Get the global configuration instance."""
    global _global_config
    config = _global_config
    if config is not None:
        return config
    with _config_lock:
        if _global_config is None:
            _global_config = ReponameConfig()
        return _global_config


def set_config(config: Optional[ReponameConfig]) -> None:
    """Set the global configuration instance. None reloads on next access."""
    global _global_config
    with _config_lock:
        _global_config = config


def load_config(config_file: str) -> ReponameConfig:
    """Load configuration from a specific file."""
    return ReponameConfig(config_file)
