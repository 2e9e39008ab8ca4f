"""Configuration management for graph-permissions.

Handles loading and validation of YAML configuration files used by the
command line tools and by applications embedding the scope validator.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .logger import DEFAULT_LOG_DIR

DEFAULT_CONFIG_PATH = "~/.graph-permissions/config.yaml"

EXPORT_FORMATS = ("table", "json", "yaml", "csv", "markdown")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = ("true", "yes", "on", "1")
_FALSE_VALUES = ("false", "no", "off", "0")


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "INFO"
    log_dir: str = DEFAULT_LOG_DIR
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class ScopeConfig:
    """Configuration for requested scope validation."""

    strict: bool = False
    warn_on_review: bool = True


@dataclass
class ExportConfig:
    """Configuration for catalog listings and exports."""

    default_format: str = "table"


@dataclass
class GraphPermissionsConfig:
    """Top-level configuration for graph-permissions."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    scopes: ScopeConfig = field(default_factory=ScopeConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def _parse_bool(value: Any, key: str) -> bool:
    """Interpret a YAML boolean, including strings left by ${VAR} expansion.

    Raises:
        ValueError: If the value is not a recognizable boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
    raise ValueError(f"Invalid boolean for {key}: {value!r}")


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse a logging configuration dictionary.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=str(logging_dict.get("level", "INFO")).upper(),
        log_dir=logging_dict.get("log_dir", DEFAULT_LOG_DIR),
        file_logging=_parse_bool(logging_dict.get("file_logging", False), "logging.file_logging"),
        console_logging=_parse_bool(logging_dict.get("console_logging", True), "logging.console_logging"),
    )


def parse_scope_config(scope_dict: Dict[str, Any]) -> ScopeConfig:
    """Parse a scope validation configuration dictionary.

    Args:
        scope_dict: Scope configuration dictionary

    Returns:
        ScopeConfig instance
    """
    return ScopeConfig(
        strict=_parse_bool(scope_dict.get("strict", False), "scopes.strict"),
        warn_on_review=_parse_bool(scope_dict.get("warn_on_review", True), "scopes.warn_on_review"),
    )


def parse_export_config(export_dict: Dict[str, Any]) -> ExportConfig:
    """Parse an export configuration dictionary.

    Args:
        export_dict: Export configuration dictionary

    Returns:
        ExportConfig instance

    Raises:
        ValueError: If the default format is not a known export format
    """
    default_format = str(export_dict.get("default_format", "table")).lower()
    if default_format not in EXPORT_FORMATS:
        raise ValueError(
            f"Invalid export format: {default_format}. "
            f"Must be one of: {', '.join(EXPORT_FORMATS)}"
        )
    return ExportConfig(default_format=default_format)


def parse_config(config_dict: Dict[str, Any]) -> GraphPermissionsConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        GraphPermissionsConfig instance
    """
    return GraphPermissionsConfig(
        logging=parse_logging_config(config_dict.get("logging") or {}),
        scopes=parse_scope_config(config_dict.get("scopes") or {}),
        export=parse_export_config(config_dict.get("export") or {}),
    )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file, ``~`` is expanded

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        TypeError: If the config root is not a mapping
        yaml.YAMLError: If config file is invalid YAML
    """
    config_file = Path(config_path).expanduser()

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: str = DEFAULT_CONFIG_PATH) -> GraphPermissionsConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        GraphPermissionsConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    return parse_config(load_config(config_path))
