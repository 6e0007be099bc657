"""Triangle Path Configuration

Configuration loading with environment variable support and sensible defaults.

Environment Variables:
    TRIANGLE_PATH_CONFIG_PATH: Path to config file (default: triangle-path.yaml in base dir)
    TRIANGLE_PATH_INPUT: Override input triangle file from config
    TRIANGLE_PATH_LOG_LEVEL: Override logging level from config

Configuration Schema:
    input:
        path: str - Triangle file to solve (default: "p067_triangle.txt")
    logging:
        level: str - Logging level (default: "WARNING")
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE = "triangle-path.yaml"

# Triangle file published with Project Euler Problem 67
DEFAULT_INPUT_PATH = "p067_triangle.txt"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""
    pass


# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "input": {
        "path": DEFAULT_INPUT_PATH,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge override dict into base dict.

    Args:
        base: Base dictionary (defaults)
        override: Override dictionary (user config)

    Returns:
        Merged dictionary with override values taking precedence
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _resolve_path(path: Optional[str], base_dir: Path) -> Optional[Path]:
    """Resolve a path, making relative paths absolute from base_dir."""
    if path is None:
        return None

    path_obj = Path(path)
    if path_obj.is_absolute():
        return path_obj
    return (base_dir / path_obj).resolve()


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")

    # An empty section (e.g. a bare "input:") means "use the defaults"
    for section in DEFAULT_CONFIG:
        if section not in data:
            continue
        if data[section] is None:
            data[section] = {}
        elif not isinstance(data[section], dict):
            raise ConfigurationError(
                f"Config section '{section}' must be a mapping: {path}"
            )
    return data


def load_config(
    config_path: Optional[str] = None,
    base_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Load configuration from YAML file with environment variable overrides.

    Configuration Loading Order (later overrides earlier):
    1. Default values (DEFAULT_CONFIG)
    2. Config file (from config_path or TRIANGLE_PATH_CONFIG_PATH, else
       triangle-path.yaml in base_dir if present)
    3. Environment variable overrides (TRIANGLE_PATH_INPUT, TRIANGLE_PATH_LOG_LEVEL)

    Args:
        config_path: Explicit config file path (overrides TRIANGLE_PATH_CONFIG_PATH)
        base_dir: Directory for relative path resolution (default: cwd)

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigurationError: If an explicit config file is invalid YAML
    """
    if base_dir is None:
        base_dir = Path.cwd()

    config = copy.deepcopy(DEFAULT_CONFIG)

    file_path = config_path or os.environ.get("TRIANGLE_PATH_CONFIG_PATH")

    if file_path:
        resolved_path = _resolve_path(file_path, base_dir)
        if resolved_path and resolved_path.exists():
            try:
                config = _deep_merge(config, _read_yaml(resolved_path))
                logger.info(f"Loaded configuration from: {resolved_path}")
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in config file: {e}")
            except IOError as e:
                raise ConfigurationError(f"Cannot read config file: {e}")
        else:
            logger.warning(f"Config file not found (using defaults): {file_path}")
    else:
        default_config_path = base_dir / CONFIG_FILE
        if default_config_path.exists():
            try:
                config = _deep_merge(config, _read_yaml(default_config_path))
                logger.info(f"Loaded configuration from: {default_config_path}")
            except (yaml.YAMLError, ConfigurationError) as e:
                logger.warning(f"Invalid default config (ignoring): {e}")
            except IOError as e:
                logger.warning(f"Cannot read default config (ignoring): {e}")
        else:
            logger.debug("No config file found, using defaults")

    input_override = os.environ.get("TRIANGLE_PATH_INPUT")
    if input_override:
        config.setdefault("input", {})["path"] = input_override
        logger.info(f"Input path override from env: {input_override}")

    level_override = os.environ.get("TRIANGLE_PATH_LOG_LEVEL")
    if level_override:
        config.setdefault("logging", {})["level"] = level_override.upper()

    return config


def get_input_path(config: Dict[str, Any], base_dir: Optional[Path] = None) -> Path:
    """
    Get the triangle input file from config or default.

    Args:
        config: Configuration dictionary from load_config()
        base_dir: Directory relative paths are resolved against (default: cwd)

    Returns:
        Path to the triangle file
    """
    if base_dir is None:
        base_dir = Path.cwd()

    path_str = config.get("input", {}).get("path") or DEFAULT_INPUT_PATH
    return _resolve_path(path_str, base_dir)


def get_log_level(config: Dict[str, Any]) -> int:
    """Numeric logging level from config, WARNING if unrecognized."""
    name = str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
