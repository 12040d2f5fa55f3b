"""Configuration loading and validation."""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from miniagent.config.schema import MiniAgentConfig

DEFAULT_CONFIG_PATH = Path.home() / ".miniagent" / "miniagent.yaml"


class ConfigError(Exception):
    """Configuration loading or validation error."""


def load_config(path: Optional[Path] = None) -> MiniAgentConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to config file. If None, tries default location.
              If file doesn't exist, returns default config.

    Returns:
        Validated configuration object

    Raises:
        ConfigError: If config file exists but is invalid
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH

    if not path.exists():
        return MiniAgentConfig()

    try:
        with open(path, "r") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config from {path}: {e}") from e

    if config_data is None:
        return MiniAgentConfig()

    if not isinstance(config_data, dict):
        raise ConfigError(f"Config root in {path} must be a mapping")

    try:
        return MiniAgentConfig(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e


def save_config(config: MiniAgentConfig, path: Optional[Union[str, Path]] = None) -> None:
    """Save configuration to a YAML file.

    Args:
        config: Configuration object to save
        path: Destination path (string or Path object). If None, uses default location.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    elif isinstance(path, str):
        path = Path(path)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
