"""Configuration loader."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..models import UserPreferences
from .models import ConfigModel

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "feedrank"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / "config.yaml"
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, or defaults when no config file exists yet."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                logger.debug("No config at %s, using defaults", self.config_path)
                self._config = ConfigModel()
        return self._config

    @property
    def preferences_path(self) -> Path:
        """Get viewer preferences file path."""
        path = Path(self.config.preferences_file).expanduser()
        if not path.is_absolute():
            path = self.config_path.parent / path
        return path

    def get_source_config(self) -> Dict[str, Any]:
        """Get post source configuration dict."""
        source_config = self.config.source.model_dump()

        # Handle API token from environment if specified
        if source_config.get("api_token_env"):
            token = os.environ.get(source_config["api_token_env"])
            if token:
                source_config["api_token"] = token

        return source_config


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)


def load_preferences(preferences_path: Path) -> UserPreferences:
    """Load viewer preferences from YAML file."""
    if not preferences_path.exists():
        raise FileNotFoundError(f"Preferences file not found: {preferences_path}")

    try:
        with open(preferences_path) as f:
            data = yaml.safe_load(f)

        return UserPreferences.model_validate(data or {})
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in preferences file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid preferences: {e}")


def save_preferences(preferences: UserPreferences, preferences_path: Path) -> None:
    """Save viewer preferences to YAML file."""
    preferences_path.parent.mkdir(parents=True, exist_ok=True)

    with open(preferences_path, "w") as f:
        yaml.dump(preferences.to_api(), f, default_flow_style=False, sort_keys=False)
