# app_config.py
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

APP_NAME = "tasklist"


def default_app_dir() -> Path:
    """Per-user application directory, e.g. ~/.config/tasklist on Linux."""
    return Path(click.get_app_dir(APP_NAME))


def default_config_path() -> Path:
    return default_app_dir() / "config.yaml"


class AppConfig(BaseModel):
    """User settings for tasklist."""
    data_dir: str = Field(default_factory=lambda: str(default_app_dir()),
                          description="Directory holding tasks.json")
    history_file: Optional[str] = Field(default=None,
                                        description="Prompt history file, defaults to <data_dir>/history.txt")
    log_level: str = Field(default="WARNING", description="Logging level name")
    date_format: str = Field(default="%b %d, %Y", description="strftime format for due dates")

    def history_path(self) -> Path:
        if self.history_file:
            return Path(self.history_file).expanduser()
        return Path(self.data_dir).expanduser() / "history.txt"


def load_app_config(config_path: Optional[str] = None) -> AppConfig:
    """Load settings from a YAML file

    Args:
        config_path: Path to the YAML file, defaults to the per-user config

    Returns:
        AppConfig built from the file. Defaults are used when the file is
        missing or invalid.
    """
    path = Path(config_path) if config_path else default_config_path()

    if not path.exists():
        logger.debug(f"Config not found: {path}, using defaults")
        return AppConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

        return AppConfig(**data)

    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        logger.error(f"Failed to load config {path}: {e}")
        return AppConfig()


def save_app_config(config: AppConfig, config_path: Optional[str] = None) -> bool:
    """Save settings to a YAML file

    Args:
        config: Settings to write
        config_path: Target file, defaults to the per-user config

    Returns:
        True if saved successfully, False otherwise
    """
    path = Path(config_path) if config_path else default_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        data: Dict[str, Any] = config.model_dump(exclude_none=True)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, indent=2)

        logger.info(f"Saved config: {path}")
        return True

    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to save config {path}: {e}")
        return False
