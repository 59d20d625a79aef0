"""Configuration management utilities."""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..core.constants import CONFIG_FILE_NAME
from ..models.config import TaskpadConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the user configuration file."""

    def __init__(self, data_dir: Path):
        """Initialize config manager."""
        self.data_dir = data_dir
        self.config_file = data_dir / CONFIG_FILE_NAME

    def get_config(self) -> Optional[TaskpadConfig]:
        """Load configuration, or None when missing or unreadable."""
        if not self.config_file.exists():
            return None
        try:
            return TaskpadConfig.model_validate_json(self.config_file.read_text())
        except (OSError, ValidationError) as e:
            logger.warning(f"Ignoring invalid config file {self.config_file}: {e}")
            return None

    def load_or_default(self) -> TaskpadConfig:
        """Load configuration, falling back to defaults."""
        return self.get_config() or TaskpadConfig()

    def save_config(self, config: TaskpadConfig) -> None:
        """Save configuration."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(config.model_dump_json(indent=2))

    def set_value(self, key: str, value: Any) -> TaskpadConfig:
        """Set one configuration value and save.

        Raises:
            KeyError: If key is not a configuration field
            ValueError: If value is not valid for key
        """
        if key not in TaskpadConfig.model_fields:
            raise KeyError(key)
        config = self.load_or_default()
        try:
            config = TaskpadConfig.model_validate({**config.model_dump(), key: value})
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value!r}") from e
        self.save_config(config)
        return config

    def reset(self) -> TaskpadConfig:
        """Reset configuration to defaults."""
        config = TaskpadConfig()
        self.save_config(config)
        return config
