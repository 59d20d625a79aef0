"""Configuration models for taskpad."""

import logging

from pydantic import BaseModel, field_validator

from .task import Category, Priority

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TaskpadConfig(BaseModel):
    """User configuration stored in the data directory."""

    default_category: Category = Category.WORK
    default_priority: Priority = Priority.MEDIUM
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)
