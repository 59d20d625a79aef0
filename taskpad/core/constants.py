"""Constants used throughout the taskpad application."""

from pathlib import Path


# Storage
DATA_DIR_NAME = ".taskpad"
DEFAULT_DATA_DIR = Path.home() / DATA_DIR_NAME
DATA_DIR_ENV_VAR = "TASKPAD_HOME"
TASKS_KEY = "tasks"
CONFIG_FILE_NAME = "config.json"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Display
MAX_TEXT_LENGTH = 50
