# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "timetrack"

# Overrides the config directory, and keeps the database beside the config
CONFIG_DIR_ENV = "TIMETRACK_CONFIG_DIR"

DEFAULT_FALLBACK_WIDTH = 80
DATABASE_FILENAME = "database.json"

# These will be set dynamically by load_path_configuration()
CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATABASE_PATH: Path = DATA_PATH / DATABASE_FILENAME
FALLBACK_WIDTH: int = DEFAULT_FALLBACK_WIDTH


class Configuration(TypedDict):
    database_path: Optional[str]
    fallback_width: int


def get_default_configuration() -> Configuration:
    return {
        "database_path": None,
        "fallback_width": DEFAULT_FALLBACK_WIDTH,
    }


def load_path_configuration() -> None:
    """
    Resolve the config and data directories.

    Must run before the configuration repository reads the config file.
    """
    global CONFIG_PATH, APP_CONFIG_PATH, DATA_PATH, DATABASE_PATH

    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        CONFIG_PATH = Path(override)
        DATA_PATH = CONFIG_PATH
    else:
        CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
        DATA_PATH = platformdirs.user_data_path(APP_NAME)

    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
    DATABASE_PATH = DATA_PATH / DATABASE_FILENAME


def apply_configuration(config: Configuration) -> None:
    """Point the data paths and rendering defaults at the loaded config."""
    global DATABASE_PATH, FALLBACK_WIDTH

    if config["database_path"] is not None:
        DATABASE_PATH = Path(config["database_path"]).expanduser()
    else:
        DATABASE_PATH = DATA_PATH / DATABASE_FILENAME

    FALLBACK_WIDTH = config["fallback_width"]
