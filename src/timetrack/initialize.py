# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timetrack import configuration
from timetrack.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.load_path_configuration()
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    CONFIGURATION_REPO.invalidate()
    config = CONFIGURATION_REPO.get_config()
    configuration.apply_configuration(config)
    configuration.DATABASE_PATH.parent.mkdir(parents=True, exist_ok=True)

    logger.debug("config %s", configuration.APP_CONFIG_PATH)
    logger.debug("database %s", configuration.DATABASE_PATH)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
