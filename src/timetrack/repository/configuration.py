# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timetrack import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            self._config = configuration.get_default_configuration()

        # Fill in settings added after the config file was written
        defaults = configuration.get_default_configuration()
        if "database_path" not in self._config:
            self._config["database_path"] = defaults["database_path"]
        if "fallback_width" not in self._config:
            self._config["fallback_width"] = defaults["fallback_width"]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def invalidate(self) -> None:
        """Forget the cached config so the next access re-reads the file."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        database_path: Optional[str] = None,
        remove_database_path: bool = False,
        fallback_width: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if database_path is not None:
            self.config["database_path"] = database_path
        if remove_database_path:
            self.config["database_path"] = None
        if fallback_width is not None:
            self.config["fallback_width"] = fallback_width


CONFIGURATION_REPO = ConfigurationRepository()
