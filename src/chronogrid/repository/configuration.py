# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from chronogrid import configuration
from chronogrid.model.calendar import Granularity


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
            raise ValueError()

        # Fill settings introduced after the file was first written
        for key, value in configuration.default_configuration().items():
            self._config.setdefault(key, value)  # type: ignore[misc]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_geometry(self) -> configuration.CalendarGeometry:
        return configuration.resolve_geometry(self.config)

    def update_config(
        self,
        dark_mode: Optional[bool] = None,
        default_granularity: Optional[Granularity] = None,
        show_header: Optional[bool] = None,
        refresh_seconds: Optional[int] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        geometry: Optional[dict[str, float]] = None,
    ) -> None:
        self.is_dirty = True

        if dark_mode is not None:
            self.config["dark_mode"] = dark_mode
        if default_granularity is not None:
            self.config["default_granularity"] = Granularity(default_granularity).value
        if show_header is not None:
            self.config["show_header"] = show_header
        if refresh_seconds is not None:
            self.config["refresh_seconds"] = refresh_seconds
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if geometry is not None:
            calendar = self.config.get("calendar") or configuration.default_geometry()
            for key, value in geometry.items():
                if key not in configuration.DEFAULT_CALENDAR_GEOMETRY:
                    raise KeyError(f"Unknown calendar setting: {key}")
                calendar[key] = value  # type: ignore[literal-required]
            self.config["calendar"] = calendar


CONFIGURATION_REPO = ConfigurationRepository()
