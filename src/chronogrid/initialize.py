# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from chronogrid import configuration
from chronogrid.repository.configuration import CONFIGURATION_REPO
from chronogrid.view import state as view_state

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    view_state.set_dark_mode(config["dark_mode"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        logger.info("Writing default configuration to %s", configuration.APP_CONFIG_PATH)
        configuration.APP_CONFIG_PATH.write_text(
            dump(configuration.default_configuration(), Dumper=Dumper)
        )


def __ensure_data_files() -> None:
    if not configuration.DATA_TASKS_DIR.is_dir():
        configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)
