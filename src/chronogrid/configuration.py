# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "chronogrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOG_PATH = platformdirs.user_log_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"


class CalendarGeometry(TypedDict):
    """Named layout constants for the calendar bars and the summary pie chart.

    reference_day_minutes: length of the workday a single-day bar is sized against
    min_bar_percent: narrowest width a single-day bar is drawn at
    max_visible_bars: bars drawn per cell before the "+N" indicator takes over
    bar_base_offset: vertical offset of the first bar slot
    bar_height: vertical distance between bar slots
    pie_radius, pie_center_x, pie_center_y: pie chart circle
    """

    reference_day_minutes: int
    min_bar_percent: float
    max_visible_bars: int
    bar_base_offset: int
    bar_height: int
    pie_radius: float
    pie_center_x: float
    pie_center_y: float


DEFAULT_CALENDAR_GEOMETRY: CalendarGeometry = {
    "reference_day_minutes": 12 * 60,
    "min_bar_percent": 20.0,
    "max_visible_bars": 4,
    "bar_base_offset": 20,
    "bar_height": 16,
    "pie_radius": 80.0,
    "pie_center_x": 100.0,
    "pie_center_y": 100.0,
}


class Configuration(TypedDict):
    data_path: Optional[str]
    dark_mode: bool
    default_granularity: str
    show_header: bool
    refresh_seconds: int
    calendar: NotRequired[CalendarGeometry]


def default_geometry() -> CalendarGeometry:
    return DEFAULT_CALENDAR_GEOMETRY.copy()


def default_configuration() -> Configuration:
    return {
        "data_path": None,
        "dark_mode": False,
        "default_granularity": "month",
        "show_header": True,
        "refresh_seconds": 5,
        "calendar": default_geometry(),
    }


def resolve_geometry(config: Configuration) -> CalendarGeometry:
    """Overlay configured geometry values on top of the defaults, keeping their types."""
    geometry = default_geometry()
    overrides = config.get("calendar")
    if overrides:
        for key, value in overrides.items():
            if key in geometry and value is not None:
                default_type = type(DEFAULT_CALENDAR_GEOMETRY[key])  # type: ignore[literal-required]
                geometry[key] = default_type(value)  # type: ignore[literal-required]
    return geometry


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the task
    repository is used.
    """
    global DATA_PATH, DATA_TASKS_DIR

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_TASKS_DIR = DATA_PATH / "tasks"
