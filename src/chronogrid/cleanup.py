# SPDX-License-Identifier: MIT

import atexit

from chronogrid.repository.configuration import CONFIGURATION_REPO
from chronogrid.repository.task import TASK_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    TASK_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
