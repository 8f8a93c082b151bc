# SPDX-License-Identifier: MIT

import itertools
import logging
import threading
from typing import Callable, Optional, Protocol

from chronogrid.model.task import Task

logger = logging.getLogger(__name__)


class TaskGateway(Protocol):
    def list_tasks(self) -> list[Task]: ...

    def optimize_schedule(self) -> list[Task]: ...


class TaskSnapshot:
    """
    Holds the task list the calendar renders from.

    Every completed response replaces the snapshot wholesale, in the order the
    responses complete, so the last completed response wins even when it
    answers an older request. Requests are numbered for the debug log only.
    Failures keep the previous snapshot and are recorded in last_error.
    """

    def __init__(self, gateway: TaskGateway) -> None:
        self._gateway = gateway
        self._tasks: list[Task] = []
        self._lock = threading.Lock()
        self._tickets = itertools.count(1)
        self.applied_ticket = 0
        self.last_error: Optional[Exception] = None

    @property
    def tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def refresh(self) -> bool:
        return self._load(self._gateway.list_tasks, "refresh")

    def optimize(self) -> bool:
        return self._load(self._gateway.optimize_schedule, "optimize")

    def issue_ticket(self) -> int:
        with self._lock:
            return next(self._tickets)

    def apply(self, ticket: int, tasks: list[Task]) -> None:
        with self._lock:
            if ticket < self.applied_ticket:
                logger.debug(
                    "Response %d completed after response %d", ticket, self.applied_ticket
                )
            self.applied_ticket = ticket
            self._tasks = list(tasks)
            self.last_error = None

    def _load(self, request: Callable[[], list[Task]], name: str) -> bool:
        ticket = self.issue_ticket()
        try:
            tasks = request()
        except Exception as e:
            logger.exception("Task %s failed; keeping the previous snapshot", name)
            self.last_error = e
            return False
        self.apply(ticket, tasks)
        return True
