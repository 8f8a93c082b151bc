# SPDX-License-Identifier: MIT

import contextvars
import logging
import threading
from types import TracebackType
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicRefresh:
    """
    Runs a callback every interval seconds on a background thread until stopped.

    Use as a context manager so the worker is torn down when the view exits.
    """

    def __init__(
        self, callback: Callable[[], None], interval: float, name: str = "refresh"
    ) -> None:
        if interval <= 0:
            raise ValueError("Refresh interval must be positive")
        self._callback = callback
        self._interval = interval
        self._name = name
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        # The worker sees the view state of the thread that started it
        context = contextvars.copy_context()
        self._thread = threading.Thread(
            target=context.run, args=(self._run,), name=self._name, daemon=True
        )
        self._thread.start()
        logger.debug("Started %s every %ss", self._name, self._interval)

    def request_stop(self) -> None:
        """Signal the worker to finish without waiting for it; safe from the callback."""
        self._stop_event.set()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.debug("Stopped %s", self._name)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until stop() is called; returns True if it was."""
        return self._stop_event.wait(timeout)

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                self._callback()
            except Exception:
                logger.exception("%s callback failed", self._name)

    def __enter__(self) -> "PeriodicRefresh":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.stop()
