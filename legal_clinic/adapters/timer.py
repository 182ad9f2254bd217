"""
Thread-backed interval timer.

Each ``every`` call starts a daemon thread that waits on an Event, so
cancelling wakes the thread immediately instead of after the next interval.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ThreadTimerHandle:
    def __init__(self, seconds: float, callback: Callable[[], None]) -> None:
        self._seconds = seconds
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._loop, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._stop_event.set()

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive() and not self._stop_event.is_set()

    def _loop(self) -> None:
        while not self._stop_event.wait(timeout=self._seconds):
            try:
                self._callback()
            except Exception:
                logger.exception("Error in interval timer callback")


class ThreadingIntervalTimer:
    def every(self, seconds: float, callback: Callable[[], None]) -> ThreadTimerHandle:
        handle = ThreadTimerHandle(seconds, callback)
        handle.start()
        return handle
