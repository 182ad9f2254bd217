import logging
from collections.abc import Callable
from typing import Any

import flet as ft

logger = logging.getLogger(__name__)


class _Fanout:
    def __init__(self, label: str) -> None:
        self.label = label
        self.callbacks: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self.callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self.callbacks:
                self.callbacks.remove(callback)

        return unsubscribe

    def fire(self) -> None:
        # Copy: subscribers unsubscribe themselves while handling the signal
        for callback in list(self.callbacks):
            try:
                callback()
            except Exception:
                logger.exception("%s subscriber failed", self.label)


class UnloadHub:
    """Client lifecycle signals: going away (unload) and coming back (resume)."""

    def __init__(self) -> None:
        self._unload = _Fanout("Unload")
        self._resume = _Fanout("Resume")

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        return self._unload.subscribe(callback)

    def subscribe_resume(self, callback: Callable[[], None]) -> Callable[[], None]:
        return self._resume.subscribe(callback)

    def fire(self, _: Any = None) -> None:
        self._unload.fire()

    def resume(self, _: Any = None) -> None:
        self._resume.fire()

    def attach(self, page: ft.Page) -> None:
        """
        Unload on web disconnect (tab closed, network drop) and session close;
        resume when a dropped web client reconnects to the same session.
        """
        page.on_disconnect = self.fire
        page.on_close = self.fire
        page.on_connect = self.resume
