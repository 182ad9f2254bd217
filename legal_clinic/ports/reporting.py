from collections.abc import Callable
from typing import Protocol


class ViewReporterPort(Protocol):
    """Normal request path for content view reports."""

    def report_view(self, content_id: str, time_spent: int | None = None) -> None:
        """Send a view report. ``time_spent`` is cumulative, not a delta."""
        ...


class BeaconPort(Protocol):
    """Best-effort, non-cancelable send with no response expected."""

    def send(self, url: str) -> None:
        ...


class UnloadHubPort(Protocol):
    """Fan-out for 'client is going away' (tab close, disconnect) and
    'client is back' (web reconnect)."""

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register an unload callback; returns a function that unregisters it."""
        ...

    def subscribe_resume(self, callback: Callable[[], None]) -> Callable[[], None]:
        ...
