"""Shared fakes for the session, engagement and API tests."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, start: float = 0.0, now: datetime | None = None):
        self.t = start
        self._now = now or datetime(2026, 1, 14, 12, 0, 0, tzinfo=UTC)

    def monotonic(self) -> float:
        return self.t

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> None:
        self.t += seconds


class FakeAuthApi:
    """Returns a canned payload, or raises the configured error."""

    def __init__(self, payload: Any = None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    def login(self, email: str, password: str) -> Any:
        self.calls.append(("login", (email, password)))
        if self.error:
            raise self.error
        return self.payload

    def register(self, user_data: dict[str, Any]) -> Any:
        self.calls.append(("register", user_data))
        if self.error:
            raise self.error
        return self.payload


class FakeUnloadHub:
    """Unload and resume fan-out fired by hand."""

    def __init__(self) -> None:
        self.callbacks: list[Any] = []
        self.resume_callbacks: list[Any] = []

    @staticmethod
    def _add(callbacks: list[Any], callback: Any) -> Any:
        callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def subscribe(self, callback: Any) -> Any:
        return self._add(self.callbacks, callback)

    def subscribe_resume(self, callback: Any) -> Any:
        return self._add(self.resume_callbacks, callback)

    def fire(self) -> None:
        for callback in list(self.callbacks):
            callback()

    def resume(self) -> None:
        for callback in list(self.resume_callbacks):
            callback()


class ManualHandle:
    def __init__(self, seconds: float, callback: Callable[[], None]) -> None:
        self.seconds = seconds
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimer:
    """Records armed timers; tests fire them by hand."""

    def __init__(self) -> None:
        self.handles: list[ManualHandle] = []

    def every(self, seconds: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(seconds, callback)
        self.handles.append(handle)
        return handle

    def tick(self) -> None:
        for handle in self.handles:
            if not handle.cancelled:
                handle.callback()


class RecordingReporter:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, int | None]] = []
        self.error = error

    def report_view(self, content_id: str, time_spent: int | None = None) -> None:
        self.calls.append((content_id, time_spent))
        if self.error:
            raise self.error


class RecordingBeacon:
    def __init__(self) -> None:
        self.urls: list[str] = []

    def send(self, url: str) -> None:
        self.urls.append(url)


def auth_payload(role: str = "USER", token: str = "tok-123", user_id: int = 7) -> dict[str, Any]:
    return {
        "token": token,
        "user": {
            "id": user_id,
            "firstName": "Amina",
            "lastName": "Nakato",
            "email": "amina@example.com",
            "role": role,
        },
    }
