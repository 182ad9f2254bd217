import logging
import threading
from unittest.mock import MagicMock, patch

import pytest
import requests

from legal_clinic.adapters.beacon import ThreadBeacon
from legal_clinic.adapters.timer import ThreadingIntervalTimer
from legal_clinic.adapters.unload import UnloadHub
from legal_clinic.adapters.view_reporter import BackgroundViewReporter
from legal_clinic.exceptions import ApiError


# --- Beacon ---


def test_beacon_posts_empty_body_without_credentials():
    http = MagicMock()
    beacon = ThreadBeacon(timeout=2.0, session=http)

    beacon._post("http://api.test/api/content-views/5?timeSpent=47")

    http.post.assert_called_once_with(
        "http://api.test/api/content-views/5?timeSpent=47",
        data=b"",
        headers={"Content-Type": "application/json"},
        timeout=2.0,
    )


def test_beacon_send_runs_on_daemon_thread():
    beacon = ThreadBeacon(session=MagicMock())
    with patch("legal_clinic.adapters.beacon.threading.Thread") as thread_cls:
        beacon.send("http://x")

    thread_cls.assert_called_once_with(target=beacon._post, args=("http://x",), daemon=True)
    thread_cls.return_value.start.assert_called_once_with()


def test_beacon_failure_is_swallowed():
    http = MagicMock()
    http.post.side_effect = requests.ConnectionError("gone")
    ThreadBeacon(session=http)._post("http://x")


# --- View reporter ---


class FakeBlogApi:
    def __init__(self) -> None:
        self.calls: list[tuple[str, int | None]] = []
        self.error: Exception | None = None

    def track_view(self, content_id: str, time_spent: int | None = None) -> None:
        self.calls.append((content_id, time_spent))
        if self.error:
            raise self.error


def test_reporter_sends_in_submission_order():
    api = FakeBlogApi()
    reporter = BackgroundViewReporter(api)

    for t in (None, 30, 60, 75):
        reporter.report_view("5", t)
    reporter.shutdown(wait=True)

    assert api.calls == [("5", None), ("5", 30), ("5", 60), ("5", 75)]


def test_reporter_logs_failures(caplog):
    api = FakeBlogApi()
    api.error = ApiError("offline")
    reporter = BackgroundViewReporter(api)

    with caplog.at_level(logging.WARNING):
        reporter.report_view("5", 30).result(timeout=5)

    assert "Failed to report view of 5" in caplog.text
    reporter.shutdown()


# --- Unload hub ---


def test_unload_hub_fans_out_and_unsubscribes():
    hub = UnloadHub()
    first, second = MagicMock(), MagicMock()
    hub.subscribe(first)
    unsubscribe = hub.subscribe(second)

    unsubscribe()
    hub.fire()

    first.assert_called_once_with()
    second.assert_not_called()


def test_unload_hub_survives_failing_subscriber(caplog):
    hub = UnloadHub()
    after = MagicMock()
    hub.subscribe(MagicMock(side_effect=RuntimeError("boom")))
    hub.subscribe(after)

    with caplog.at_level(logging.ERROR):
        hub.fire()

    after.assert_called_once_with()
    assert "Unload subscriber failed" in caplog.text


def test_unload_hub_self_unsubscribe_during_fire():
    hub = UnloadHub()
    calls = []

    def once() -> None:
        calls.append(1)
        unsubscribe()

    unsubscribe = hub.subscribe(once)
    hub.fire()
    hub.fire()

    assert calls == [1]


def test_unload_hub_attaches_to_page():
    page = MagicMock()
    hub = UnloadHub()
    hub.attach(page)
    assert page.on_disconnect == hub.fire
    assert page.on_close == hub.fire
    assert page.on_connect == hub.resume


def test_unload_hub_resume_is_a_separate_channel():
    hub = UnloadHub()
    on_unload, on_resume = MagicMock(), MagicMock()
    hub.subscribe(on_unload)
    unsubscribe = hub.subscribe_resume(on_resume)

    # Flet passes the connect event to the handler
    hub.resume(MagicMock())
    on_resume.assert_called_once_with()
    on_unload.assert_not_called()

    unsubscribe()
    hub.resume()
    hub.fire()
    on_resume.assert_called_once_with()
    on_unload.assert_called_once_with()


# --- Interval timer ---


def test_interval_timer_ticks_until_cancelled():
    ticked = threading.Event()
    handle = ThreadingIntervalTimer().every(0.01, ticked.set)

    assert ticked.wait(timeout=2)
    handle.cancel()
    handle._thread.join(timeout=2)
    assert handle.is_running is False


@pytest.mark.parametrize("error", [RuntimeError("x"), ApiError("y")])
def test_interval_timer_keeps_running_after_callback_error(error):
    calls = []
    done = threading.Event()

    def callback() -> None:
        calls.append(1)
        if len(calls) >= 2:
            done.set()
        raise error

    handle = ThreadingIntervalTimer().every(0.01, callback)
    assert done.wait(timeout=2)
    handle.cancel()
