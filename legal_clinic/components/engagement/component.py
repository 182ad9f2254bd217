"""
Engagement component - attention time on a single content item.

State machine: IDLE -> TRACKING -> IDLE.

- start: record start time, send the initial view report, arm the periodic
  timer and listen for unload.
- tick: report the cumulative elapsed time once it reaches the minimum.
- unload: one last report through the beacon; no retry, no confirmation.
  The record is kept aside so a web client that reconnects to the same
  session picks up where it left off (no second view report).
- stop: one last report through the normal path.

Invariants:
- Reports carry the full elapsed time, never a delta, so a repeated or
  reordered report cannot double count.
- Nothing is reported for less than the minimum duration.
- Exactly one record is tracked at a time; switching content ends the old
  record (terminal report included) before the new one starts.
- Report failures are logged and never propagate.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable

from legal_clinic.exceptions import ApiError

from .models import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_MIN_REPORT_SECONDS,
    EngagementRecord,
    ReportKind,
    TrackerState,
)
from .ports import (
    BeaconPort,
    ClockPort,
    IntervalTimerPort,
    TimerHandle,
    UnloadHubPort,
    ViewReporterPort,
)

logger = logging.getLogger(__name__)


# --- Pure Functions ---


def elapsed_seconds(started_at: float, now: float) -> int:
    """Whole seconds between two monotonic readings, floored, never negative."""
    return max(0, math.floor(now - started_at))


def is_reportable(elapsed: int, min_seconds: int = DEFAULT_MIN_REPORT_SECONDS) -> bool:
    return elapsed >= min_seconds


# --- Tracker ---


class EngagementTracker:
    def __init__(
        self,
        reporter: ViewReporterPort,
        beacon: BeaconPort,
        timer: IntervalTimerPort,
        clock: ClockPort,
        unload_hub: UnloadHubPort,
        beacon_url: Callable[[str, int], str],
        interval_seconds: int = DEFAULT_INTERVAL_SECONDS,
        min_report_seconds: int = DEFAULT_MIN_REPORT_SECONDS,
    ) -> None:
        self.reporter = reporter
        self.beacon = beacon
        self.timer = timer
        self.clock = clock
        self.unload_hub = unload_hub
        self.beacon_url = beacon_url
        self.interval_seconds = interval_seconds
        self.min_report_seconds = min_report_seconds

        self._lock = threading.Lock()
        self._record: EngagementRecord | None = None
        self._timer_handle: TimerHandle | None = None
        self._unsubscribe_unload: Callable[[], None] | None = None
        self._suspended: tuple[str, int] | None = None
        self._unsubscribe_resume: Callable[[], None] | None = None

    @property
    def state(self) -> TrackerState:
        return TrackerState.TRACKING if self._record else TrackerState.IDLE

    @property
    def record(self) -> EngagementRecord | None:
        return self._record

    def start(self, content_id: str | None, enabled: bool = True) -> bool:
        """
        Begin tracking ``content_id``.

        Returns False (and does nothing) when tracking is disabled or no id
        is given. Tracking a different id ends the current record first.
        """
        if not enabled or not content_id:
            return False

        content_id = str(content_id)
        with self._lock:
            if self._record and self._record.content_id == content_id:
                return True
            if self._record:
                self._finish(ReportKind.FINAL)
            self._drop_suspended()

            self._record = EngagementRecord(
                content_id=content_id, started_at=self.clock.monotonic()
            )
            self._send(content_id, None, ReportKind.VIEW)
            self._record.reported = True

            self._timer_handle = self.timer.every(self.interval_seconds, self._on_tick)
            self._unsubscribe_unload = self.unload_hub.subscribe(self._on_unload)
            logger.debug("Tracking started for %s", content_id)
            return True

    def retarget(self, content_id: str | None, enabled: bool = True) -> bool:
        """End the current record (terminal report) then track ``content_id``."""
        self.stop()
        return self.start(content_id, enabled)

    def stop(self) -> int | None:
        """
        End tracking because the view was torn down inside the app.

        Returns the elapsed seconds sent in the final report, or None when
        nothing was reported.
        """
        with self._lock:
            self._drop_suspended()
            return self._finish(ReportKind.FINAL)

    # --- Timer / unload callbacks ---

    def _on_tick(self) -> None:
        with self._lock:
            record = self._record
            if record is None:
                return
            elapsed = elapsed_seconds(record.started_at, self.clock.monotonic())
            if is_reportable(elapsed, self.min_report_seconds):
                self._send(record.content_id, elapsed, ReportKind.PERIODIC)
                record.cumulative_seconds = elapsed

    def _on_unload(self) -> None:
        with self._lock:
            record = self._record
            if record is None:
                return
            elapsed = elapsed_seconds(record.started_at, self.clock.monotonic())
            self._finish(ReportKind.BEACON)
            self._suspended = (record.content_id, elapsed)
            self._unsubscribe_resume = self.unload_hub.subscribe_resume(self._on_resume)

    def _on_resume(self) -> None:
        with self._lock:
            suspended = self._suspended
            self._drop_suspended()
            if suspended is None or self._record is not None:
                return

            content_id, elapsed = suspended
            self._record = EngagementRecord(
                content_id=content_id,
                started_at=self.clock.monotonic() - elapsed,
                reported=True,
                cumulative_seconds=elapsed,
            )
            self._timer_handle = self.timer.every(self.interval_seconds, self._on_tick)
            self._unsubscribe_unload = self.unload_hub.subscribe(self._on_unload)
            logger.debug("Tracking resumed for %s at %ss", content_id, elapsed)

    # --- Internals (lock held) ---

    def _finish(self, kind: ReportKind) -> int | None:
        record = self._record
        if record is None:
            return None

        if self._timer_handle:
            self._timer_handle.cancel()
            self._timer_handle = None
        if self._unsubscribe_unload:
            self._unsubscribe_unload()
            self._unsubscribe_unload = None
        self._record = None

        elapsed = elapsed_seconds(record.started_at, self.clock.monotonic())
        if not is_reportable(elapsed, self.min_report_seconds):
            logger.debug("Dropping %ss on %s (below minimum)", elapsed, record.content_id)
            return None

        record.cumulative_seconds = elapsed
        if kind is ReportKind.BEACON:
            self.beacon.send(self.beacon_url(record.content_id, elapsed))
        else:
            self._send(record.content_id, elapsed, kind)
        return elapsed

    def _drop_suspended(self) -> None:
        self._suspended = None
        if self._unsubscribe_resume:
            self._unsubscribe_resume()
            self._unsubscribe_resume = None

    def _send(self, content_id: str, time_spent: int | None, kind: ReportKind) -> None:
        try:
            self.reporter.report_view(content_id, time_spent)
        except ApiError as exc:
            logger.warning("Failed to send %s report for %s: %s", kind.value, content_id, exc)
