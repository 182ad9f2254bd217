"""
Engagement component - view and attention-time reporting for content items.
"""

from .component import EngagementTracker, elapsed_seconds, is_reportable
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

__all__ = [
    # Tracker
    "EngagementTracker",
    # Pure functions
    "elapsed_seconds",
    "is_reportable",
    # Models
    "EngagementRecord",
    "ReportKind",
    "TrackerState",
    "DEFAULT_INTERVAL_SECONDS",
    "DEFAULT_MIN_REPORT_SECONDS",
    # Ports
    "BeaconPort",
    "ClockPort",
    "IntervalTimerPort",
    "TimerHandle",
    "UnloadHubPort",
    "ViewReporterPort",
]
