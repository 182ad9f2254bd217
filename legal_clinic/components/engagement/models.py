"""
Engagement component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_INTERVAL_SECONDS = 30
DEFAULT_MIN_REPORT_SECONDS = 5


class TrackerState(str, Enum):
    IDLE = "idle"
    TRACKING = "tracking"


@dataclass
class EngagementRecord:
    """
    Attention time on one content item.

    Lives only while the item is on screen; every mutation ends in a
    best-effort remote report, nothing is persisted locally.
    """

    content_id: str
    started_at: float  # monotonic seconds
    reported: bool = False  # initial view report initiated
    cumulative_seconds: int = 0  # last elapsed value reported


class ReportKind(str, Enum):
    VIEW = "view"
    PERIODIC = "periodic"
    FINAL = "final"
    BEACON = "beacon"
