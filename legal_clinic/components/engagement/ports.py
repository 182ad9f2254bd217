"""
Engagement component port definitions.
"""

from legal_clinic.ports.clock import ClockPort
from legal_clinic.ports.reporting import BeaconPort, UnloadHubPort, ViewReporterPort
from legal_clinic.ports.timer import IntervalTimerPort, TimerHandle

__all__ = [
    "BeaconPort",
    "ClockPort",
    "IntervalTimerPort",
    "TimerHandle",
    "UnloadHubPort",
    "ViewReporterPort",
]
