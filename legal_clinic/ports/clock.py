from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    def monotonic(self) -> float:
        """Seconds from an arbitrary, never-decreasing origin."""
        ...

    def now_utc(self) -> datetime:
        """Return current UTC time."""
        ...
