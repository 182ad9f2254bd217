from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Stop further ticks. Safe to call more than once."""
        ...


class IntervalTimerPort(Protocol):
    def every(self, seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Call ``callback`` every ``seconds`` until the handle is cancelled."""
        ...
