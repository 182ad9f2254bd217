from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LOGIN_ROUTE = "/login"
UNAUTHORIZED_ROUTE = "/unauthorized"


class GateOutcome(str, Enum):
    LOADING = "loading"
    RENDER = "render"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_UNAUTHORIZED = "redirect_unauthorized"


@dataclass(frozen=True)
class GateDecision:
    outcome: GateOutcome

    @property
    def redirect_to(self) -> str | None:
        if self.outcome is GateOutcome.REDIRECT_LOGIN:
            return LOGIN_ROUTE
        if self.outcome is GateOutcome.REDIRECT_UNAUTHORIZED:
            return UNAUTHORIZED_ROUTE
        return None

    @property
    def allows_render(self) -> bool:
        return self.outcome is GateOutcome.RENDER
