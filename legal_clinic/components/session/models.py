"""
Session component models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from legal_clinic.domain.entities import Session


class SessionEventType(str, Enum):
    RESTORED = "restored"
    LOGGED_IN = "logged_in"
    LOGGED_OUT = "logged_out"
    INVALIDATED = "invalidated"


@dataclass(frozen=True)
class SessionEvent:
    type: SessionEventType
    session: Session | None = None


SessionListener = Callable[[SessionEvent], None]


@dataclass(frozen=True)
class RegisterInput:
    first_name: str
    last_name: str
    email: str
    password: str

    def to_payload(self) -> dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "password": self.password,
        }
