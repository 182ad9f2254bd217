"""
Session component - restore, login, register, logout, ambient invalidation.
"""

from .component import SessionStore, token_is_expired
from .models import RegisterInput, SessionEvent, SessionEventType, SessionListener
from .ports import AuthApiPort

__all__ = [
    "SessionStore",
    "token_is_expired",
    "RegisterInput",
    "SessionEvent",
    "SessionEventType",
    "SessionListener",
    "AuthApiPort",
]
