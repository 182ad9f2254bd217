"""
Authorization gate component - role-based route guarding.
"""

from .component import evaluate_access
from .models import LOGIN_ROUTE, UNAUTHORIZED_ROUTE, GateDecision, GateOutcome

__all__ = [
    "evaluate_access",
    "GateDecision",
    "GateOutcome",
    "LOGIN_ROUTE",
    "UNAUTHORIZED_ROUTE",
]
