"""
Authorization gate - decides whether a protected view renders.

Pure function of (session presence, session role, allowed roles,
establishment flag). An empty allowed-roles set means "any signed-in user".
"""

from __future__ import annotations

from collections.abc import Collection

from legal_clinic.domain.entities import Session

from .models import GateDecision, GateOutcome


def evaluate_access(
    session: Session | None,
    allowed_roles: Collection[str],
    established: bool,
) -> GateDecision:
    # Never redirect while the session is still being restored
    if not established:
        return GateDecision(GateOutcome.LOADING)

    if session is None:
        return GateDecision(GateOutcome.REDIRECT_LOGIN)

    if allowed_roles and session.role not in allowed_roles:
        return GateDecision(GateOutcome.REDIRECT_UNAUTHORIZED)

    return GateDecision(GateOutcome.RENDER)
