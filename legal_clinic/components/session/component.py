"""
Session component - single source of truth for who is signed in.

The credential and the identity are persisted as a pair under two storage
keys and are always written and cleared together.

Invariants:
- At most one Session is materialized at a time.
- Every mutation fully overwrites state (login/register/logout/invalidate);
  concurrent logins are last-write-wins.
- ``established`` turns True once ``restore()`` has completed, whatever
  its outcome.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from jose import JWTError, jwt
from pydantic import ValidationError

from legal_clinic.domain.entities import Identity, Session
from legal_clinic.exceptions import ApiError
from legal_clinic.ports.clock import ClockPort
from legal_clinic.ports.storage import KeyValueStoragePort

from .models import RegisterInput, SessionEvent, SessionEventType, SessionListener
from .ports import AuthApiPort

logger = logging.getLogger(__name__)

UNEXPECTED_RESPONSE = "Unexpected response from server"


def _utc_now() -> datetime:
    return datetime.now(UTC)


def token_is_expired(token: str, now: datetime) -> bool:
    """
    True only for a JWT whose ``exp`` claim is in the past.

    Claims are read without verifying the signature; the server stays the
    authority. Tokens that are not JWTs are treated as opaque and never
    considered expired here.
    """
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return False
    exp = claims.get("exp")
    if not isinstance(exp, int | float):
        return False
    return exp <= now.timestamp()


class SessionStore:
    def __init__(
        self,
        storage: KeyValueStoragePort,
        auth_api: AuthApiPort,
        token_key: str = "token",
        identity_key: str = "user",
        clock: ClockPort | None = None,
    ) -> None:
        self.storage = storage
        self.auth_api = auth_api
        self.token_key = token_key
        self.identity_key = identity_key
        self._now: Callable[[], datetime] = clock.now_utc if clock else _utc_now
        self._session: Session | None = None
        self._established = False
        self._listeners: list[SessionListener] = []

    # --- Read side ---

    @property
    def current(self) -> Session | None:
        return self._session

    @property
    def established(self) -> bool:
        return self._established

    def token(self) -> str | None:
        return self._session.token if self._session else None

    # --- Observers ---

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event_type: SessionEventType) -> None:
        event = SessionEvent(type=event_type, session=self._session)
        for listener in list(self._listeners):
            listener(event)

    # --- Operations ---

    def restore(self) -> Session | None:
        """
        Rebuild the session from storage.

        Missing or undecodable state yields no session (never an error) and
        any half-written pair is cleared.
        """
        session = self._read_persisted()
        if session is None:
            self._clear_persisted()
        self._session = session
        self._established = True
        logger.info("Session restored: %s", "present" if session else "none")
        self._emit(SessionEventType.RESTORED)
        return session

    def login(self, email: str, password: str) -> Session:
        """Raises ApiError on failure; the existing session is left untouched."""
        payload = self.auth_api.login(email, password)
        return self._establish(payload)

    def register(self, inp: RegisterInput) -> Session:
        payload = self.auth_api.register(inp.to_payload())
        return self._establish(payload)

    def logout(self) -> None:
        self._clear()
        logger.info("Logged out")
        self._emit(SessionEventType.LOGGED_OUT)

    def invalidate(self) -> None:
        """Ambient invalidation: the API rejected the credential."""
        self._clear()
        logger.warning("Session invalidated by the API")
        self._emit(SessionEventType.INVALIDATED)

    # --- Internals ---

    def _establish(self, payload: Any) -> Session:
        try:
            session = Session.from_auth_payload(payload)
        except ValueError as e:
            logger.error("Malformed authentication payload: %s", e)
            raise ApiError(UNEXPECTED_RESPONSE) from e

        self.storage.set(self.token_key, session.token)
        self.storage.set(
            self.identity_key, session.identity.model_dump_json(by_alias=True)
        )
        self._session = session
        self._established = True
        logger.info("Signed in as %s (%s)", session.identity.email, session.role)
        self._emit(SessionEventType.LOGGED_IN)
        return session

    def _read_persisted(self) -> Session | None:
        token = self.storage.get(self.token_key)
        raw_identity = self.storage.get(self.identity_key)
        if not token or not raw_identity:
            return None

        try:
            if isinstance(raw_identity, str):
                identity = Identity.model_validate(json.loads(raw_identity))
            else:
                identity = Identity.model_validate(raw_identity)
        except (ValueError, ValidationError) as e:
            logger.warning("Discarding undecodable stored identity: %s", e)
            return None

        if token_is_expired(str(token), self._now()):
            logger.info("Stored credential has expired")
            return None

        return Session(identity=identity, token=str(token))

    def _clear_persisted(self) -> None:
        self.storage.remove(self.token_key)
        self.storage.remove(self.identity_key)

    def _clear(self) -> None:
        self._clear_persisted()
        self._session = None
