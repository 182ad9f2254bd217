"""
Unit tests for Session component.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from jose import jwt

from legal_clinic.adapters.storage import InMemoryStorage
from legal_clinic.components.session.component import SessionStore, token_is_expired
from legal_clinic.components.session.models import RegisterInput, SessionEvent, SessionEventType
from legal_clinic.exceptions import ApiError, UnauthorizedError

NOW = datetime(2026, 1, 14, 12, 0, 0, tzinfo=UTC)


# --- Test Fixtures ---


class FakeClock:
    def monotonic(self) -> float:
        return 0.0

    def now_utc(self) -> datetime:
        return NOW


class FakeAuthApi:
    def __init__(self, payload: Any = None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.registered: list[dict[str, Any]] = []

    def login(self, email: str, password: str) -> Any:
        if self.error:
            raise self.error
        return self.payload

    def register(self, user_data: dict[str, Any]) -> Any:
        self.registered.append(user_data)
        if self.error:
            raise self.error
        return self.payload


def user_json(role: str = "USER") -> str:
    return json.dumps(
        {"id": 7, "firstName": "Amina", "lastName": "Nakato", "email": "amina@example.com", "role": role}
    )


def make_store(storage=None, payload=None, error=None) -> SessionStore:
    return SessionStore(
        storage or InMemoryStorage(),
        FakeAuthApi(payload=payload, error=error),
        clock=FakeClock(),
    )


@pytest.fixture
def events():
    return []


def signed_token(exp: datetime) -> str:
    return jwt.encode({"sub": "7", "exp": int(exp.timestamp())}, "secret", algorithm="HS256")


# --- token_is_expired ---


def test_opaque_token_never_expires():
    assert token_is_expired("not-a-jwt", NOW) is False


def test_jwt_past_exp_is_expired():
    assert token_is_expired(signed_token(NOW - timedelta(minutes=1)), NOW) is True


def test_jwt_future_exp_is_valid():
    assert token_is_expired(signed_token(NOW + timedelta(hours=1)), NOW) is False


def test_jwt_without_exp_is_valid():
    token = jwt.encode({"sub": "7"}, "secret", algorithm="HS256")
    assert token_is_expired(token, NOW) is False


# --- restore ---


class TestRestore:
    def test_empty_storage_yields_no_session(self, events):
        store = make_store()
        store.subscribe(events.append)

        assert store.established is False
        assert store.restore() is None
        assert store.established is True
        assert store.current is None
        assert [e.type for e in events] == [SessionEventType.RESTORED]

    def test_stored_pair_is_restored(self):
        storage = InMemoryStorage({"token": "tok", "user": user_json("SUPER_ADMIN")})
        store = make_store(storage)

        session = store.restore()

        assert session is not None
        assert session.token == "tok"
        assert session.identity.first_name == "Amina"
        assert session.is_admin
        assert store.token() == "tok"

    def test_identity_may_be_stored_as_mapping(self):
        storage = InMemoryStorage({"token": "tok", "user": json.loads(user_json())})
        assert make_store(storage).restore() is not None

    def test_restore_is_idempotent(self):
        storage = InMemoryStorage({"token": "tok", "user": user_json()})
        store = make_store(storage)

        first = store.restore()
        second = store.restore()

        assert first == second
        assert storage.get("token") == "tok"

    def test_undecodable_identity_clears_storage(self):
        storage = InMemoryStorage({"token": "tok", "user": "{not json"})
        store = make_store(storage)

        assert store.restore() is None
        assert store.established is True
        assert storage.get("token") is None
        assert storage.get("user") is None

    def test_half_written_pair_is_cleared(self):
        storage = InMemoryStorage({"token": "tok"})
        assert make_store(storage).restore() is None
        assert storage.get("token") is None

    def test_expired_credential_is_discarded(self):
        token = signed_token(NOW - timedelta(seconds=1))
        storage = InMemoryStorage({"token": token, "user": user_json()})

        assert make_store(storage).restore() is None
        assert storage.get("token") is None


# --- login / register ---


class TestLogin:
    def test_success_persists_pair_and_notifies(self, events):
        storage = InMemoryStorage()
        payload = {"token": "new-tok", "user": json.loads(user_json())}
        store = make_store(storage, payload=payload)
        store.subscribe(events.append)

        session = store.login("amina@example.com", "secret123")

        assert session.token == "new-tok"
        assert store.current == session
        assert store.established is True
        assert storage.get("token") == "new-tok"
        stored_user = json.loads(storage.get("user"))
        assert stored_user["firstName"] == "Amina"
        assert stored_user["role"] == "USER"
        assert events == [SessionEvent(SessionEventType.LOGGED_IN, session)]

    def test_flat_payload_is_accepted(self):
        payload = {"token": "flat", **json.loads(user_json())}
        session = make_store(payload=payload).login("a", "b")
        assert session.identity.email == "amina@example.com"

    def test_failure_leaves_existing_session_untouched(self):
        storage = InMemoryStorage({"token": "old", "user": user_json()})
        store = make_store(storage, error=UnauthorizedError("Invalid credentials"))
        before = store.restore()

        with pytest.raises(ApiError) as exc:
            store.login("amina@example.com", "wrong")

        assert exc.value.message == "Invalid credentials"
        assert store.current == before
        assert storage.get("token") == "old"

    def test_malformed_payload_raises_api_error(self):
        store = make_store(payload={"user": json.loads(user_json())})

        with pytest.raises(ApiError, match="Unexpected response from server"):
            store.login("a", "b")
        assert store.current is None

    def test_register_sends_camel_case_payload(self):
        payload = {"token": "reg", "user": json.loads(user_json())}
        store = make_store(payload=payload)

        store.register(RegisterInput("Amina", "Nakato", "amina@example.com", "secret123"))

        sent = store.auth_api.registered[0]
        assert sent == {
            "firstName": "Amina",
            "lastName": "Nakato",
            "email": "amina@example.com",
            "password": "secret123",
        }
        assert store.token() == "reg"

    def test_last_login_wins(self):
        storage = InMemoryStorage()
        store = make_store(storage, payload={"token": "first", "user": json.loads(user_json())})
        store.login("a", "b")
        store.auth_api.payload = {"token": "second", "user": json.loads(user_json("SUPER_ADMIN"))}
        store.login("c", "d")

        assert store.token() == "second"
        assert store.current.is_admin
        assert storage.get("token") == "second"


# --- logout / invalidate ---


class TestTermination:
    def test_logout_clears_everything(self, events):
        storage = InMemoryStorage({"token": "tok", "user": user_json()})
        store = make_store(storage)
        store.restore()
        store.subscribe(events.append)

        store.logout()

        assert store.current is None
        assert store.token() is None
        assert storage.get("token") is None
        assert storage.get("user") is None
        assert [e.type for e in events] == [SessionEventType.LOGGED_OUT]

    def test_invalidate_emits_invalidated(self, events):
        storage = InMemoryStorage({"token": "tok", "user": user_json()})
        store = make_store(storage)
        store.restore()
        store.subscribe(events.append)

        store.invalidate()

        assert store.current is None
        assert storage.get("token") is None
        assert events == [SessionEvent(SessionEventType.INVALIDATED, None)]

    def test_unsubscribe_stops_notifications(self, events):
        store = make_store()
        unsubscribe = store.subscribe(events.append)
        unsubscribe()

        store.logout()

        assert events == []
