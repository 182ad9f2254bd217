from dataclasses import dataclass

from legal_clinic.components.catalog import ALL_CATEGORIES
from legal_clinic.components.session import SessionStore
from legal_clinic.domain.entities import Identity


@dataclass
class AppState:
    sessions: SessionStore
    selected_category: str = ALL_CATEGORIES
    search: str = ""

    @property
    def current_user(self) -> Identity | None:
        session = self.sessions.current
        return session.identity if session else None

    @property
    def is_admin(self) -> bool:
        session = self.sessions.current
        return session is not None and session.is_admin

    def logout(self) -> None:
        self.sessions.logout()
        self.selected_category = ALL_CATEGORIES
        self.search = ""
