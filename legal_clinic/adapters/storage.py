"""Client storage adapters for the session credential/identity pair."""

from typing import Any

import flet as ft


class InMemoryStorage:
    """Process-local storage - suitable for tests and headless runs."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        """Clear everything - useful for testing."""
        self._data.clear()


class FletClientStorage:
    """Backed by ``page.client_storage`` (browser localStorage on the web)."""

    def __init__(self, page: ft.Page, prefix: str = "legal_clinic.") -> None:
        self.page = page
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Any | None:
        return self.page.client_storage.get(self._key(key))

    def set(self, key: str, value: Any) -> None:
        self.page.client_storage.set(self._key(key), value)

    def remove(self, key: str) -> None:
        if self.page.client_storage.contains_key(self._key(key)):
            self.page.client_storage.remove(self._key(key))
