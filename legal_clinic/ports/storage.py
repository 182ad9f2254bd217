from typing import Any, Protocol


class KeyValueStoragePort(Protocol):
    """Client-side storage that survives page reloads."""

    def get(self, key: str) -> Any | None:
        """Return the stored value or None."""
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        """Remove a key; absent keys are ignored."""
        ...
