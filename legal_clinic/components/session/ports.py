from typing import Any, Protocol


class AuthApiPort(Protocol):
    def login(self, email: str, password: str) -> Any: ...
    def register(self, user_data: dict[str, Any]) -> Any: ...
