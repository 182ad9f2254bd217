from typing import Any, Protocol


class UserSourcePort(Protocol):
    def list_users(self) -> list[dict[str, Any]]: ...


class PostSourcePort(Protocol):
    def get_all_posts(self) -> list[Any]: ...


class ConversationSourcePort(Protocol):
    def list_for_user(
        self, user_id: Any, archived: bool = False, page: int = 0, size: int = 20
    ) -> Any: ...


class ActivitySourcePort(Protocol):
    def list_all(self, page: int = 0, size: int = 20) -> Any: ...
