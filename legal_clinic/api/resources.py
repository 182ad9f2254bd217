"""Thin resource wrappers over ApiClient, one per REST area."""

from __future__ import annotations

from typing import Any

from legal_clinic.api.client import ApiClient
from legal_clinic.domain.entities import BlogPost


class AuthAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str) -> Any:
        return self.client.post(
            "/auth/login",
            json={"email": email, "password": password},
            invalidate_on_401=False,
        )

    def register(self, user_data: dict[str, Any]) -> Any:
        return self.client.post("/auth/register", json=user_data, invalidate_on_401=False)


class BlogAPI:
    def __init__(self, client: ApiClient, view_path: str = "/content-views/{content_id}"):
        self.client = client
        self.view_path = view_path

    def get_post(self, post_id: str) -> BlogPost:
        return BlogPost.model_validate(self.client.get(f"/blog-posts/{post_id}"))

    def get_published_posts(self) -> list[BlogPost]:
        data = self.client.get("/blog-posts/published") or []
        return [BlogPost.model_validate(p) for p in data]

    def get_all_posts(self) -> list[BlogPost]:
        """Drafts included; admin only."""
        data = self.client.get("/blog-posts") or []
        return [BlogPost.model_validate(p) for p in data]

    def publish_post(self, post_id: Any) -> Any:
        return self.client.patch(f"/blog-posts/{post_id}/publish")

    def unpublish_post(self, post_id: Any) -> Any:
        return self.client.patch(f"/blog-posts/{post_id}/unpublish")

    def delete_post(self, post_id: Any) -> Any:
        return self.client.delete(f"/blog-posts/{post_id}")

    def view_url(self, content_id: str, time_spent: int | None = None) -> str:
        url = self.client.url_for(self.view_path.format(content_id=content_id))
        if time_spent is not None:
            url = f"{url}?timeSpent={time_spent}"
        return url

    def track_view(self, content_id: str, time_spent: int | None = None) -> Any:
        params = {"timeSpent": time_spent} if time_spent is not None else None
        return self.client.post(self.view_path.format(content_id=content_id), params=params)


class BookmarkAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    def add(self, post_id: str, user_id: Any, notes: str = "") -> Any:
        return self.client.post(
            f"/bookmarks/{post_id}", params={"userId": user_id, "notes": notes}
        )

    def remove(self, post_id: str, user_id: Any) -> Any:
        return self.client.delete(f"/bookmarks/{post_id}", params={"userId": user_id})

    def list_for_user(self, user_id: Any, page: int = 0, size: int = 10) -> list[BlogPost]:
        data = self.client.get(
            f"/bookmarks/user/{user_id}", params={"page": page, "size": size}
        )
        content = data.get("content", []) if isinstance(data, dict) else (data or [])
        return [BlogPost.model_validate(p) for p in content]

    def is_bookmarked(self, post_id: str, user_id: Any) -> bool:
        return bool(self.client.get(f"/bookmarks/check/{post_id}", params={"userId": user_id}))


class PasswordResetAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    def initiate(self, email: str) -> Any:
        return self.client.post("/password-reset/initiate", json={"email": email})

    def confirm(self, token: str, new_password: str) -> Any:
        return self.client.post(
            "/password-reset/confirm", json={"token": token, "newPassword": new_password}
        )

    def validate_token(self, token: str) -> bool:
        return bool(self.client.get(f"/password-reset/validate/{token}"))


class UserAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    def list_users(self) -> list[dict[str, Any]]:
        return list(self.client.get("/users") or [])

    def delete_user(self, user_id: Any) -> Any:
        return self.client.delete(f"/users/{user_id}")


class ConversationAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    def list_for_user(
        self, user_id: Any, archived: bool = False, page: int = 0, size: int = 20
    ) -> Any:
        return self.client.get(
            f"/conversations/user/{user_id}",
            params={"archived": str(archived).lower(), "page": page, "size": size},
        )


class ActivityAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    def list_all(self, page: int = 0, size: int = 20) -> Any:
        return self.client.get("/activities", params={"page": page, "size": size})

    def for_user(self, user_id: Any, page: int = 0, size: int = 20) -> Any:
        return self.client.get(
            f"/activities/user/{user_id}", params={"page": page, "size": size}
        )
