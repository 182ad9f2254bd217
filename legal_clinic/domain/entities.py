from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
RoleType = Literal["USER", "SUPER_ADMIN"]

ROLE_USER: RoleType = "USER"
ROLE_ADMIN: RoleType = "SUPER_ADMIN"

# --- Identity & Session ---

class Identity(BaseModel):
    """The signed-in user as the API describes it (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str
    role: RoleType = ROLE_USER

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Session(BaseModel):
    identity: Identity
    token: str

    @property
    def role(self) -> RoleType:
        return self.identity.role

    @property
    def is_admin(self) -> bool:
        return self.identity.role == ROLE_ADMIN

    @classmethod
    def from_auth_payload(cls, payload: Any) -> "Session":
        """
        Build a session from a login/register payload.

        Accepts either ``{"token": ..., "user": {...}}`` or a flat body where
        the identity fields sit next to ``token``.
        """
        if not isinstance(payload, dict):
            raise ValueError("Authentication payload must be an object")
        token = payload.get("token") or payload.get("accessToken")
        if not token:
            raise ValueError("Authentication payload carries no token")
        user = payload.get("user")
        if user is None:
            user = {k: v for k, v in payload.items() if k not in ("token", "accessToken", "type")}
        return cls(identity=Identity.model_validate(user), token=str(token))

# --- Content ---

class BlogPost(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str
    title: str
    summary: str | None = None
    content: str = ""
    category: str | None = None
    tags: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    view_count: int | None = Field(default=0, alias="viewCount")
    published: bool = True
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @property
    def tag_list(self) -> list[str]:
        if not self.tags:
            return []
        return [t.strip() for t in self.tags.split(",") if t.strip()]


class DashboardStats(BaseModel):
    total_users: int = 0
    total_posts: int = 0
    total_conversations: int = 0
    recent_activities: list[dict[str, Any]] = Field(default_factory=list)
