"""
Catalog component - pure helpers behind the article, password and
dashboard views.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from legal_clinic.domain.entities import BlogPost, DashboardStats
from legal_clinic.exceptions import ApiError

from .ports import ActivitySourcePort, ConversationSourcePort, PostSourcePort, UserSourcePort

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"
RECENT_ACTIVITY_LIMIT = 5

T = TypeVar("T")


# --- Articles ---


def filter_posts(
    posts: Iterable[BlogPost], category: str = ALL_CATEGORIES, search: str = ""
) -> list[BlogPost]:
    """Category ("All" = any) then case-insensitive search on title and summary."""
    result = list(posts)
    if category and category != ALL_CATEGORIES:
        result = [p for p in result if p.category == category]

    needle = search.strip().lower()
    if needle:
        result = [
            p
            for p in result
            if needle in p.title.lower() or needle in (p.summary or "").lower()
        ]
    return result


def categories_of(posts: Iterable[BlogPost], configured: Iterable[str] = ()) -> list[str]:
    """Configured categories first, then any others found on posts; "All" leads."""
    seen: list[str] = [ALL_CATEGORIES]
    for name in list(configured) + [p.category for p in posts if p.category]:
        if name and name not in seen:
            seen.append(name)
    return seen


# --- Password reset ---


def validate_new_password(new_password: str, confirm_password: str, min_length: int = 8) -> str | None:
    """Return an error message, or None when the pair is acceptable."""
    if new_password != confirm_password:
        return "Passwords do not match"
    if len(new_password) < min_length:
        return f"Password must be at least {min_length} characters"
    return None


# --- Dashboard ---


def _settled(label: str, call: Callable[[], T], default: T) -> T:
    try:
        return call()
    except ApiError as exc:
        logger.warning("Dashboard source %s failed: %s", label, exc)
        return default


def page_content(data: Any) -> list[Any]:
    """Rows of a Spring-style page (``{"content": [...]}``) or a plain list."""
    if isinstance(data, dict):
        return list(data.get("content") or [])
    return list(data or [])


def collect_dashboard_stats(
    users: UserSourcePort,
    posts: PostSourcePort,
    conversations: ConversationSourcePort,
    activities: ActivitySourcePort,
    user_id: Any,
) -> DashboardStats:
    """Every source is independent: a failing one degrades to zero/empty."""
    user_list = _settled("users", users.list_users, [])
    post_list = _settled("posts", posts.get_all_posts, [])
    convo_page = _settled(
        "conversations",
        lambda: conversations.list_for_user(user_id or 0, False, 0, 100),
        None,
    )
    activity_page = _settled("activities", lambda: activities.list_all(0, 10), None)

    return DashboardStats(
        total_users=len(user_list),
        total_posts=len(post_list),
        total_conversations=len(page_content(convo_page)),
        recent_activities=page_content(activity_page)[:RECENT_ACTIVITY_LIMIT],
    )


def describe_activity(activity: dict[str, Any]) -> str:
    """'LOGIN', 'CREATE - BlogPost - Land rights' and so on."""
    parts = [
        activity.get("action") or activity.get("description") or "Activity",
        activity.get("entityType"),
        activity.get("details"),
    ]
    return " - ".join(str(p) for p in parts if p)


# --- Admin lists ---


def publication_counts(posts: Iterable[BlogPost]) -> tuple[int, int, int]:
    """(total, published, drafts)."""
    posts = list(posts)
    published = sum(1 for p in posts if p.published)
    return len(posts), published, len(posts) - published


class DeleteConfirmation:
    """
    Two-step delete: the first click on a row arms it, a second click on the
    same row confirms. Clicking another row re-arms on that row instead.
    """

    def __init__(self) -> None:
        self.armed: Any = None

    def request(self, item_id: Any) -> bool:
        if self.armed != item_id:
            self.armed = item_id
            return False
        self.armed = None
        return True

    def is_armed(self, item_id: Any) -> bool:
        return self.armed == item_id
