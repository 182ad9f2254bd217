"""
Unit tests for Catalog component.
"""

from __future__ import annotations

from typing import Any

import pytest

from legal_clinic.components.catalog.component import (
    DeleteConfirmation,
    categories_of,
    collect_dashboard_stats,
    describe_activity,
    filter_posts,
    page_content,
    publication_counts,
    validate_new_password,
)
from legal_clinic.domain.entities import BlogPost
from legal_clinic.exceptions import ApiError


def post(pid: int, title: str, category: str | None, summary: str | None = None) -> BlogPost:
    return BlogPost(id=pid, title=title, category=category, summary=summary)


POSTS = [
    post(1, "Land title disputes", "Land Law", "How to register customary land"),
    post(2, "Divorce basics", "Family Law", "Custody and maintenance"),
    post(3, "Unfair dismissal", "Employment Law", None),
]


class TestFilterPosts:
    def test_all_returns_everything(self):
        assert filter_posts(POSTS) == POSTS

    def test_by_category(self):
        assert [p.id for p in filter_posts(POSTS, "Family Law")] == [2]

    def test_search_title_and_summary_case_insensitive(self):
        assert [p.id for p in filter_posts(POSTS, search="LAND")] == [1]
        assert [p.id for p in filter_posts(POSTS, search="custody")] == [2]

    def test_category_and_search_combine(self):
        assert filter_posts(POSTS, "Land Law", "custody") == []


def test_categories_of_keeps_configured_order_and_dedupes():
    result = categories_of(POSTS, configured=["All", "Family Law", "Criminal Law"])
    assert result == ["All", "Family Law", "Criminal Law", "Land Law", "Employment Law"]


@pytest.mark.parametrize(
    "new,confirm,expected",
    [
        ("secret123", "secret124", "Passwords do not match"),
        ("short", "short", "Password must be at least 8 characters"),
        ("longenough", "longenough", None),
    ],
)
def test_validate_new_password(new, confirm, expected):
    assert validate_new_password(new, confirm, 8) == expected


# --- Dashboard ---


class Source:
    """Answers every dashboard call with ``value``, or raises ``error``."""

    def __init__(self, value: Any = None, error: Exception | None = None):
        self.value = value
        self.error = error
        self.args: tuple[Any, ...] = ()

    def _answer(self, *args: Any) -> Any:
        self.args = args
        if self.error:
            raise self.error
        return self.value

    list_users = get_all_posts = list_for_user = list_all = _answer


def test_dashboard_counts():
    stats = collect_dashboard_stats(
        Source([{"id": 1}, {"id": 2}]),
        Source([{"id": 1}]),
        Source({"content": [{"id": 9}, {"id": 10}, {"id": 11}]}),
        Source({"content": [{"id": i} for i in range(8)]}),
        user_id=4,
    )

    assert stats.total_users == 2
    assert stats.total_posts == 1
    assert stats.total_conversations == 3
    assert len(stats.recent_activities) == 5


def test_dashboard_failing_source_degrades_to_zero():
    conversations = Source(error=ApiError("down"))
    stats = collect_dashboard_stats(
        Source(error=ApiError("forbidden", status_code=403)),
        Source([{"id": 1}]),
        conversations,
        Source([{"id": 1}]),
        user_id=None,
    )

    assert stats.total_users == 0
    assert stats.total_posts == 1
    assert stats.total_conversations == 0
    assert stats.recent_activities == [{"id": 1}]
    assert conversations.args == (0, False, 0, 100)


# --- Admin lists ---


def test_publication_counts():
    posts = [
        BlogPost(id=1, title="a", published=True),
        BlogPost(id=2, title="b", published=False),
        BlogPost(id=3, title="c", published=True),
    ]
    assert publication_counts(posts) == (3, 2, 1)
    assert publication_counts([]) == (0, 0, 0)


@pytest.mark.parametrize(
    "activity,expected",
    [
        ({"action": "LOGIN"}, "LOGIN"),
        ({"action": "CREATE", "entityType": "BlogPost", "details": "Land rights"}, "CREATE - BlogPost - Land rights"),
        ({"description": "Signed up"}, "Signed up"),
        ({}, "Activity"),
    ],
)
def test_describe_activity(activity, expected):
    assert describe_activity(activity) == expected


def test_page_content_shapes():
    assert page_content({"content": [1, 2]}) == [1, 2]
    assert page_content([3]) == [3]
    assert page_content(None) == []


class TestDeleteConfirmation:
    def test_second_click_confirms(self):
        confirm = DeleteConfirmation()
        assert confirm.request(5) is False
        assert confirm.is_armed(5)
        assert confirm.request(5) is True
        assert not confirm.is_armed(5)

    def test_other_row_rearms(self):
        confirm = DeleteConfirmation()
        confirm.request(5)
        assert confirm.request(6) is False
        assert confirm.is_armed(6)
        assert not confirm.is_armed(5)
