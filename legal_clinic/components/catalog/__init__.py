"""
Catalog component - article filtering, password rules, dashboard counts
and admin list helpers.
"""

from .component import (
    ALL_CATEGORIES,
    DeleteConfirmation,
    categories_of,
    collect_dashboard_stats,
    describe_activity,
    filter_posts,
    page_content,
    publication_counts,
    validate_new_password,
)
from .ports import ActivitySourcePort, ConversationSourcePort, PostSourcePort, UserSourcePort

__all__ = [
    "ALL_CATEGORIES",
    "DeleteConfirmation",
    "describe_activity",
    "page_content",
    "publication_counts",
    "categories_of",
    "collect_dashboard_stats",
    "filter_posts",
    "validate_new_password",
    "ActivitySourcePort",
    "ConversationSourcePort",
    "PostSourcePort",
    "UserSourcePort",
]
