import logging
from datetime import UTC, datetime

import flet as ft

from legal_clinic.components.catalog import collect_dashboard_stats, describe_activity
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.state import AppState

logger = logging.getLogger(__name__)


def format_relative(value: str | None, now: datetime | None = None) -> str:
    """'Just now', '5m ago', '3h ago', else the date."""
    if not value:
        return ""
    try:
        when = datetime.fromisoformat(value)
    except ValueError:
        return value
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    now = now or datetime.now(UTC)
    minutes = int((now - when).total_seconds() // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if minutes < 1440:
        return f"{minutes // 60}h ago"
    return when.date().isoformat()


def AdminDashboardContent(page: ft.Page, ctx: ServiceContext, state: AppState) -> ft.Control:
    user = state.current_user
    stats = collect_dashboard_stats(
        ctx.user_api,
        ctx.blog_api,
        ctx.conversation_api,
        ctx.activity_api,
        user.id if user else None,
    )

    # Helper for Stat Card
    def stat_card(label: str, value: int, icon: str) -> ft.Control:
        return ft.Container(
            content=ft.Column(
                [
                    ft.Icon(name=icon, size=30, color="primary"),
                    ft.Text(str(value), size=30, weight=ft.FontWeight.BOLD),
                    ft.Text(label, size=14, color="onSurfaceVariant"),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            width=180,
            height=160,
            bgcolor="surfaceVariant",
            border_radius=ft.border_radius.all(12),
        )

    activities: list[ft.Control] = [
        ft.ListTile(
            title=ft.Text(describe_activity(a)),
            subtitle=ft.Text(format_relative(a.get("createdAt"))),
        )
        for a in stats.recent_activities
    ] or [ft.Text("No recent activity")]

    return ft.Column(
        [
            ft.Text("Dashboard", size=28, weight=ft.FontWeight.BOLD, color="primary"),
            ft.Text(f"Welcome back, {user.first_name if user else 'admin'}"),
            ft.Divider(),
            ft.Row(
                [
                    stat_card("Total Users", stats.total_users, ft.Icons.PEOPLE),
                    stat_card("Blog Posts", stats.total_posts, ft.Icons.ARTICLE),
                    stat_card("Conversations", stats.total_conversations, ft.Icons.CHAT),
                ],
                wrap=True,
                spacing=16,
            ),
            ft.Row(
                [
                    ft.FilledButton(
                        "Manage Blog Posts", icon=ft.Icons.ARTICLE,
                        on_click=lambda _: page.go("/admin/blog"),
                    ),
                    ft.OutlinedButton(
                        "Manage Users", icon=ft.Icons.PEOPLE,
                        on_click=lambda _: page.go("/admin/users"),
                    ),
                ],
                spacing=12,
            ),
            ft.Text("Recent Activity", size=20, weight=ft.FontWeight.BOLD),
            *activities,
        ],
        scroll=ft.ScrollMode.AUTO,
        expand=True,
    )
