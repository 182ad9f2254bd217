import logging
from typing import Any

import flet as ft

from legal_clinic.components.catalog import DeleteConfirmation, describe_activity, page_content
from legal_clinic.exceptions import ApiError
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.state import AppState
from legal_clinic.ui.views.admin_dashboard import format_relative

logger = logging.getLogger(__name__)


class AdminUsersView(ft.Column):  # type: ignore
    """Registered users with a two-click delete and an activity log per user."""

    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=12)
        self.page = page
        self.ctx = ctx
        self.state = state
        self.users: list[dict[str, Any]] = []
        self.error: str | None = None
        self.confirm = DeleteConfirmation()

        self.rows = ft.Column(spacing=6)
        self.controls = [
            ft.TextButton("← Dashboard", on_click=lambda _: page.go("/admin")),
            ft.Text("Users", size=28, weight=ft.FontWeight.BOLD, color="primary"),
            self.rows,
        ]
        self._load()
        self._render()

    def _load(self) -> None:
        try:
            self.users = self.ctx.user_api.list_users()
            self.error = None
        except ApiError as err:
            self.error = err.message

    def _render(self) -> None:
        if self.error:
            self.rows.controls = [ft.Text(self.error, color="error")]
            return
        if not self.users:
            self.rows.controls = [ft.Text("No users found.")]
            return
        self.rows.controls = [self._row(u) for u in self.users]

    def _row(self, user: dict[str, Any]) -> ft.Control:
        name = f"{user.get('firstName', '')} {user.get('lastName', '')}".strip()
        me = self.state.current_user
        is_self = me is not None and str(me.id) == str(user.get("id"))
        actions: list[ft.Control] = [
            ft.TextButton("Activity", on_click=lambda _, u=user: self._show_activities(u)),
        ]
        if not is_self:
            actions.append(
                ft.TextButton(
                    "Confirm?" if self.confirm.is_armed(user.get("id")) else "Delete",
                    style=ft.ButtonStyle(color="error"),
                    on_click=lambda _, u=user: self._delete(u),
                )
            )
        return ft.ListTile(
            title=ft.Text(name or str(user.get("email", ""))),
            subtitle=ft.Text(f"{user.get('email', '')} · {user.get('role') or user.get('roleName') or ''}"),
            trailing=ft.Row(actions, tight=True),
        )

    def _delete(self, user: dict[str, Any]) -> None:
        user_id = user.get("id")
        if self.confirm.request(user_id):
            try:
                self.ctx.user_api.delete_user(user_id)
            except ApiError as err:
                self.page.open(ft.SnackBar(ft.Text(f"Error deleting user: {err.message}")))
                return
            self._load()
        self._render()
        self.update()

    def _show_activities(self, user: dict[str, Any]) -> None:
        try:
            activities = page_content(self.ctx.activity_api.for_user(user.get("id")))
        except ApiError as err:
            logger.warning("Error loading activities for %s: %s", user.get("id"), err)
            activities = []

        body: list[ft.Control] = [
            ft.ListTile(
                title=ft.Text(describe_activity(a)),
                subtitle=ft.Text(format_relative(a.get("createdAt"))),
            )
            for a in activities
        ] or [ft.Text("No activities recorded yet.")]

        dialog = ft.AlertDialog(
            title=ft.Text(f"Activity: {user.get('email', '')}"),
            content=ft.Column(body, scroll=ft.ScrollMode.AUTO, height=400, width=500),
            actions=[ft.TextButton("Close", on_click=lambda _: self.page.close(dialog))],
        )
        self.page.open(dialog)
