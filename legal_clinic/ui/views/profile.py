import logging

import flet as ft

from legal_clinic.domain.entities import BlogPost
from legal_clinic.exceptions import ApiError
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.state import AppState

logger = logging.getLogger(__name__)


class ProfileView(ft.Column):  # type: ignore
    """Identity card, saved posts and account actions."""

    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=16)
        self.page = page
        self.ctx = ctx
        self.state = state
        self.bookmarks: list[BlogPost] = []
        self.saved_list = ft.Column(spacing=10)

        user = state.current_user
        if user is None:
            # The router only shows this view to signed-in users
            self.controls = [ft.Text("Please log in.")]
            return

        try:
            self.bookmarks = ctx.bookmark_api.list_for_user(user.id, 0, 100)
        except ApiError as err:
            logger.warning("Failed to load bookmarks: %s", err)

        self.controls = [
            ft.Row(
                [
                    ft.CircleAvatar(content=ft.Text(user.initials, size=24), radius=36),
                    ft.Column(
                        [
                            ft.Text(user.full_name, size=26, weight=ft.FontWeight.BOLD),
                            ft.Text(user.email),
                            ft.Text(user.role, color="secondary"),
                        ]
                    ),
                ],
                spacing=20,
            ),
            ft.Tabs(
                selected_index=0,
                tabs=[
                    ft.Tab(text="Saved Posts", content=self.saved_list),
                    ft.Tab(text="Settings", content=self._settings_tab()),
                ],
                height=500,
            ),
        ]
        self._render_saved()

    def _render_saved(self) -> None:
        if not self.bookmarks:
            self.saved_list.controls = [
                ft.Text("No Saved Posts Yet", size=18, weight=ft.FontWeight.BOLD),
                ft.Text("Start exploring and save posts you'd like to read later"),
                ft.FilledButton("Browse Articles", on_click=lambda _: self.page.go("/blog")),
            ]
            return
        self.saved_list.controls = [
            ft.ListTile(
                title=ft.Text(post.title),
                subtitle=ft.Text(post.summary or post.category or ""),
                on_click=lambda _, p=post: self.page.go(f"/blog/{p.id}"),
                trailing=ft.IconButton(
                    ft.Icons.CLOSE,
                    tooltip="Remove bookmark",
                    on_click=lambda _, p=post: self._remove(p),
                ),
            )
            for post in self.bookmarks
        ]

    def _remove(self, post: BlogPost) -> None:
        user = self.state.current_user
        if not user:
            return
        try:
            self.ctx.bookmark_api.remove(str(post.id), user.id)
        except ApiError:
            self.page.open(ft.SnackBar(ft.Text("Failed to remove bookmark")))
            return
        self.bookmarks = [p for p in self.bookmarks if p.id != post.id]
        self._render_saved()
        self.update()

    def _settings_tab(self) -> ft.Control:
        return ft.Column(
            [
                ft.Text("Account Actions", size=18, weight=ft.FontWeight.BOLD),
                ft.Row(
                    [
                        ft.OutlinedButton(
                            "Change Password", on_click=lambda _: self.page.go("/forgot-password")
                        ),
                        ft.FilledButton("Logout", on_click=self._logout),
                    ]
                ),
            ]
        )

    def _logout(self, _: ft.ControlEvent) -> None:
        self.state.logout()
        self.page.go("/login")
