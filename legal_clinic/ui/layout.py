from collections.abc import Callable
from typing import Any

import flet as ft

from legal_clinic.components.session import SessionEvent
from legal_clinic.ui.state import AppState


class MainLayout(ft.Column):  # type: ignore
    """
    Top navigation bar + content.

    The bar follows the session store: signing in or out elsewhere (including
    ambient invalidation) rebuilds the user area without a route change.
    """
    def __init__(
        self,
        page: ft.Page,
        app_state: AppState,
        content: ft.Control,  # The dynamic view
        on_logout: Callable[[], None],
        on_nav: Callable[[str], None],
        toggle_theme: Callable[[], None],
        title: str = "Legal Clinic Uganda",
        current_route: str = "/",
    ):
        super().__init__(expand=True, spacing=0)
        self.page = page
        self.app_state = app_state
        self.on_logout = on_logout
        self.on_nav = on_nav
        self.toggle_theme = toggle_theme
        self.title = title
        self.current_route = current_route

        self.nav_bar = ft.Container(
            content=self._build_bar(),
            padding=ft.padding.symmetric(horizontal=20, vertical=10),
            bgcolor="surfaceVariant",
        )
        self.content_area = ft.Container(
            content=content,
            expand=True,
            padding=20,
            alignment=ft.alignment.top_left,
        )
        self.controls = [self.nav_bar, self.content_area]
        self._unsubscribe = app_state.sessions.subscribe(self._on_session_event)

    def dispose(self) -> None:
        self._unsubscribe()

    def _on_session_event(self, _: SessionEvent) -> None:
        self.nav_bar.content = self._build_bar()
        if self.page:
            self.page.update()

    def _link(self, label: str, icon: str, route: str) -> ft.Control:
        return ft.TextButton(
            label,
            icon=icon,
            on_click=lambda _: self.on_nav(route),
            style=ft.ButtonStyle(
                color="secondary" if self.current_route.startswith(route) else "primary"
            ),
        )

    def _build_bar(self) -> ft.Control:
        user = self.app_state.current_user
        is_admin = self.app_state.is_admin

        links: list[ft.Control] = [
            self._link("Articles", ft.Icons.MENU_BOOK, "/blog"),
            ft.Row(
                [
                    ft.Text("Legal Chat", color="onSurfaceVariant"),
                    ft.Container(
                        content=ft.Text("Currently Unavailable", size=10, color="onError"),
                        bgcolor="error",
                        border_radius=ft.border_radius.all(8),
                        padding=ft.padding.symmetric(horizontal=6, vertical=2),
                    ),
                ],
                spacing=6,
                tooltip="The legal chat assistant is not available yet",
            ),
        ]
        if is_admin:
            links.append(self._link("Admin Panel", ft.Icons.SHIELD, "/admin"))

        account: ft.Control
        if user:
            items = [
                ft.PopupMenuItem(text="Profile", on_click=lambda _: self.on_nav("/profile")),
            ]
            if is_admin:
                items.append(
                    ft.PopupMenuItem(text="Admin Panel", on_click=lambda _: self.on_nav("/admin"))
                )
            items.append(ft.PopupMenuItem(text="Logout", on_click=lambda _: self.on_logout()))
            account = ft.PopupMenuButton(
                content=ft.Row(
                    [
                        ft.CircleAvatar(content=ft.Text(user.initials), radius=16),
                        ft.Text(user.first_name),
                    ]
                ),
                items=items,
            )
        else:
            account = ft.Row(
                [
                    ft.OutlinedButton("Login", on_click=lambda _: self.on_nav("/login")),
                    ft.FilledButton("Sign Up", on_click=lambda _: self.on_nav("/register")),
                ]
            )

        return ft.Row(
            [
                ft.TextButton(
                    content=ft.Row(
                        [
                            ft.Icon(ft.Icons.BALANCE, color="primary"),
                            ft.Text(self.title, size=20, weight=ft.FontWeight.BOLD, color="primary"),
                        ]
                    ),
                    on_click=lambda _: self.on_nav("/blog"),
                ),
                ft.Row(links, spacing=10),
                ft.Container(expand=True),
                ft.IconButton(
                    ft.Icons.DARK_MODE if self.page.theme_mode == ft.ThemeMode.LIGHT else ft.Icons.LIGHT_MODE,
                    on_click=self._theme_click,
                ),
                account,
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

    def _theme_click(self, _: Any) -> None:
        self.toggle_theme()
