import logging

import flet as ft

from legal_clinic.exceptions import ApiError
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.state import AppState

logger = logging.getLogger(__name__)


class LoginView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__()
        self.page = page
        self.ctx = ctx
        self.state = state

        self.email = ft.TextField(label="Email", width=300, autofocus=True)
        self.password = ft.TextField(
            label="Password", width=300, password=True, can_reveal_password=True,
            on_submit=self.login_click,
        )
        self.error_text = ft.Text(color="error", visible=False)
        self.submit = ft.ElevatedButton("Login", on_click=self.login_click)

        # Setup Column properties
        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.controls = [
            ft.Text("Welcome back", style="headlineMedium"),
            self.email,
            self.password,
            self.error_text,
            self.submit,
            ft.TextButton("Forgot password?", on_click=lambda _: page.go("/forgot-password")),
            ft.TextButton("No account? Sign up", on_click=lambda _: page.go("/register")),
        ]

    def show_error(self, message: str) -> None:
        self.error_text.value = message
        self.error_text.visible = True
        self.update()

    def login_click(self, e: ft.ControlEvent) -> None:
        email = (self.email.value or "").strip()
        pwd = self.password.value or ""

        if not email or not pwd:
            self.show_error("Please enter email and password.")
            return

        # One request at a time
        self.submit.disabled = True
        self.error_text.visible = False
        self.update()
        try:
            session = self.state.sessions.login(email, pwd)
        except ApiError as err:
            logger.info("Login failed for %s: %s", email, err.message)
            self.submit.disabled = False
            self.show_error(err.message)
            return

        self.page.go("/admin" if session.is_admin else "/blog")
