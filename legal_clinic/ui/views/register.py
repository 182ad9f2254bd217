import flet as ft

from legal_clinic.components.session import RegisterInput
from legal_clinic.exceptions import ApiError
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.state import AppState


class RegisterView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__()
        self.page = page
        self.ctx = ctx
        self.state = state

        self.first_name = ft.TextField(label="First name", width=300)
        self.last_name = ft.TextField(label="Last name", width=300)
        self.email = ft.TextField(label="Email", width=300)
        self.password = ft.TextField(
            label="Password", width=300, password=True, can_reveal_password=True
        )
        self.error_text = ft.Text(color="error", visible=False)
        self.submit = ft.ElevatedButton("Create account", on_click=self.register_click)

        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.controls = [
            ft.Text("Create your account", style="headlineMedium"),
            self.first_name,
            self.last_name,
            self.email,
            self.password,
            self.error_text,
            self.submit,
            ft.TextButton("Already registered? Log in", on_click=lambda _: page.go("/login")),
        ]

    def register_click(self, e: ft.ControlEvent) -> None:
        fields = [self.first_name, self.last_name, self.email, self.password]
        if not all((f.value or "").strip() for f in fields):
            self.error_text.value = "All fields are required."
            self.error_text.visible = True
            self.update()
            return

        min_length = self.ctx.settings.ui.password_min_length
        if len(self.password.value or "") < min_length:
            self.error_text.value = f"Password must be at least {min_length} characters"
            self.error_text.visible = True
            self.update()
            return

        self.submit.disabled = True
        self.update()
        try:
            self.state.sessions.register(
                RegisterInput(
                    first_name=self.first_name.value.strip(),
                    last_name=self.last_name.value.strip(),
                    email=self.email.value.strip(),
                    password=self.password.value,
                )
            )
        except ApiError as err:
            self.submit.disabled = False
            self.error_text.value = err.message
            self.error_text.visible = True
            self.update()
            return

        self.page.go("/blog")
