import flet as ft

from legal_clinic.components.catalog import validate_new_password
from legal_clinic.exceptions import ApiError
from legal_clinic.ui.context import ServiceContext


def ForgotPasswordContent(page: ft.Page, ctx: ServiceContext) -> ft.Control:
    email = ft.TextField(label="Email", width=300, autofocus=True)
    error_text = ft.Text(color="error", visible=False)
    body = ft.Column(horizontal_alignment=ft.CrossAxisAlignment.CENTER)

    def submit(_: ft.ControlEvent) -> None:
        error_text.visible = False
        button.disabled = True
        body.update()
        try:
            ctx.password_reset_api.initiate((email.value or "").strip())
        except ApiError as err:
            error_text.value = err.message or "Failed to send reset email. Please try again."
            error_text.visible = True
            button.disabled = False
            body.update()
            return

        body.controls = [
            ft.Text("Check your email", style="headlineMedium"),
            ft.Text(f"We've sent a password reset link to {email.value}."),
            ft.Text("The link will expire in 1 hour."),
            ft.TextButton("Back to Login", on_click=lambda _: page.go("/login")),
        ]
        body.update()

    button = ft.ElevatedButton("Send Reset Link", on_click=submit)
    body.controls = [
        ft.Text("Forgot your password?", style="headlineMedium"),
        email,
        error_text,
        button,
        ft.TextButton("← Back to Login", on_click=lambda _: page.go("/login")),
    ]
    return body


def ResetPasswordContent(page: ft.Page, ctx: ServiceContext, token: str | None) -> ft.Control:
    back = ft.TextButton("← Back to Login", on_click=lambda _: page.go("/login"))
    request_new = ft.TextButton(
        "Request New Link", on_click=lambda _: page.go("/forgot-password")
    )

    if not token:
        return ft.Column([ft.Text("Invalid reset link", color="error"), request_new, back])

    try:
        valid = ctx.password_reset_api.validate_token(token)
    except ApiError:
        return ft.Column(
            [ft.Text("Invalid or expired reset link", color="error"), request_new, back]
        )
    if not valid:
        return ft.Column(
            [ft.Text("This reset link has expired or is invalid", color="error"), request_new, back]
        )

    new_password = ft.TextField(
        label="New password", width=300, password=True, hint_text="At least 8 characters"
    )
    confirm = ft.TextField(label="Confirm password", width=300, password=True)
    error_text = ft.Text(color="error", visible=False)
    body = ft.Column(horizontal_alignment=ft.CrossAxisAlignment.CENTER)

    def submit(_: ft.ControlEvent) -> None:
        problem = validate_new_password(
            new_password.value or "",
            confirm.value or "",
            ctx.settings.ui.password_min_length,
        )
        if problem:
            error_text.value = problem
            error_text.visible = True
            body.update()
            return
        try:
            ctx.password_reset_api.confirm(token, new_password.value or "")
        except ApiError as err:
            error_text.value = err.message or "Failed to reset password. Please try again."
            error_text.visible = True
            body.update()
            return
        page.open(ft.SnackBar(ft.Text("Password reset successfully! Please login.")))
        page.go("/login")

    body.controls = [
        ft.Text("Choose a new password", style="headlineMedium"),
        new_password,
        confirm,
        error_text,
        ft.ElevatedButton("Reset Password", on_click=submit),
        back,
    ]
    return body
