import flet as ft


def ChatUnavailableContent(page: ft.Page) -> ft.Control:
    return ft.Column(
        [
            ft.Icon(ft.Icons.CHAT_BUBBLE_OUTLINE, size=48, color="primary"),
            ft.Text("Chat Feature Currently Unavailable", size=24, weight=ft.FontWeight.BOLD),
            ft.Text("We're working hard to bring you our AI-powered legal chat assistant."),
            ft.Text("This feature will be available soon!"),
            ft.FilledButton("Browse Articles", on_click=lambda _: page.go("/blog")),
        ],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
    )


def UnauthorizedContent(page: ft.Page) -> ft.Control:
    return ft.Column(
        [
            ft.Text("Unauthorized Access", size=24, weight=ft.FontWeight.BOLD, color="error"),
            ft.Text("Your account does not have access to this page."),
            ft.TextButton("Back to Articles", on_click=lambda _: page.go("/blog")),
        ]
    )
