from collections.abc import Callable
from typing import Any

import flet as ft

from legal_clinic.domain.entities import BlogPost


class ArticleCard(ft.Container):  # type: ignore
    """
    Summary card for an article, with an optional bookmark toggle.
    """
    def __init__(
        self,
        post: BlogPost,
        on_open: Callable[[BlogPost], None],
        bookmarked: bool | None = None,
        on_toggle_bookmark: Callable[[BlogPost], None] | None = None,
        width: float | None = 340,
    ):
        header: list[ft.Control] = [
            ft.Container(
                content=ft.Text(post.category or "General", size=12, color="onPrimary"),
                bgcolor="primary",
                border_radius=ft.border_radius.all(8),
                padding=ft.padding.symmetric(horizontal=8, vertical=2),
            ),
            ft.Container(expand=True),
        ]
        # None = signed out, no bookmark control at all
        if bookmarked is not None and on_toggle_bookmark:
            header.append(
                ft.IconButton(
                    ft.Icons.BOOKMARK if bookmarked else ft.Icons.BOOKMARK_BORDER,
                    tooltip="Remove bookmark" if bookmarked else "Save",
                    on_click=lambda _: on_toggle_bookmark(post),
                )
            )

        super().__init__(
            content=ft.Column(
                [
                    ft.Row(header),
                    ft.Text(post.title, size=18, weight=ft.FontWeight.BOLD),
                    ft.Text(post.summary or "", size=14, color="onSurfaceVariant", max_lines=3),
                    ft.Row(
                        [
                            ft.Text(f"{post.view_count or 0} views", size=12, italic=True),
                            ft.TextButton("Read Article", on_click=lambda _: on_open(post)),
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                ],
                spacing=8,
            ),
            width=width,
            padding=20,
            border_radius=ft.border_radius.all(12),
            bgcolor="surfaceVariant",
            animate=ft.animation.Animation(200, ft.AnimationCurve.EASE_OUT),
            on_hover=self._on_hover,
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=10,
                color="#1A000000",
                offset=ft.Offset(0, 4),
            ),
        )
        self.post = post

    def _on_hover(self, e: Any) -> None:
        lifted = e.data == "true"
        self.shadow.blur_radius = 20 if lifted else 10
        self.shadow.offset = ft.Offset(0, 8 if lifted else 4)
        self.update()
