"""
Back-office list of every blog post, drafts included.

Publish, unpublish and a two-click delete; the list reloads after each
action. Creating and editing posts is out of scope for this client.
"""

import logging
from collections.abc import Callable
from typing import Any

import flet as ft

from legal_clinic.components.catalog import DeleteConfirmation, publication_counts
from legal_clinic.domain.entities import BlogPost
from legal_clinic.exceptions import ApiError
from legal_clinic.ui.context import ServiceContext

logger = logging.getLogger(__name__)


class AdminBlogView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, ctx: ServiceContext) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=12)
        self.page = page
        self.ctx = ctx
        self.posts: list[BlogPost] = []
        self.error: str | None = None
        self.confirm = DeleteConfirmation()

        self.stats = ft.Row(spacing=24)
        self.rows = ft.Column(spacing=6)
        self.controls = [
            ft.TextButton("← Dashboard", on_click=lambda _: page.go("/admin")),
            ft.Text("Blog Posts", size=28, weight=ft.FontWeight.BOLD, color="primary"),
            ft.Text("Manage your blog content"),
            self.stats,
            ft.Divider(),
            self.rows,
        ]
        self._load()
        self._render()

    def _load(self) -> None:
        try:
            self.posts = self.ctx.blog_api.get_all_posts()
            self.error = None
        except ApiError as err:
            self.error = err.message

    def _render(self) -> None:
        total, published, drafts = publication_counts(self.posts)
        self.stats.controls = [
            ft.Text(f"{total} total", weight=ft.FontWeight.BOLD),
            ft.Text(f"{published} published", color="primary"),
            ft.Text(f"{drafts} drafts", color="secondary"),
        ]
        if self.error:
            self.rows.controls = [ft.Text(self.error, color="error")]
            return
        if not self.posts:
            self.rows.controls = [ft.Text("No blog posts yet.")]
            return
        self.rows.controls = [self._row(p) for p in self.posts]

    def _row(self, post: BlogPost) -> ft.Control:
        toggle = (
            ft.TextButton("Unpublish", on_click=lambda _, p=post: self._unpublish(p))
            if post.published
            else ft.TextButton("Publish", on_click=lambda _, p=post: self._publish(p))
        )
        armed = self.confirm.is_armed(post.id)
        return ft.ListTile(
            title=ft.Text(post.title),
            subtitle=ft.Text(
                f"{'Published' if post.published else 'Draft'} · {post.category or 'General'}"
                f" · {post.view_count or 0} views"
            ),
            on_click=lambda _, p=post: self.page.go(f"/blog/{p.id}"),
            trailing=ft.Row(
                [
                    toggle,
                    ft.TextButton(
                        "Confirm?" if armed else "Delete",
                        style=ft.ButtonStyle(color="error"),
                        on_click=lambda _, p=post: self._delete(p),
                    ),
                ],
                tight=True,
            ),
        )

    def _act(self, label: str, action: Callable[[], Any]) -> None:
        try:
            action()
        except ApiError as err:
            logger.warning("Error %s post: %s", label, err)
            self.page.open(ft.SnackBar(ft.Text(f"Error {label} post: {err.message}")))
            return
        self._load()
        self._render()
        self.update()

    def _publish(self, post: BlogPost) -> None:
        self._act("publishing", lambda: self.ctx.blog_api.publish_post(post.id))

    def _unpublish(self, post: BlogPost) -> None:
        self._act("unpublishing", lambda: self.ctx.blog_api.unpublish_post(post.id))

    def _delete(self, post: BlogPost) -> None:
        if not self.confirm.request(post.id):
            self._render()
            self.update()
            return
        self._act("deleting", lambda: self.ctx.blog_api.delete_post(post.id))
