"""
Single article view.

Engagement is tracked only once the article has loaded; ``dispose`` is
registered with the router so leaving the view sends the final report.
"""

import logging
from typing import Any

import flet as ft

from legal_clinic.components.engagement import EngagementTracker
from legal_clinic.domain.entities import BlogPost
from legal_clinic.exceptions import ApiError
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.state import AppState

logger = logging.getLogger(__name__)


class BlogPostView(ft.Column):  # type: ignore
    def __init__(
        self,
        page: ft.Page,
        ctx: ServiceContext,
        state: AppState,
        post_id: str,
        tracker: EngagementTracker | None = None,
    ) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=12)
        self.page = page
        self.ctx = ctx
        self.state = state
        self.post_id = post_id
        self.tracker = tracker or ctx.new_tracker()
        self.post: BlogPost | None = None
        self.is_bookmarked = False
        self.bookmark_button = ft.ElevatedButton(on_click=self._toggle_bookmark)

        back = ft.TextButton("← Back to Articles", on_click=lambda _: page.go("/blog"))
        try:
            self.post = ctx.blog_api.get_post(post_id)
        except ApiError as err:
            self.controls = [
                back,
                ft.Text("Article Not Found", size=24, weight=ft.FontWeight.BOLD),
                ft.Text(err.message or "This article could not be found", color="error"),
            ]
            return

        self._check_bookmark()
        self.controls = [back, *self._render(self.post)]
        self.tracker.start(self.post_id, enabled=ctx.settings.tracking.enabled)

    def dispose(self) -> None:
        self.tracker.stop()

    def _check_bookmark(self) -> None:
        user = self.state.current_user
        if not user:
            return
        try:
            self.is_bookmarked = self.ctx.bookmark_api.is_bookmarked(self.post_id, user.id)
        except ApiError as err:
            logger.warning("Failed to check bookmark: %s", err)

    def _sync_bookmark_button(self) -> None:
        self.bookmark_button.text = "Saved" if self.is_bookmarked else "Save"
        self.bookmark_button.icon = (
            ft.Icons.BOOKMARK if self.is_bookmarked else ft.Icons.BOOKMARK_BORDER
        )

    def _render(self, post: BlogPost) -> list[ft.Control]:
        meta = [ft.Text(post.category or "General", color="secondary")]
        if post.created_at:
            meta.append(ft.Text(post.created_at.strftime("%B %d, %Y"), italic=True))
        meta.append(ft.Text(f"{post.view_count or 0} views", size=12))

        controls: list[ft.Control] = [
            ft.Row(meta, spacing=16),
            ft.Text(post.title, size=30, weight=ft.FontWeight.BOLD, color="primary"),
        ]
        if post.summary:
            controls.append(ft.Text(post.summary, size=16, italic=True))
        if self.state.current_user:
            self._sync_bookmark_button()
            controls.append(self.bookmark_button)
        if post.image_url:
            controls.append(ft.Image(src=post.image_url, width=700, fit=ft.ImageFit.CONTAIN))

        controls.append(ft.Divider())
        controls.append(ft.Markdown(post.content, selectable=True))

        if post.tag_list:
            controls.append(ft.Row([ft.Text(f"#{t}", color="secondary") for t in post.tag_list], wrap=True))
        return controls

    def _toggle_bookmark(self, _: Any) -> None:
        user = self.state.current_user
        if not user:
            self.page.go("/login")
            return

        self.bookmark_button.disabled = True
        self.update()
        try:
            if self.is_bookmarked:
                self.ctx.bookmark_api.remove(self.post_id, user.id)
            else:
                self.ctx.bookmark_api.add(self.post_id, user.id)
            self.is_bookmarked = not self.is_bookmarked
        except ApiError:
            self.page.open(ft.SnackBar(ft.Text("Failed to update bookmark")))
        finally:
            self.bookmark_button.disabled = False
        self._sync_bookmark_button()
        self.update()
