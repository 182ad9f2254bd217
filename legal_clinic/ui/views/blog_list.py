import logging
from typing import Any

import flet as ft

from legal_clinic.components.catalog import categories_of, filter_posts
from legal_clinic.domain.entities import BlogPost
from legal_clinic.exceptions import ApiError
from legal_clinic.ui.components.article_card import ArticleCard
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.state import AppState

logger = logging.getLogger(__name__)


class BlogListView(ft.Column):  # type: ignore
    """Published articles with category chips, search and bookmark toggles."""

    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=16)
        self.page = page
        self.ctx = ctx
        self.state = state
        self.posts: list[BlogPost] = []
        self.bookmarked: set[str] = set()
        self.error: str | None = None

        self.search = ft.TextField(
            label="Search articles",
            prefix_icon=ft.Icons.SEARCH,
            value=state.search,
            on_change=self._on_search,
            width=400,
        )
        self.chips = ft.Row(wrap=True, spacing=8)
        self.count = ft.Text(size=12, color="onSurfaceVariant")
        self.grid = ft.Row(wrap=True, spacing=16, run_spacing=16)

        self._load()
        self.controls = [
            ft.Text("Legal Articles", size=28, weight=ft.FontWeight.BOLD, color="primary"),
            ft.Text("Plain-language guides to your rights and the law."),
            self.search,
            self.chips,
            self.count,
            self.grid,
        ]
        self._render()

    def _load(self) -> None:
        try:
            self.posts = self.ctx.blog_api.get_published_posts()
        except ApiError as err:
            self.error = err.message
            return

        user = self.state.current_user
        if user:
            try:
                saved = self.ctx.bookmark_api.list_for_user(user.id, 0, 100)
                self.bookmarked = {str(p.id) for p in saved}
            except ApiError as err:
                logger.warning("Failed to load bookmarks: %s", err)

    def _render(self) -> None:
        categories = categories_of(self.posts, self.ctx.settings.ui.categories)
        self.chips.controls = [
            ft.Chip(
                label=ft.Text(name),
                selected=name == self.state.selected_category,
                on_select=lambda _, n=name: self._on_category(n),
            )
            for name in categories
        ]

        if self.error:
            self.count.value = ""
            self.grid.controls = [ft.Text(self.error, color="error")]
            return

        visible = filter_posts(self.posts, self.state.selected_category, self.state.search)
        self.count.value = f"{len(visible)} {'article' if len(visible) == 1 else 'articles'}"
        if not visible:
            self.grid.controls = [
                ft.Text("No articles found. Try adjusting your filters or search terms.")
            ]
            return

        signed_in = self.state.current_user is not None
        self.grid.controls = [
            ArticleCard(
                post,
                on_open=lambda p: self.page.go(f"/blog/{p.id}"),
                bookmarked=(str(post.id) in self.bookmarked) if signed_in else None,
                on_toggle_bookmark=self._toggle_bookmark,
            )
            for post in visible
        ]

    def _refresh(self) -> None:
        self._render()
        self.update()

    def _on_search(self, e: Any) -> None:
        self.state.search = e.control.value or ""
        self._refresh()

    def _on_category(self, name: str) -> None:
        self.state.selected_category = name
        self._refresh()

    def _toggle_bookmark(self, post: BlogPost) -> None:
        user = self.state.current_user
        if not user:
            self.page.go("/login")
            return

        post_id = str(post.id)
        try:
            if post_id in self.bookmarked:
                self.ctx.bookmark_api.remove(post_id, user.id)
                self.bookmarked.discard(post_id)
            else:
                self.ctx.bookmark_api.add(post_id, user.id)
                self.bookmarked.add(post_id)
        except ApiError as err:
            self.page.open(ft.SnackBar(ft.Text(f"Failed to update bookmark: {err.message}")))
            return
        self._refresh()
