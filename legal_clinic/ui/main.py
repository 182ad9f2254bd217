import logging
from typing import Any

import flet as ft

from legal_clinic.adapters.storage import FletClientStorage
from legal_clinic.adapters.unload import UnloadHub
from legal_clinic.app_shell.router import Router
from legal_clinic.domain.entities import ROLE_ADMIN, ROLE_USER
from legal_clinic.exceptions import SettingsError
from legal_clinic.settings.loader import default_settings_path, load_settings
from legal_clinic.ui.context import ServiceContext
from legal_clinic.ui.layout import MainLayout
from legal_clinic.ui.state import AppState
from legal_clinic.ui.theme import AppTheme
from legal_clinic.ui.views.admin_blog import AdminBlogView
from legal_clinic.ui.views.admin_dashboard import AdminDashboardContent
from legal_clinic.ui.views.admin_users import AdminUsersView
from legal_clinic.ui.views.blog_list import BlogListView
from legal_clinic.ui.views.blog_post import BlogPostView
from legal_clinic.ui.views.login import LoginView
from legal_clinic.ui.views.misc import ChatUnavailableContent, UnauthorizedContent
from legal_clinic.ui.views.password_reset import ForgotPasswordContent, ResetPasswordContent
from legal_clinic.ui.views.profile import ProfileView
from legal_clinic.ui.views.register import RegisterView

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SIGNED_IN = [ROLE_USER, ROLE_ADMIN]
ADMIN_ONLY = [ROLE_ADMIN]


def main(page: ft.Page) -> None:
    # 1. Load Settings
    settings_path = default_settings_path()
    try:
        settings = load_settings(settings_path)
    except SettingsError as e:
        logger.error(str(e))
        page.add(ft.Text(f"Error: {e}", color="red", size=20))
        return
    logger.info("Settings loaded from %s", settings_path)

    page.title = settings.ui.title

    # 2. Theme Setup
    AppTheme.apply(page)

    # 3. Create Context
    unload_hub = UnloadHub()
    unload_hub.attach(page)
    ctx = ServiceContext.create(settings, FletClientStorage(page), unload_hub)

    # 4. Restore the persisted session before the first route is shown
    ctx.sessions.restore()

    # 5. App State
    state = AppState(ctx.sessions)

    # 6. Routing Setup
    router = Router(page, ctx.sessions)

    # --- Layout Wrapper ---
    def make_view(route: str, content: ft.Control) -> ft.View:
        def handle_nav(r: str) -> None:
            page.go(r)

        def handle_logout() -> None:
            state.logout()
            page.go("/login")

        layout = MainLayout(
            page=page,
            app_state=state,
            content=content,
            on_logout=handle_logout,
            on_nav=handle_nav,
            toggle_theme=lambda: AppTheme.toggle(page),
            title=settings.ui.title,
            current_route=route,
        )
        router.on_leave(layout.dispose)
        return ft.View(route, [layout], padding=0)

    # --- Builders ---
    # Builders take **kwargs: stray query parameters end up there.

    def blog_list_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/blog", BlogListView(page, ctx, state))

    def blog_post_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        post_id = kwargs.get("post_id", "")
        content = BlogPostView(page, ctx, state, post_id=post_id)
        # Ends engagement tracking when the reader navigates away
        router.on_leave(content.dispose)
        return make_view(f"/blog/{post_id}", content)

    def chat_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/chat", ChatUnavailableContent(page))

    def login_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/login", LoginView(page, ctx, state))

    def register_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/register", RegisterView(page, ctx, state))

    def forgot_password_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/forgot-password", ForgotPasswordContent(page, ctx))

    def reset_password_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        token = kwargs.get("token")
        return make_view("/reset-password", ResetPasswordContent(page, ctx, token=token))

    def profile_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/profile", ProfileView(page, ctx, state))

    def admin_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/admin", AdminDashboardContent(page, ctx, state))

    def admin_blog_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/admin/blog", AdminBlogView(page, ctx))

    def admin_users_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/admin/users", AdminUsersView(page, ctx, state))

    def unauthorized_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        return make_view("/unauthorized", UnauthorizedContent(page))

    # --- Register Routes ---

    router.register_redirect("/", "/blog")

    # Public
    router.register("/blog", blog_list_builder)
    router.register_dynamic(r"^/blog/(?P<post_id>[^/]+)$", blog_post_builder)
    router.register("/chat", chat_builder)
    router.register("/login", login_builder)
    router.register("/register", register_builder)
    router.register("/forgot-password", forgot_password_builder)
    router.register("/reset-password", reset_password_builder)
    router.register("/unauthorized", unauthorized_builder)

    # Protected
    router.register("/profile", profile_builder, allowed_roles=SIGNED_IN)
    router.register("/admin", admin_builder, allowed_roles=ADMIN_ONLY)
    router.register("/admin/blog", admin_blog_builder, allowed_roles=ADMIN_ONLY)
    router.register("/admin/users", admin_users_builder, allowed_roles=ADMIN_ONLY)

    # Wire up events
    page.on_route_change = router.handle_route_change
    page.on_view_pop = router.view_pop

    # Go to initial route (default to "/" if route is empty)
    page.go(page.route or "/")


def run() -> None:
    ft.app(target=main, view=ft.AppView.WEB_BROWSER)


if __name__ == "__main__":
    run()
