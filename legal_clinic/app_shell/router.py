import logging
import re
from collections.abc import Callable, Collection
from typing import Any, NamedTuple
from urllib.parse import parse_qsl, urlsplit

import flet as ft

from legal_clinic.components.auth_gate import GateOutcome, evaluate_access
from legal_clinic.components.session import SessionEvent, SessionEventType, SessionStore

logger = logging.getLogger(__name__)


class RouteConfig(NamedTuple):
    # builder accepts page and **kwargs
    builder: Callable[..., ft.View]
    # None = public; empty = any signed-in user; otherwise the allowed roles
    allowed_roles: frozenset[str] | None


class Router:
    def __init__(self, page: ft.Page, sessions: SessionStore):
        self.page = page
        self.sessions = sessions
        self.routes: dict[str, RouteConfig] = {}
        # Simple dynamic routes: regex -> config
        self.dynamic_routes: dict[str, RouteConfig] = {}
        self.redirects: dict[str, str] = {}
        # Teardown hooks of the view currently on screen
        self._cleanups: list[Callable[[], None]] = []
        self.sessions.subscribe(self._on_session_event)

    def register(
        self,
        route: str,
        builder: Callable[..., ft.View],
        allowed_roles: Collection[str] | None = None,
    ) -> None:
        self.routes[route] = RouteConfig(builder, _roles(allowed_roles))

    def register_dynamic(
        self,
        pattern: str,
        builder: Callable[..., ft.View],
        allowed_roles: Collection[str] | None = None,
    ) -> None:
        """Register a regex pattern route.
        Example: '^/blog/(?P<post_id>[^/]+)$'
        The builder will receive regex group dict as kwargs.
        """
        self.dynamic_routes[pattern] = RouteConfig(builder, _roles(allowed_roles))

    def register_redirect(self, route: str, target: str) -> None:
        self.redirects[route] = target

    def on_leave(self, cleanup: Callable[[], None]) -> None:
        """Run ``cleanup`` when the current view is replaced."""
        self._cleanups.append(cleanup)

    def resolve(self, path: str) -> tuple[RouteConfig | None, dict[str, Any]]:
        # 1. Exact Match
        config = self.routes.get(path)
        if config:
            return config, {}

        # 2. Dynamic Match
        for pattern, dyn_config in self.dynamic_routes.items():
            match = re.match(pattern, path)
            if match:
                return dyn_config, match.groupdict()
        return None, {}

    def handle_route_change(self, e: ft.RouteChangeEvent) -> None:
        self.show(e.route or "/")

    def show(self, route: str) -> None:
        logger.info(f"Navigate to: {route}")
        parts = urlsplit(route)
        path = parts.path or "/"

        target = self.redirects.get(path)
        if target:
            self.page.go(target)
            return

        # Leaving the previous view
        self._run_cleanups()
        self.page.views.clear()

        config, kwargs = self.resolve(path)
        if not config:
            # 404 - no matching route found
            logger.warning(f"No route found for: {route}")
            self.page.views.append(
                ft.View(
                    "/404",
                    [ft.AppBar(title=ft.Text("404")), ft.Text(f"Page not found: {route}")]
                )
            )
            self.page.update()
            return

        # Role Guard
        if config.allowed_roles is not None:
            decision = evaluate_access(
                self.sessions.current, config.allowed_roles, self.sessions.established
            )
            if decision.outcome is GateOutcome.LOADING:
                self.page.views.append(
                    ft.View(route, [ft.ProgressRing(), ft.Text("Loading...")])
                )
                self.page.update()
                return
            if decision.redirect_to:
                logger.info(f"Access denied to {route}. Redirecting to {decision.redirect_to}.")
                self.page.go(decision.redirect_to)
                return

        kwargs.update(dict(parse_qsl(parts.query)))

        # Build View
        # Pass page first, then kwargs
        try:
            view = config.builder(self.page, **kwargs)
            self.page.views.append(view)
            self.page.update()
        except TypeError as err:
            logger.error(f"Error building view for {route}: {err}")
            self.page.views.append(ft.View("/error", [ft.Text(f"Error: {err}")]))
            self.page.update()

    def view_pop(self, view: ft.View) -> None:
        self.page.views.pop()
        top_view = self.page.views[-1]
        self.page.go(top_view.route)

    def _run_cleanups(self) -> None:
        cleanups, self._cleanups = self._cleanups, []
        for cleanup in cleanups:
            cleanup()

    def _on_session_event(self, event: SessionEvent) -> None:
        if event.type is SessionEventType.INVALIDATED:
            self.page.go("/login")
        elif event.type is SessionEventType.RESTORED:
            # A protected route may be showing the loading state
            self.show(self.page.route or "/")


def _roles(allowed_roles: Collection[str] | None) -> frozenset[str] | None:
    return None if allowed_roles is None else frozenset(allowed_roles)
