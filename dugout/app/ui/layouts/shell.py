from __future__ import annotations

import logging
from typing import Optional

import flet as ft

from dugout.app.controllers.team_detail_controller import TeamDetailController
from dugout.app.controllers.team_list_controller import FavoritesController, LeagueController
from dugout.app.controllers.welcome_controller import ExploreController, WelcomeController
from dugout.app.routes import (
    ROUTE_EXPLORE, ROUTE_FAVORITES, ROUTE_TEAM_PREFIX, ROUTE_WELCOME, league_for_route, parse_route,
)
from dugout.app.state import Store
from dugout.app.ui.theme import BG_SCREEN, DIRT_BROWN

logger = logging.getLogger(__name__)


def apply_shell_theme(page: ft.Page, store: Store) -> None:
    """Apply the ballpark theme and the configured window size."""
    ui = store.config.ui
    page.title = "MLB The Show"
    page.theme = ft.Theme(color_scheme_seed=DIRT_BROWN, use_material3=True)
    page.theme_mode = ft.ThemeMode.DARK if ui.theme_mode == "dark" else ft.ThemeMode.LIGHT
    page.bgcolor = BG_SCREEN
    page.padding = 0
    page.window.width = ui.window_width
    page.window.height = ui.window_height


class Shell:
    """Route table and view stack for the page."""

    def __init__(self, page: ft.Page, store: Store):
        self.page = page
        self.store = store
        self._list_route = ROUTE_EXPLORE  # screen a detail view was opened from

    def _build_screen(self, route_id: str) -> ft.View:
        if route_id == ROUTE_EXPLORE:
            return ExploreController(self.store, self.page).build_view()
        if route_id == ROUTE_FAVORITES:
            return FavoritesController(self.store, self.page).build_view()
        league = league_for_route(route_id)
        if league is not None:
            return LeagueController(self.store, self.page, league).build_view()
        return WelcomeController(self.store, self.page).build_view()

    def _build_stack(self, route: str) -> list[ft.View]:
        match = parse_route(route)
        if match.route_id != ROUTE_TEAM_PREFIX:
            self._list_route = match.route_id
            return [self._build_screen(match.route_id)]

        team = self.store.app.resolve_team(route)
        if team is None:
            # Unknown team: nothing to display, keep the screen underneath
            return [self._build_screen(self._list_route)]
        return [
            self._build_screen(self._list_route),
            TeamDetailController(self.store, self.page, team).build_view(),
        ]

    def render(self, route: Optional[str] = None) -> None:
        route = route if route is not None else self.page.route
        self.store.app.set_nav(route)
        self.page.views.clear()
        self.page.views.extend(self._build_stack(route))
        try:
            self.page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    def _on_route_change(self, e: ft.RouteChangeEvent) -> None:
        logger.debug(f"Route change: {e.route}")
        self.render(e.route)

    def _on_view_pop(self, e: ft.ViewPopEvent) -> None:
        if len(self.page.views) > 1:
            self.page.views.pop()
            self.page.go(self.page.views[-1].route or ROUTE_EXPLORE)
        else:
            self.page.go(ROUTE_WELCOME)

    def _sync_route(self) -> None:
        # Programmatic navigation (nav.select) changes the Rx route first
        target = self.store.app.route.value
        if target != self.page.route:
            self.page.go(target)

    def _refresh(self) -> None:
        self.render(self.page.route)

    def attach(self) -> None:
        self.page.on_route_change = self._on_route_change
        self.page.on_view_pop = self._on_view_pop

        # --- Listener Bindings ---
        self.store.app.route.listen(self._sync_route)
        self.store.app.favorite_names.listen(self._refresh)
        self.store.app.displayed_names.listen(self._refresh)
        self.store.app.banner_visible.listen(self._refresh)


def build_shell(page: ft.Page, store: Store) -> Shell:
    apply_shell_theme(page, store)
    shell = Shell(page, store)
    shell.attach()
    return shell
