"""League listings and the favorites listing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

import flet as ft

from dugout.app.routes import LEAGUE_ROUTES, ROUTE_EXPLORE, ROUTE_FAVORITES, team_route
from dugout.app.ui.components.team_card import build_banner, build_bottom_bar, build_team_card, build_top_bar
from dugout.app.ui.theme import BG_SCREEN, TEXT_EMPTY_STATE
from dugout.shared.domain.catalog import League, Team

if TYPE_CHECKING:
    from dugout.app.state import Store

logger = logging.getLogger(__name__)


class _TeamListController:
    """Shared plumbing for screens that list team cards."""

    def __init__(self, store: Store, page: ft.Page):
        self.store = store
        self.page = page

    def _open(self, team: Team):
        return lambda e: self.page.go(team_route(team.name))

    def _search(self, query: str) -> None:
        self.page.run_task(self.store.app.search, query)
        # Results are listed on the favorites screen
        if query.strip() and self.page.route != ROUTE_FAVORITES:
            self.page.go(ROUTE_FAVORITES)

    def _bottom_bar(self) -> ft.Control:
        return build_bottom_bar(
            on_home=lambda e: self.page.go(ROUTE_EXPLORE),
            on_favorites=lambda e: self.page.go(ROUTE_FAVORITES),
            on_search=self._search,
            query=self.store.app.search_query.value,
        )

    def _banner(self) -> ft.Control:
        return build_banner(
            self.store.app.banner_text.value,
            self.store.app.banner_visible.value,
            on_dismiss=lambda e: self.store.app.dismiss_banner(),
        )

    def _list(self, cards: List[ft.Control], empty_text: str) -> ft.Control:
        if not cards:
            return ft.Container(
                expand=True,
                alignment=ft.alignment.center,
                content=ft.Text(empty_text, color=TEXT_EMPTY_STATE, italic=True),
            )
        return ft.ListView(controls=cards, expand=True, spacing=8, padding=ft.padding.only(top=8))


class LeagueController(_TeamListController):
    """All teams of one league, each with a favorite heart."""

    def __init__(self, store: Store, page: ft.Page, league: League):
        super().__init__(store, page)
        self.league = league

    def _toggle(self, team: Team):
        return lambda e: self.page.run_task(self.store.app.toggle_favorite, team.name)

    def build_view(self) -> ft.View:
        cards = [
            build_team_card(
                team,
                is_favorite=self.store.favorites.is_favorite(team),
                on_open=self._open(team),
                on_favorite=self._toggle(team),
            )
            for team in self.store.catalog.teams_in(self.league)
        ]
        return ft.View(
            route=LEAGUE_ROUTES[self.league],
            bgcolor=BG_SCREEN,
            padding=0,
            controls=[
                build_top_bar(self.league.display_title, on_back=lambda e: self.page.go(ROUTE_EXPLORE)),
                self._list(cards, "No hay equipos"),
                self._banner(),
                self._bottom_bar(),
            ],
        )


class FavoritesController(_TeamListController):
    """Favorites (or search results while a query is active) with delete buttons."""

    def _remove(self, team: Team):
        return lambda e: self.page.run_task(self.store.app.remove_favorite, team.name)

    def build_view(self) -> ft.View:
        cards = []
        for team in self.store.favorites.displayed_teams():
            is_favorite = self.store.favorites.is_favorite(team)
            cards.append(
                build_team_card(
                    team,
                    is_favorite=is_favorite,
                    on_open=self._open(team),
                    # Search results can include non-favorites; those get a heart instead of a bin
                    on_favorite=None if is_favorite else (
                        lambda e, name=team.name: self.page.run_task(self.store.app.toggle_favorite, name)
                    ),
                    on_delete=self._remove(team) if is_favorite else None,
                )
            )

        empty_text = "Sin resultados" if self.store.favorites.query else "Aún no tienes equipos favoritos"
        return ft.View(
            route=ROUTE_FAVORITES,
            bgcolor=BG_SCREEN,
            padding=0,
            controls=[
                build_top_bar("Equipos Favoritos", on_back=lambda e: self.page.go(ROUTE_EXPLORE)),
                self._list(cards, empty_text),
                self._banner(),
                self._bottom_bar(),
            ],
        )
