"""Welcome and explore (league picker) screens."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import flet as ft

from dugout.app.routes import ROUTE_EXPLORE, ROUTE_FAVORITES, ROUTE_WELCOME, LEAGUE_ROUTES
from dugout.app.ui.components.team_card import build_top_bar
from dugout.app.ui.theme import (
    BG_BAR, BG_SCREEN, BOTTOM_BAR_HEIGHT, BUTTON_PRIMARY_BG, BUTTON_PRIMARY_TEXT, ICON_BAR, TEXT_TITLE,
)
from dugout.shared.domain.catalog import League

if TYPE_CHECKING:
    from dugout.app.state import Store

logger = logging.getLogger(__name__)


class WelcomeController:
    """Landing screen with the "Explorar" call to action."""

    def __init__(self, store: Store, page: ft.Page):
        self.store = store
        self.page = page

    def build_view(self) -> ft.View:
        return ft.View(
            route=ROUTE_WELCOME,
            bgcolor=BG_SCREEN,
            padding=0,
            controls=[
                ft.Container(
                    expand=True,
                    alignment=ft.alignment.center,
                    content=ft.Column(
                        [
                            ft.Text("Bienvenido a", size=28, color=TEXT_TITLE),
                            ft.Text("MLB THE SHOW", size=40, weight=ft.FontWeight.W_900, color=TEXT_TITLE),
                            ft.Container(height=32),
                            ft.ElevatedButton(
                                "Explorar",
                                bgcolor=BUTTON_PRIMARY_BG,
                                color=BUTTON_PRIMARY_TEXT,
                                on_click=lambda e: self.page.go(ROUTE_EXPLORE),
                            ),
                        ],
                        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                        alignment=ft.MainAxisAlignment.CENTER,
                    ),
                )
            ],
        )


class ExploreController:
    """League picker: one tile per league plus a shortcut to favorites."""

    def __init__(self, store: Store, page: ft.Page):
        self.store = store
        self.page = page

    def _league_tile(self, league: League) -> ft.Control:
        count = len(self.store.catalog.teams_in(league))
        return ft.Container(
            bgcolor=BUTTON_PRIMARY_BG,
            border_radius=16,
            padding=24,
            margin=ft.margin.symmetric(horizontal=24, vertical=12),
            on_click=lambda e: self.page.go(LEAGUE_ROUTES[league]),
            content=ft.Column(
                [
                    ft.Text(league.display_title, size=24, weight=ft.FontWeight.BOLD, color=BUTTON_PRIMARY_TEXT),
                    ft.Text(f"{count} equipos", color=BUTTON_PRIMARY_TEXT),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )

    def build_view(self) -> ft.View:
        return ft.View(
            route=ROUTE_EXPLORE,
            bgcolor=BG_SCREEN,
            padding=0,
            controls=[
                build_top_bar("MLB THE SHOW", on_back=lambda e: self.page.go(ROUTE_WELCOME)),
                ft.Column(
                    [self._league_tile(league) for league in League],
                    expand=True,
                    alignment=ft.MainAxisAlignment.CENTER,
                ),
                ft.Container(
                    height=BOTTOM_BAR_HEIGHT,
                    bgcolor=BG_BAR,
                    content=ft.Row(
                        [
                            ft.IconButton(
                                ft.Icons.FAVORITE,
                                icon_color=ICON_BAR,
                                tooltip="Favoritos",
                                on_click=lambda e: self.page.go(ROUTE_FAVORITES),
                            )
                        ],
                        alignment=ft.MainAxisAlignment.CENTER,
                    ),
                ),
            ],
        )
