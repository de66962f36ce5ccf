"""Team detail screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import flet as ft

from dugout.app.routes import ROUTE_EXPLORE, team_route
from dugout.app.ui.components.team_card import team_avatar
from dugout.app.ui.theme import BG_BAR, BG_SCREEN, BOTTOM_BAR_HEIGHT, ICON_BAR, TEXT_BODY, TEXT_TITLE, TOP_BAR_HEIGHT
from dugout.shared.domain.catalog import Team, share_text

if TYPE_CHECKING:
    from dugout.app.state import Store

logger = logging.getLogger(__name__)


class TeamDetailController:
    """Long-form team text with back and share actions."""

    def __init__(self, store: Store, page: ft.Page, team: Team):
        self.store = store
        self.page = page
        self.team = team

    def _share(self, e: ft.ControlEvent) -> None:
        payload = share_text(self.team)
        logger.info(f"Sharing details for '{self.team.name}'")
        self.page.launch_url(payload.as_mailto())

    def build_view(self) -> ft.View:
        body = self.team.detail or self.team.summary
        return ft.View(
            route=team_route(self.team.name),
            bgcolor=BG_SCREEN,
            padding=0,
            controls=[
                ft.Container(
                    height=TOP_BAR_HEIGHT,
                    bgcolor=BG_BAR,
                    padding=ft.padding.only(left=16, right=16),
                    content=ft.Row(
                        [
                            ft.IconButton(ft.Icons.ARROW_BACK, icon_color=ICON_BAR, tooltip="Atrás",
                                          on_click=self._back),
                            ft.IconButton(ft.Icons.SHARE, icon_color=ICON_BAR, tooltip="Compartir",
                                          on_click=self._share),
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                ),
                ft.Container(
                    expand=True,
                    padding=24,
                    content=ft.Column(
                        [
                            ft.Row([team_avatar(self.team)], alignment=ft.MainAxisAlignment.CENTER),
                            ft.Text(self.team.name, size=28, weight=ft.FontWeight.BOLD, color=TEXT_TITLE,
                                    text_align=ft.TextAlign.CENTER),
                            ft.Text(body, size=16, color=TEXT_BODY, text_align=ft.TextAlign.JUSTIFY),
                        ],
                        spacing=16,
                        scroll=ft.ScrollMode.AUTO,
                        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    ),
                ),
                ft.Container(
                    height=BOTTOM_BAR_HEIGHT,
                    bgcolor=BG_BAR,
                    content=ft.Row(
                        [ft.IconButton(ft.Icons.HOME, icon_color=ICON_BAR, tooltip="Inicio",
                                       on_click=lambda e: self.page.go(ROUTE_EXPLORE))],
                        alignment=ft.MainAxisAlignment.CENTER,
                    ),
                ),
            ],
        )

    def _back(self, e: ft.ControlEvent) -> None:
        # The shell stacks the detail view on top of the screen it was opened from
        if len(self.page.views) > 1:
            self.page.views.pop()
            self.page.go(self.page.views[-1].route or ROUTE_EXPLORE)
        else:
            self.page.go(ROUTE_EXPLORE)
