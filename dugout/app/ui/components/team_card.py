"""Team card and bar components shared by the list screens."""

from __future__ import annotations

from typing import Callable, Optional

import flet as ft

from dugout.app.ui.theme import (
    AVATAR_RADIUS, BG_BANNER, BG_BAR, BG_CARD, BG_SEARCH_FIELD, BOTTOM_BAR_HEIGHT,
    CARD_RADIUS, ICON_BAR, ICON_DELETE, TEXT_BODY, TEXT_TITLE, TOP_BAR_HEIGHT,
    favorite_icon_color, team_initials,
)
from dugout.shared.domain.catalog import Team

Handler = Callable[[ft.ControlEvent], None]


def team_avatar(team: Team) -> ft.CircleAvatar:
    """Round team logo; falls back to initials when the image asset is missing."""
    return ft.CircleAvatar(
        foreground_image_src=team.image_ref or None,
        content=ft.Text(team_initials(team.name), weight=ft.FontWeight.BOLD),
        radius=AVATAR_RADIUS,
    )


def build_team_card(
    team: Team,
    is_favorite: bool,
    on_open: Handler,
    on_favorite: Optional[Handler] = None,
    on_delete: Optional[Handler] = None,
) -> ft.Control:
    """Card with avatar, name and summary.

    League screens pass ``on_favorite`` (heart toggle), the favorites screen
    passes ``on_delete``. The heart state comes from the caller, which reads
    it from the FavoritesStore.
    """
    actions: list[ft.Control] = []
    if on_favorite is not None:
        actions.append(
            ft.IconButton(
                icon=ft.Icons.FAVORITE if is_favorite else ft.Icons.FAVORITE_BORDER,
                icon_color=favorite_icon_color(is_favorite),
                tooltip="Favorito",
                on_click=on_favorite,
            )
        )
    if on_delete is not None:
        actions.append(
            ft.IconButton(
                icon=ft.Icons.DELETE,
                icon_color=ICON_DELETE,
                tooltip="Eliminar",
                on_click=on_delete,
            )
        )

    return ft.Container(
        bgcolor=BG_CARD,
        border_radius=CARD_RADIUS,
        padding=16,
        margin=ft.margin.symmetric(horizontal=8, vertical=4),
        on_click=on_open,
        content=ft.Row(
            [
                team_avatar(team),
                ft.Column(
                    [
                        ft.Text(team.name, size=20, weight=ft.FontWeight.BOLD, color=TEXT_TITLE),
                        ft.Text(team.summary, size=14, color=TEXT_BODY),
                    ],
                    spacing=2,
                    expand=True,
                ),
                *actions,
            ],
            spacing=16,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )


def build_top_bar(title: str, on_back: Optional[Handler] = None) -> ft.Control:
    """Black header with back arrow and centered title."""
    leading: ft.Control = (
        ft.IconButton(ft.Icons.ARROW_BACK, icon_color=ICON_BAR, tooltip="Atrás", on_click=on_back)
        if on_back
        else ft.Container(width=48)
    )
    return ft.Container(
        height=TOP_BAR_HEIGHT,
        bgcolor=BG_BAR,
        padding=ft.padding.only(left=16, right=16),
        content=ft.Row(
            [
                leading,
                ft.Text(
                    title,
                    color=TEXT_TITLE,
                    size=18,
                    weight=ft.FontWeight.BOLD,
                    text_align=ft.TextAlign.CENTER,
                    expand=True,
                ),
                ft.Container(width=48),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )


def build_bottom_bar(
    on_home: Handler,
    on_favorites: Handler,
    on_search: Optional[Callable[[str], None]] = None,
    query: str = "",
) -> ft.Control:
    """Home / Favorites / Search bar.

    The search icon expands into a text field; every keystroke calls
    ``on_search`` and the close button clears the query.
    """
    controls: list[ft.Control] = [
        ft.IconButton(ft.Icons.HOME, icon_color=ICON_BAR, tooltip="Inicio", on_click=on_home),
        ft.IconButton(ft.Icons.FAVORITE, icon_color=ICON_BAR, tooltip="Favoritos", on_click=on_favorites),
    ]

    if on_search is not None:
        search_field = ft.TextField(
            value=query,
            label="Buscar equipo",
            dense=True,
            bgcolor=BG_SEARCH_FIELD,
            border_radius=8,
            prefix_icon=ft.Icons.SEARCH,
            visible=bool(query),
            autofocus=bool(query),  # views are rebuilt on every keystroke
            expand=True,
            on_change=lambda e: on_search(e.control.value or ""),
        )
        search_button = ft.IconButton(ft.Icons.SEARCH, icon_color=ICON_BAR, tooltip="Buscar", visible=not query)

        def _open(e: ft.ControlEvent) -> None:
            search_field.visible = True
            search_button.visible = False
            e.page.update()

        def _close(e: ft.ControlEvent) -> None:
            search_field.value = ""
            search_field.visible = False
            search_button.visible = True
            on_search("")
            e.page.update()

        search_button.on_click = _open
        search_field.suffix = ft.IconButton(ft.Icons.CLOSE, tooltip="Cerrar", on_click=_close)
        controls.extend([search_button, search_field])

    return ft.Container(
        height=BOTTOM_BAR_HEIGHT,
        bgcolor=BG_BAR,
        content=ft.Row(controls, alignment=ft.MainAxisAlignment.SPACE_EVENLY),
    )


def build_banner(text: str, visible: bool, on_dismiss: Handler) -> ft.Control:
    """Confirmation banner ("Se agregó a favoritos") with an OK button."""
    return ft.Container(
        visible=visible,
        bgcolor=BG_BANNER,
        border_radius=4,
        padding=ft.padding.symmetric(horizontal=16, vertical=8),
        margin=8,
        content=ft.Row(
            [
                ft.Text(text, color=TEXT_BODY, expand=True),
                ft.TextButton("OK", on_click=on_dismiss),
            ],
        ),
    )
