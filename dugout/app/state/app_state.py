"""Application Shell State Management.

Reactive UI state built on FletXr primitives. Views read the Rx properties
and listen for changes; user intents arrive through the EventBus and are
applied to the FavoritesStore here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fletx.core import RxBool, RxList, RxStr

from dugout.app.routes import ROUTE_TEAM_PREFIX, ROUTE_WELCOME, parse_route
from dugout.shared.core import events
from dugout.shared.core.configuration import SystemConfig
from dugout.shared.core.errors import TeamNotFoundError
from dugout.shared.core.event_bus import EventBus, EventPayload
from dugout.shared.core.service_registry import register_cleanup_handler
from dugout.shared.domain.catalog import Catalog, Team
from dugout.shared.domain.favorites import (
    DismissTimer,
    FavoritesSnapshot,
    FavoritesStore,
    confirmation_message,
)

logger = logging.getLogger(__name__)


class AppState:
    """Reactive State for the Application Shell.

    Owns navigation, the mirrored favorites lists and the confirmation banner.
    It subscribes to EventBus intents and to FavoritesStore snapshots, and
    updates reactive properties that trigger UI rebuilds.
    """

    def __init__(
        self,
        event_bus: EventBus,
        catalog: Catalog,
        favorites: FavoritesStore,
        config: SystemConfig,
    ) -> None:
        self.bus = event_bus
        self.catalog = catalog
        self.favorites = favorites
        self.config = config

        # Navigation
        self.route: RxStr = RxStr(ROUTE_WELCOME)

        # Favorites mirror (team names, display order)
        self.favorite_names: RxList[str] = RxList([])
        self.displayed_names: RxList[str] = RxList([])
        self.search_query: RxStr = RxStr("")

        # Confirmation banner
        self.banner_text: RxStr = RxStr("")
        self.banner_visible: RxBool = RxBool(False)

        self._dismiss_timer = DismissTimer(config.banner.dismiss_seconds, self.dismiss_banner)
        self._unsubscribe_store = None
        self._last_revision = favorites.revision
        self._publish_tasks: set[asyncio.Task] = set()
        self._started = False

    async def initialize(self) -> None:
        """Bind to EventBus topics and to the FavoritesStore.

        Called once during application startup; later calls do nothing.
        """
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_NAV_SELECT, self._handle_nav_select)
        await self.bus.subscribe(events.TOPIC_FAVORITE_ADD, self._handle_favorite_add)
        await self.bus.subscribe(events.TOPIC_FAVORITE_REMOVE, self._handle_favorite_remove)
        await self.bus.subscribe(events.TOPIC_FAVORITE_TOGGLE, self._handle_favorite_toggle)
        await self.bus.subscribe(events.TOPIC_SEARCH_QUERY, self._handle_search_query)
        await self.bus.subscribe(events.TOPIC_BANNER_DISMISS, self._handle_banner_dismiss)

        self._unsubscribe_store = self.favorites.subscribe(self._on_favorites_changed)
        self._sync_favorites(self.favorites.snapshot())
        register_cleanup_handler(self.shutdown)

        self._started = True
        logger.info("AppState initialized")

    def shutdown(self) -> None:
        """Stop the banner timer and detach from the store."""
        self._dismiss_timer.cancel()
        if self._unsubscribe_store:
            self._unsubscribe_store()
            self._unsubscribe_store = None

    # --- Public Actions ---

    def set_nav(self, route: str) -> None:
        """Change the current route (normalized through parse_route)."""
        match = parse_route(route)
        if match.route_id == ROUTE_TEAM_PREFIX and self.resolve_team(route) is None:
            # Unknown team: nothing to display, stay where we are
            return
        self.route.value = route if match.route_id == ROUTE_TEAM_PREFIX else match.route_id

    def resolve_team(self, route: str) -> Optional[Team]:
        """Team shown by a detail route, or None when the route is not a detail route or names no team."""
        match = parse_route(route)
        if match.team_name is None:
            return None
        try:
            return self.catalog.find_by_name(match.team_name)
        except TeamNotFoundError:
            logger.warning(f"Detail route for unknown team '{match.team_name}'")
            return None

    def is_favorite(self, team_name: str) -> bool:
        return self.favorites.is_favorite(team_name)

    async def publish(self, topic: str, payload: EventPayload) -> None:
        await self.bus.publish(topic, payload)

    async def navigate(self, route: str) -> None:
        await self.publish(events.TOPIC_NAV_SELECT, events.create_nav_select_event(route))

    async def toggle_favorite(self, team_name: str) -> None:
        await self.publish(events.TOPIC_FAVORITE_TOGGLE, events.create_favorite_event(team_name))

    async def remove_favorite(self, team_name: str) -> None:
        await self.publish(events.TOPIC_FAVORITE_REMOVE, events.create_favorite_event(team_name))

    async def search(self, query: str) -> None:
        await self.publish(events.TOPIC_SEARCH_QUERY, events.create_search_event(query))

    def show_banner(self, text: str) -> None:
        """Show ``text`` and (re)arm the auto-dismiss timer."""
        self.banner_text.value = text
        self.banner_visible.value = True
        try:
            self._dismiss_timer.schedule()
        except RuntimeError:
            logger.debug("No running event loop, banner stays until dismissed")

    def dismiss_banner(self) -> None:
        self._dismiss_timer.cancel()
        self.banner_visible.value = False

    # --- Store Subscription ---

    def _on_favorites_changed(self, snapshot: FavoritesSnapshot) -> None:
        self._sync_favorites(snapshot)

        if snapshot.revision != self._last_revision and snapshot.last_action is not None:
            self._last_revision = snapshot.revision
            self.show_banner(confirmation_message(snapshot.last_action, self.config.banner))

        payload = events.create_favorites_changed_event(
            favorites=snapshot.member_names,
            displayed=snapshot.displayed_names,
            last_action=snapshot.last_action.value if snapshot.last_action else None,
            query=snapshot.query,
        )
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Mutated outside the UI loop (scripts, tests); the Rx mirror is already current
            return
        task = loop.create_task(self.publish(events.TOPIC_FAVORITES_CHANGED, payload))
        self._publish_tasks.add(task)
        task.add_done_callback(self._publish_tasks.discard)

    def _sync_favorites(self, snapshot: FavoritesSnapshot) -> None:
        self.favorite_names.value = snapshot.member_names
        self.displayed_names.value = snapshot.displayed_names
        self.search_query.value = snapshot.query

    # --- Event Handlers ---

    def _team_from_payload(self, payload: EventPayload) -> Optional[Team]:
        name = payload.get("team")
        if not name:
            logger.warning("Favorite intent without a team name")
            return None
        try:
            return self.catalog.find_by_name(str(name))
        except TeamNotFoundError as e:
            logger.warning(f"Ignoring favorite intent: {e}")
            return None

    async def _handle_nav_select(self, payload: EventPayload) -> None:
        route = payload.get("route")
        if route:
            self.set_nav(str(route))

    async def _handle_favorite_add(self, payload: EventPayload) -> None:
        team = self._team_from_payload(payload)
        if team:
            self.favorites.add(team)

    async def _handle_favorite_remove(self, payload: EventPayload) -> None:
        team = self._team_from_payload(payload)
        if team:
            self.favorites.remove(team)

    async def _handle_favorite_toggle(self, payload: EventPayload) -> None:
        team = self._team_from_payload(payload)
        if team:
            self.favorites.toggle(team)

    async def _handle_search_query(self, payload: EventPayload) -> None:
        self.favorites.search(str(payload.get("query") or ""))

    async def _handle_banner_dismiss(self, payload: EventPayload) -> None:
        self.dismiss_banner()
