"""State container handed to every view.

Built once at startup and passed by reference; there is no global instance.
"""

from __future__ import annotations

from typing import Optional

from dugout.shared.core.configuration import SystemConfig, get_config
from dugout.shared.core.event_bus import EventBus
from dugout.shared.domain.catalog import Catalog, get_catalog
from dugout.shared.domain.favorites import FavoritesStore

from .app_state import AppState


class Store:
    """Bundles the catalog, the favorites store, the event bus and the UI state.

    Usage:
        store = Store.create()
        await store.app.initialize()

        # in a view
        store.catalog.find_by_name("Boston Red Sox")
        await store.app.toggle_favorite("Boston Red Sox")
    """

    def __init__(
        self,
        catalog: Catalog,
        favorites: FavoritesStore,
        event_bus: EventBus,
        config: SystemConfig,
    ) -> None:
        self.catalog = catalog
        self.favorites = favorites
        self.bus = event_bus
        self.config = config
        self.app = AppState(event_bus, catalog, favorites, config)

    @classmethod
    def create(
        cls,
        config: Optional[SystemConfig] = None,
        catalog: Optional[Catalog] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "Store":
        """Wire a Store from configuration, defaulting to the bundled catalog."""
        config = config or get_config()
        catalog = catalog or get_catalog()
        favorites = FavoritesStore(catalog, search_scope=config.search.scope)
        return cls(catalog, favorites, event_bus or EventBus(), config)
