"""Dugout: MLB team catalog with favorites."""

from .shared.core.event_bus import EventBus
from .shared.domain.catalog import Catalog, Team, get_catalog
from .shared.domain.favorites import FavoritesStore

__all__ = ["Catalog", "EventBus", "FavoritesStore", "Team", "get_catalog"]

__version__ = "0.3.0"
