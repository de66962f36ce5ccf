"""Canonical event definitions for Dugout."""

from __future__ import annotations

from typing import List, Optional

from .event_bus import EventPayload

# UI shell
TOPIC_NAV_SELECT = "nav.select"
TOPIC_BANNER_DISMISS = "banner.dismiss"

# User intents on favorites
TOPIC_FAVORITE_ADD = "favorites.add"
TOPIC_FAVORITE_REMOVE = "favorites.remove"
TOPIC_FAVORITE_TOGGLE = "favorites.toggle"
TOPIC_SEARCH_QUERY = "search.query"

# Store notifications
TOPIC_FAVORITES_CHANGED = "favorites.changed"  # Payload: names of favorites and displayed teams


def create_nav_select_event(route: str) -> EventPayload:
    """Create a navigation event for a route string such as ``/team/Boston%20Red%20Sox``."""
    return {"route": route}


def create_favorite_event(team_name: str) -> EventPayload:
    """Create an add/remove/toggle intent for one team."""
    return {"team": team_name}


def create_search_event(query: str) -> EventPayload:
    return {"query": query}


def create_favorites_changed_event(
    favorites: List[str],
    displayed: List[str],
    last_action: Optional[str],
    query: str,
) -> EventPayload:
    """Create a favorites changed event (full snapshot, never a delta)."""
    return {
        "favorites": favorites,
        "displayed": displayed,
        "last_action": last_action,
        "query": query,
    }
