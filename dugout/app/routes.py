"""Route strings for the app's screens."""

from __future__ import annotations

from typing import NamedTuple, Optional
from urllib.parse import quote, unquote

from dugout.shared.domain.catalog import League

ROUTE_WELCOME = "/welcome"
ROUTE_EXPLORE = "/explore"
ROUTE_AMERICAN = "/american"
ROUTE_NATIONAL = "/national"
ROUTE_FAVORITES = "/favorites"
ROUTE_TEAM_PREFIX = "/team/"

STATIC_ROUTES = (ROUTE_WELCOME, ROUTE_EXPLORE, ROUTE_AMERICAN, ROUTE_NATIONAL, ROUTE_FAVORITES)

LEAGUE_ROUTES = {
    League.AMERICAN: ROUTE_AMERICAN,
    League.NATIONAL: ROUTE_NATIONAL,
}


class RouteMatch(NamedTuple):
    route_id: str
    team_name: Optional[str] = None


def team_route(name: str) -> str:
    """Detail route for a team; the name is URL-quoted (spaces, accents, dots)."""
    return ROUTE_TEAM_PREFIX + quote(name, safe="")


def league_for_route(route_id: str) -> Optional[League]:
    for league, route in LEAGUE_ROUTES.items():
        if route == route_id:
            return league
    return None


def parse_route(route: Optional[str]) -> RouteMatch:
    """Split a route into its screen id and, for detail routes, the team name.

    ``/`` and unknown routes map to the welcome screen.
    """
    route = (route or "").split("?", 1)[0].rstrip("/") or ROUTE_WELCOME
    if route.startswith(ROUTE_TEAM_PREFIX):
        name = unquote(route[len(ROUTE_TEAM_PREFIX):])
        if name:
            return RouteMatch(ROUTE_TEAM_PREFIX, name)
        return RouteMatch(ROUTE_WELCOME)
    if route in STATIC_ROUTES:
        return RouteMatch(route)
    return RouteMatch(ROUTE_WELCOME)
