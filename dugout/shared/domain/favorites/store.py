"""Favorites store.

Holds the favorited subset of the catalog in insertion order, plus the
search-driven list the favorites screen shows. Observers register with
:meth:`FavoritesStore.subscribe` and receive a full :class:`FavoritesSnapshot`
after every committed change.

Notification is synchronous for every operation: when ``add``/``remove``/
``search`` return, every subscriber has already seen the new snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from dugout.shared.core.configuration import SearchScope
from dugout.shared.domain.catalog import Catalog, Team

logger = logging.getLogger(__name__)


class FavoriteAction(str, Enum):
    """Kind of the most recent committed mutation."""

    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class FavoritesSnapshot:
    """Immutable view of the store pushed to subscribers."""

    members: Tuple[Team, ...]
    displayed: Tuple[Team, ...]
    last_action: Optional[FavoriteAction]
    query: str
    revision: int = 0  # bumped by every committed add/remove, not by search

    @property
    def member_names(self) -> List[str]:
        return [team.name for team in self.members]

    @property
    def displayed_names(self) -> List[str]:
        return [team.name for team in self.displayed]


Subscriber = Callable[[FavoritesSnapshot], None]


class FavoritesStore:
    """Mutable set of favorite teams with a transient name filter."""

    def __init__(self, catalog: Catalog, search_scope: SearchScope = SearchScope.CATALOG) -> None:
        self.catalog = catalog
        self.search_scope = SearchScope(search_scope)
        # dict keeps insertion order and gives O(1) membership by name
        self._members: Dict[str, Team] = {}
        self._query = ""
        self._displayed: Tuple[Team, ...] = ()
        self._subscribers: List[Subscriber] = []
        self.last_action: Optional[FavoriteAction] = None
        self.revision = 0

    # --- Queries ---

    def current_favorites(self) -> Tuple[Team, ...]:
        """Favorites in the order they were added."""
        return tuple(self._members.values())

    def displayed_teams(self) -> Tuple[Team, ...]:
        """What the favorites screen lists: the favorites, or the search results while a query is active."""
        if not self._query:
            return self.current_favorites()
        return self._displayed

    def is_favorite(self, team: Union[Team, str]) -> bool:
        name = team if isinstance(team, str) else team.name
        return name in self._members

    @property
    def query(self) -> str:
        return self._query

    def snapshot(self) -> FavoritesSnapshot:
        return FavoritesSnapshot(
            members=self.current_favorites(),
            displayed=self.displayed_teams(),
            last_action=self.last_action,
            query=self._query,
            revision=self.revision,
        )

    # --- Mutations ---

    def add(self, team: Team) -> None:
        """Add ``team``; a no-op (no notification) when a team of that name is already a favorite."""
        if team.name in self._members:
            logger.debug(f"'{team.name}' already a favorite, ignoring add")
            return
        self._members[team.name] = team
        self.last_action = FavoriteAction.ADDED
        logger.info(f"Added favorite '{team.name}' ({len(self._members)} total)")
        self._commit()

    def remove(self, team: Team) -> None:
        """Remove ``team``; a no-op (``last_action`` untouched) when it is not a favorite."""
        if self._members.pop(team.name, None) is None:
            logger.debug(f"'{team.name}' is not a favorite, ignoring remove")
            return
        self.last_action = FavoriteAction.REMOVED
        logger.info(f"Removed favorite '{team.name}' ({len(self._members)} total)")
        self._commit()

    def toggle(self, team: Team) -> bool:
        """Flip membership of ``team``.

        Returns:
            True if the team is a favorite afterwards
        """
        if self.is_favorite(team):
            self.remove(team)
            return False
        self.add(team)
        return True

    def search(self, query: str) -> Tuple[Team, ...]:
        """Filter by case-insensitive substring of the team name.

        A blank query clears the filter, so the favorites themselves are shown.
        The scope (whole catalog or favorites only) comes from ``search_scope``.

        Returns:
            The teams now displayed
        """
        self._query = query.strip()
        self._displayed = self._filter(self._query)
        logger.debug(f"Search {self._query!r} over {self.search_scope.value}: {len(self.displayed_teams())} match(es)")
        self._notify()
        return self.displayed_teams()

    def clear_search(self) -> None:
        self.search("")

    # --- Subscription ---

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for snapshots.

        Returns:
            A zero-argument function that unsubscribes ``callback``
        """
        if callback not in self._subscribers:
            self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    # --- Internals ---

    def _filter(self, query: str) -> Tuple[Team, ...]:
        if not query:
            return ()
        source = self.catalog.all_teams() if self.search_scope == SearchScope.CATALOG else self.current_favorites()
        needle = query.casefold()
        return tuple(team for team in source if needle in team.name.casefold())

    def _commit(self) -> None:
        self.revision += 1
        # An active query is re-run so favorites-scoped results track membership
        if self._query:
            self._displayed = self._filter(self._query)
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception(f"Favorites subscriber {getattr(callback, '__name__', callback)!r} failed")
