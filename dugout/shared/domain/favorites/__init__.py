"""Favorites management: the store and its confirmation banner."""

from .store import FavoriteAction, FavoritesSnapshot, FavoritesStore
from .banner import DismissTimer, confirmation_message

__all__ = [
    "DismissTimer",
    "FavoriteAction",
    "FavoritesSnapshot",
    "FavoritesStore",
    "confirmation_message",
]
