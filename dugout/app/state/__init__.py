"""FletXr Reactive State Management for the app shell.

- AppState: navigation, favorites mirror and confirmation banner
- Store: explicitly constructed container passed to every view
"""

from .app_state import AppState
from .store import Store

__all__ = ["AppState", "Store"]
