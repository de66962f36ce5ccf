"""Team catalog: immutable roster data and lookup."""

from .models import League, SharePayload, Team
from .service import Catalog, get_catalog, load_catalog, share_text

__all__ = [
    "Catalog",
    "League",
    "SharePayload",
    "Team",
    "get_catalog",
    "load_catalog",
    "share_text",
]
