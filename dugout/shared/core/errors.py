"""Exception types raised by the Dugout core."""

from __future__ import annotations


class DugoutError(Exception):
    """Base class for all Dugout errors."""


class TeamNotFoundError(DugoutError, LookupError):
    """No team in the catalog has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No team named {name!r} in the catalog")
        self.name = name


class CatalogError(DugoutError, ValueError):
    """Catalog data is malformed (missing league file, duplicate team name, bad record)."""
