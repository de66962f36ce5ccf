"""Catalog value types."""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field


class League(str, Enum):
    """The two leagues the roster is split into. Values match the data file stems."""

    AMERICAN = "american"
    NATIONAL = "national"

    @property
    def display_title(self) -> str:
        return LEAGUE_TITLES[self]


LEAGUE_TITLES = {
    League.AMERICAN: "Liga Americana",
    League.NATIONAL: "Liga Nacional",
}


class Team(BaseModel):
    """One franchise. ``name`` is the catalog key and must be unique.

    Whether a team is a favorite is not stored here; ask the FavoritesStore.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    summary: str
    detail: str = ""
    image_ref: str = ""
    league: League


class SharePayload(BaseModel):
    """Subject and body handed to the platform share sheet."""

    model_config = ConfigDict(frozen=True)

    subject: str
    body: str

    def as_mailto(self) -> str:
        """mailto: URL that opens the share content in the default mail client."""
        return f"mailto:?subject={quote(self.subject)}&body={quote(self.body)}"
