"""Static team catalog.

The roster ships as one YAML file per league under ``data/``. It is loaded
once, validated (every name unique), and never mutated afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

import yaml
from pydantic import ValidationError

from dugout.shared.core.errors import CatalogError, TeamNotFoundError

from .models import League, SharePayload, Team

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


class Catalog:
    """Ordered, immutable roster with a name-keyed lookup."""

    def __init__(self, teams: Iterable[Team]) -> None:
        self._teams: Tuple[Team, ...] = tuple(teams)
        self._by_name: Dict[str, Team] = {}
        for team in self._teams:
            if team.name in self._by_name:
                raise CatalogError(f"Duplicate team name in catalog: {team.name!r}")
            self._by_name[team.name] = team

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self):
        return iter(self._teams)

    def all_teams(self) -> Tuple[Team, ...]:
        """Every team, American League first, in display order."""
        return self._teams

    def teams_in(self, league: League) -> Tuple[Team, ...]:
        return tuple(team for team in self._teams if team.league == league)

    def find_by_name(self, name: str) -> Team:
        """Exact, case-sensitive lookup.

        Raises:
            TeamNotFoundError: no team is called ``name``
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise TeamNotFoundError(name) from None

    def contains(self, name: str) -> bool:
        return name in self._by_name


def _load_league_file(path: Path, league: League) -> list[Team]:
    if not path.exists():
        raise CatalogError(f"Missing league file: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Cannot parse {path}: {e}") from e

    records = data.get("teams")
    if not isinstance(records, list):
        raise CatalogError(f"{path} has no 'teams' list")

    teams = []
    for index, record in enumerate(records):
        try:
            teams.append(
                Team(
                    name=record["name"],
                    summary=record.get("summary", ""),
                    detail=record.get("detail") or "",
                    image_ref=record.get("image", ""),
                    league=league,
                )
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise CatalogError(f"Bad team record #{index} in {path}: {e}") from e
    return teams


def load_catalog(data_dir: Optional[Path] = None) -> Catalog:
    """Build a Catalog from ``<league>.yaml`` files in ``data_dir``."""
    data_dir = Path(data_dir) if data_dir else DATA_DIR
    teams: list[Team] = []
    for league in League:
        league_teams = _load_league_file(data_dir / f"{league.value}.yaml", league)
        logger.debug(f"Loaded {len(league_teams)} teams for {league.display_title}")
        teams.extend(league_teams)

    catalog = Catalog(teams)
    logger.info(f"Catalog loaded: {len(catalog)} teams from {data_dir}")
    return catalog


_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get the bundled catalog (loaded on first use, then cached)."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def share_text(team: Team) -> SharePayload:
    """Content for the "share team details" action."""
    return SharePayload(
        subject=f"Detalles del equipo: {team.name}",
        body=team.detail or team.summary,
    )
