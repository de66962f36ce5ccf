"""Catalog loading and lookup."""

from pathlib import Path

import pytest

from dugout.shared.core.errors import CatalogError, TeamNotFoundError
from dugout.shared.domain.catalog import Catalog, League, Team, share_text
from dugout.shared.domain.catalog.service import load_catalog


def test_roster_has_two_leagues_of_fifteen(catalog):
    assert len(catalog.all_teams()) == 30
    assert len(catalog.teams_in(League.AMERICAN)) == 15
    assert len(catalog.teams_in(League.NATIONAL)) == 15


def test_american_league_listed_first(catalog):
    teams = catalog.all_teams()
    assert teams[0].name == "Baltimore Orioles"
    assert all(t.league == League.AMERICAN for t in teams[:15])
    assert all(t.league == League.NATIONAL for t in teams[15:])


def test_names_are_unique(catalog):
    names = [t.name for t in catalog.all_teams()]
    assert len(names) == len(set(names))


def test_every_team_found_by_its_name(catalog):
    for team in catalog.all_teams():
        assert catalog.find_by_name(team.name) is team


def test_unknown_name_raises_not_found(catalog):
    with pytest.raises(TeamNotFoundError) as exc:
        catalog.find_by_name("__no_such_team__")
    assert exc.value.name == "__no_such_team__"
    # Callers that only know LookupError still catch it
    assert isinstance(exc.value, LookupError)


def test_yankees_record(catalog):
    yankees = catalog.find_by_name("New York Yankees")
    assert yankees.summary == "Fueron fundados en 1903\nHan ganado 27 series Mundiales"
    assert yankees.league == League.AMERICAN
    assert yankees.image_ref == "teams/yankees.png"
    assert "Yankee Stadium" in yankees.detail


def test_lookup_is_exact_and_case_sensitive(catalog):
    with pytest.raises(TeamNotFoundError):
        catalog.find_by_name("New York Yanqueees")
    with pytest.raises(TeamNotFoundError):
        catalog.find_by_name("new york yankees")
    assert not catalog.contains("New York Yankees ")
    assert catalog.contains("St. Louis Cardinals")


def test_teams_are_immutable(catalog):
    team = catalog.find_by_name("Boston Red Sox")
    with pytest.raises(Exception):
        team.name = "Boston Blue Sox"


def test_duplicate_names_rejected():
    team = Team(name="Texas Rangers", summary="", league=League.AMERICAN)
    with pytest.raises(CatalogError):
        Catalog([team, team.model_copy()])


def test_missing_league_file(tmp_path: Path):
    (tmp_path / "american.yaml").write_text("teams: []\n", encoding="utf-8")
    with pytest.raises(CatalogError, match="Missing league file"):
        load_catalog(tmp_path)


def test_bad_record_reported(tmp_path: Path):
    (tmp_path / "american.yaml").write_text("teams:\n  - summary: no name\n", encoding="utf-8")
    (tmp_path / "national.yaml").write_text("teams: []\n", encoding="utf-8")
    with pytest.raises(CatalogError, match="Bad team record #0"):
        load_catalog(tmp_path)


def test_custom_data_dir(tmp_path: Path):
    (tmp_path / "american.yaml").write_text(
        "teams:\n  - name: Havana Sugar Kings\n    summary: |-\n      Fundados en 1954\n", encoding="utf-8"
    )
    (tmp_path / "national.yaml").write_text("teams: []\n", encoding="utf-8")
    catalog = load_catalog(tmp_path)
    team = catalog.find_by_name("Havana Sugar Kings")
    assert team.detail == ""
    assert team.summary == "Fundados en 1954"


def test_share_text_uses_detail(catalog):
    payload = share_text(catalog.find_by_name("Boston Red Sox"))
    assert payload.subject == "Detalles del equipo: Boston Red Sox"
    assert "Fenway Park" in payload.body
    assert payload.as_mailto().startswith("mailto:?subject=Detalles%20del%20equipo%3A%20Boston%20Red%20Sox&body=")


def test_share_text_falls_back_to_summary():
    team = Team(name="Expos", summary="Montreal", league=League.NATIONAL)
    assert share_text(team).body == "Montreal"
