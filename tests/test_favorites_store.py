"""FavoritesStore membership, search and notifications."""

import pytest

from dugout.shared.core.configuration import SearchScope
from dugout.shared.domain.favorites import FavoriteAction, FavoritesStore


def test_starts_empty(store):
    assert store.current_favorites() == ()
    assert store.displayed_teams() == ()
    assert store.last_action is None
    assert store.query == ""


def test_add_keeps_insertion_order(store, catalog):
    names = ["Seattle Mariners", "Atlanta Braves", "Baltimore Orioles"]
    for name in names:
        store.add(catalog.find_by_name(name))
    assert [t.name for t in store.current_favorites()] == names


def test_add_then_remove_notifies_twice(store, red_sox, snapshots):
    store.add(red_sox)
    assert snapshots[-1].member_names == ["Boston Red Sox"]
    assert snapshots[-1].last_action == FavoriteAction.ADDED

    store.remove(red_sox)
    assert len(snapshots) == 2
    assert snapshots[-1].members == ()
    assert snapshots[-1].last_action == FavoriteAction.REMOVED


def test_add_is_idempotent(store, red_sox, catalog, snapshots):
    store.add(red_sox)
    store.add(catalog.find_by_name("Boston Red Sox"))
    assert store.current_favorites() == (red_sox,)
    assert len(snapshots) == 1


def test_remove_missing_is_silent(store, red_sox, yankees, snapshots):
    store.add(yankees)
    store.remove(red_sox)
    assert store.current_favorites() == (yankees,)
    assert store.last_action == FavoriteAction.ADDED
    assert len(snapshots) == 1


def test_remove_keeps_order_of_the_rest(store, catalog):
    a, b, c = (catalog.find_by_name(n) for n in ("Texas Rangers", "Chicago Cubs", "Miami Marlins"))
    for team in (a, b, c):
        store.add(team)
    store.remove(b)
    assert store.current_favorites() == (a, c)


def test_toggle_flips_membership(store, yankees):
    assert store.toggle(yankees) is True
    assert store.is_favorite(yankees)
    assert store.is_favorite("New York Yankees")
    assert store.toggle(yankees) is False
    assert not store.is_favorite(yankees)


def test_revision_counts_committed_mutations(store, red_sox):
    store.add(red_sox)
    store.add(red_sox)
    store.search("red")
    assert store.revision == 1
    store.remove(red_sox)
    assert store.revision == 2


def test_search_matches_case_insensitive_substring(store):
    results = store.search("RED")
    assert [t.name for t in results] == ["Boston Red Sox", "Cincinnati Reds"]
    assert store.displayed_teams() == results


def test_search_covers_whole_catalog_by_default(store, red_sox):
    store.add(red_sox)
    results = store.search("red")
    assert [t.name for t in results] == ["Boston Red Sox", "Cincinnati Reds"]
    # The filter never changes membership
    assert store.current_favorites() == (red_sox,)


def test_search_matches_accented_names(store):
    assert [t.name for t in store.search("ángeles")] == ["Los Ángeles Angels"]


def test_search_without_match(store, snapshots):
    assert store.search("zzz") == ()
    assert snapshots[-1].displayed == ()
    assert snapshots[-1].query == "zzz"


@pytest.mark.parametrize("query", ["", "   ", "\t"])
def test_blank_query_shows_favorites(store, yankees, query):
    store.add(yankees)
    store.search("red")
    assert store.search(query) == (yankees,)
    assert store.query == ""


def test_clear_search(store, yankees, snapshots):
    store.add(yankees)
    store.search("cub")
    store.clear_search()
    assert store.displayed_teams() == (yankees,)
    assert snapshots[-1].query == ""


def test_search_notifies_without_action(store, snapshots):
    store.search("sox")
    assert len(snapshots) == 1
    assert snapshots[0].last_action is None
    assert snapshots[0].revision == 0


def test_results_update_when_membership_changes(catalog, red_sox, reds):
    store = FavoritesStore(catalog, search_scope=SearchScope.FAVORITES)
    store.add(red_sox)
    assert store.search("red") == (red_sox,)

    store.add(reds)
    assert store.displayed_teams() == (red_sox, reds)

    store.remove(red_sox)
    assert store.displayed_teams() == (reds,)


def test_scope_accepts_plain_string(catalog):
    store = FavoritesStore(catalog, search_scope="favorites")
    assert store.search_scope is SearchScope.FAVORITES
    assert store.search("red") == ()


def test_unsubscribe_stops_snapshots(store, red_sox):
    received = []
    unsubscribe = store.subscribe(received.append)
    store.add(red_sox)
    unsubscribe()
    store.remove(red_sox)
    assert len(received) == 1


def test_subscribe_twice_delivers_once(store, red_sox):
    received = []
    store.subscribe(received.append)
    store.subscribe(received.append)
    store.add(red_sox)
    assert len(received) == 1


def test_failing_subscriber_does_not_block_others(store, red_sox):
    received = []

    def broken(snapshot):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(received.append)
    store.add(red_sox)
    assert store.is_favorite(red_sox)
    assert len(received) == 1


def test_snapshot_is_a_copy(store, red_sox, yankees):
    store.add(red_sox)
    snap = store.snapshot()
    store.add(yankees)
    assert snap.member_names == ["Boston Red Sox"]
    assert snap.revision == 1


def test_remove_one_of_two(store, red_sox, yankees):
    store.add(red_sox)
    store.add(yankees)
    store.remove(yankees)
    assert store.current_favorites() == (red_sox,)
    assert store.last_action == FavoriteAction.REMOVED


def test_search_ignores_case_of_query(store):
    assert store.search("red") == store.search("RED") == store.search("rEd")
