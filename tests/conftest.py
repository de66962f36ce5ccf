"""Shared fixtures."""

from __future__ import annotations

import pytest

from dugout.shared.domain.catalog import Catalog, load_catalog
from dugout.shared.domain.favorites import FavoritesSnapshot, FavoritesStore


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    return load_catalog()


@pytest.fixture
def store(catalog) -> FavoritesStore:
    return FavoritesStore(catalog)


@pytest.fixture
def red_sox(catalog):
    return catalog.find_by_name("Boston Red Sox")


@pytest.fixture
def yankees(catalog):
    return catalog.find_by_name("New York Yankees")


@pytest.fixture
def reds(catalog):
    return catalog.find_by_name("Cincinnati Reds")


@pytest.fixture
def snapshots(store) -> list[FavoritesSnapshot]:
    """Every snapshot the store pushes, in order."""
    received: list[FavoritesSnapshot] = []
    store.subscribe(received.append)
    return received
