"""Shared test fixtures for the portfolio catalogue tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from portfolio.catalog.store import CatalogStore
from portfolio.main import create_app
from portfolio.models import WorkDraft
from portfolio.storage import MemoryBlobStore


class FixedClock:
    """Clock returning a fixed instant, advanced manually by tests."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture()
def blob_store():
    return MemoryBlobStore()


@pytest.fixture()
def clock():
    return FixedClock()


@pytest.fixture()
def store(blob_store, clock):
    return CatalogStore(blob_store, clock=clock)


@pytest.fixture()
def two_works(store):
    """The two sample works used by the search and filter tests."""
    cat = store.add_work(
        WorkDraft(title="Cat Logo", description="", author="Ann", tags=["Logo Design"])
    )
    banner = store.add_work(
        WorkDraft(title="Banner", description="", author="Bo", tags=["Banner Design"])
    )
    return cat, banner


@pytest.fixture()
def client(store):
    return TestClient(create_app(store))
