import time

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from core.storage import PortfolioStorage, get_storage


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(autouse=True)
def fresh_storage():
    # list snapshots and throttle counters must not leak between tests
    get_storage.cache_clear()
    cache.clear()
    yield
    get_storage.cache_clear()


@pytest.fixture
def clock(monkeypatch):
    """Pin time.time, which the cache backend reads for expiry, and let the test move it."""
    fake = FakeClock(time.time())
    monkeypatch.setattr(time, "time", fake)
    return fake


@pytest.fixture
def storage(db):
    return PortfolioStorage(cache_ttl=300)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def project_payload():
    return {
        "title": "X",
        "description": "Y",
        "techStack": ["A", "B"],
        "imageUrl": "https://x/y.png",
        "category": "C",
    }
