"""
Shared fixtures.
"""

import pytest

from tests.fakes import TTL, FakeFetcher, FakeGenerator, FakeStore
from vocab_cache.metrics import VocabularyMetrics
from vocab_cache.services import LookupService


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def metrics():
    return VocabularyMetrics()


@pytest.fixture
def service(store, fetcher, generator, metrics):
    return LookupService.create(store=store, fetcher=fetcher, generator=generator, ttl=TTL, metrics=metrics)
