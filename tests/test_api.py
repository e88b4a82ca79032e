"""
Tests for the vocabulary HTTP API.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from tests.fakes import FakeFetcher, FakeGenerator, FakeStore
from vocab_cache.api.app import app
from vocab_cache.errors import EmptyResultError, ParseError
from vocab_cache.handlers import VocabularyHandler
from vocab_cache.metrics import VocabularyMetrics
from vocab_cache.repositories import RedisVocabularyRepository
from vocab_cache.services import LookupService


@pytest.fixture
def fakes():
    return FakeStore({"apple": "a fruit"}), FakeFetcher({"pear": "another fruit"}), FakeGenerator("apple")


@pytest.fixture
def metrics():
    return VocabularyMetrics()


@pytest.fixture
def client(fakes, metrics):
    """Create a test client wired to in-memory fakes.

    The lifespan is not entered, so no Redis or network is needed.
    """
    store, fetcher, generator = fakes
    service = LookupService(store=store, fetcher=fetcher, generator=generator, ttl=60, metrics=metrics)
    app.state.vocabulary_handler = VocabularyHandler(lookup_service=service, metrics=metrics)

    yield TestClient(app)

    del app.state.vocabulary_handler


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Vocabulary Cache API"
    assert data["endpoints"]["dictionary"].startswith("/api/v1/dictionary")


def test_dictionary_cache_hit(client, metrics):
    response = client.get("/api/v1/dictionary", params={"word": "apple"})

    assert response.status_code == 200
    assert response.text == "REDIS: a fruit"
    assert metrics.registry.get_sample_value("api_redis_hits_total", {"endpoint": "/dictionary"}) == 1.0


def test_dictionary_fresh_fetch(client, fakes):
    store, _, _ = fakes

    response = client.get("/api/v1/dictionary", params={"word": "pear"})

    assert response.status_code == 200
    assert response.text == "NINJA: another fruit"
    assert store.entries["pear"] == "another fruit"


def test_dictionary_second_request_is_served_from_cache(client):
    client.get("/api/v1/dictionary", params={"word": "pear"})

    response = client.get("/api/v1/dictionary", params={"word": "pear"})

    assert response.text == "REDIS: another fruit"


@pytest.mark.parametrize("params", [{}, {"word": ""}])
def test_dictionary_without_word(client, metrics, params):
    """Missing word is a client error."""
    response = client.get("/api/v1/dictionary", params=params)

    assert response.status_code == 400
    assert response.text == "No word provided"
    assert metrics.registry.get_sample_value("api_errors_total", {"endpoint": "/dictionary"}) == 1.0


def test_dictionary_upstream_failure(client, fakes, metrics):
    _, fetcher, _ = fakes
    fetcher.error = ParseError("failed to unmarshal response")

    response = client.get("/api/v1/dictionary", params={"word": "mango"})

    assert response.status_code == 500
    assert "failed to unmarshal response" in response.text
    assert metrics.registry.get_sample_value("api_errors_total", {"endpoint": "/dictionary"}) == 1.0


def test_dictionary_unexpected_failure_is_counted(client, fakes, metrics):
    """Errors outside the known taxonomy still become a 500 and are metered."""
    _, fetcher, _ = fakes
    fetcher.error = RuntimeError("boom")

    response = client.get("/api/v1/dictionary", params={"word": "mango"})

    assert response.status_code == 500
    assert metrics.registry.get_sample_value("api_errors_total", {"endpoint": "/dictionary"}) == 1.0
    assert metrics.registry.get_sample_value("api_total_requests_total", {"endpoint": "/dictionary"}) == 1.0


def test_randomword_unexpected_failure_is_counted(client, fakes, metrics):
    _, _, generator = fakes
    generator.error = RuntimeError("boom")

    response = client.get("/api/v1/randomword")

    assert response.status_code == 500
    assert metrics.registry.get_sample_value("api_errors_total", {"endpoint": "/randomword"}) == 1.0

def test_dictionary_cache_write_failure_still_succeeds(client, fakes):
    store, _, _ = fakes
    store.fail_set = True

    response = client.get("/api/v1/dictionary", params={"word": "pear"})

    assert response.status_code == 200
    assert response.text == "NINJA: another fruit"


def test_randomword_cache_hit(client):
    response = client.get("/api/v1/randomword")

    assert response.status_code == 200
    assert response.text == "apple is the word REDIS: a fruit"


def test_randomword_fresh_fetch(client, fakes):
    _, _, generator = fakes
    generator.word = "pear"

    response = client.get("/api/v1/randomword")

    assert response.status_code == 200
    assert response.text == "pear is the word NINJA: another fruit"


def test_randomword_empty_generator(client, fakes, metrics):
    store, _, generator = fakes
    generator.error = EmptyResultError("word generator returned no words")

    response = client.get("/api/v1/randomword")

    assert response.status_code == 500
    assert response.text == "word generator returned no words"
    assert store.get_calls == []
    assert metrics.registry.get_sample_value("api_errors_total", {"endpoint": "/randomword"}) == 1.0


def test_metrics_endpoint(client):
    client.get("/api/v1/dictionary", params={"word": "apple"})
    client.get("/api/v1/randomword")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert 'api_total_requests_total{endpoint="/dictionary"} 1.0' in response.text
    assert 'api_total_requests_total{endpoint="/randomword"} 1.0' in response.text
    assert 'api_redis_hits_total{endpoint="/randomword"} 1.0' in response.text
    assert "api_request_duration_bucket" in response.text


def test_health(client, fakes):
    """Test health check endpoint."""
    store, _, _ = fakes

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True}

    store.healthy = False
    response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["cache_healthy"] is False


@pytest.fixture
def redis_backed_client(metrics):
    """Create a test client over the real Redis repository with a mocked connection."""
    redis_mock = AsyncMock()
    redis_mock.get = AsyncMock(return_value=None)
    redis_mock.set = AsyncMock(return_value=True)
    repository = RedisVocabularyRepository(redis_mock)
    service = LookupService(
        store=repository,
        fetcher=FakeFetcher({"pear": "another fruit"}),
        generator=FakeGenerator("pear"),
        ttl=60,
        metrics=metrics,
    )
    app.state.vocabulary_handler = VocabularyHandler(lookup_service=service, metrics=metrics)

    yield TestClient(app), redis_mock

    del app.state.vocabulary_handler


def test_corrupt_cache_entry_is_refetched_and_overwritten(redis_backed_client):
    """An entry that is not valid UTF-8 is treated as a miss, not a 500."""
    client, redis_mock = redis_backed_client
    redis_mock.get.return_value = b"\xff\xfe not utf-8"

    response = client.get("/api/v1/dictionary", params={"word": "pear"})

    assert response.status_code == 200
    assert response.text == "NINJA: another fruit"
    redis_mock.set.assert_awaited_once_with("pear", "another fruit", ex=60)
