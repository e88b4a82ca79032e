"""Prometheus metrics for the lookup endpoints.

Each VocabularyMetrics owns its registry, so several app instances (tests,
workers) never collide on metric registration.
"""

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest


class VocabularyMetrics:
    """Per-endpoint request, hit, error and latency metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()

        self.total_requests = Counter(
            "api_total_requests",
            "Total number of requests for each API endpoint",
            ["endpoint"],
            registry=self.registry,
        )
        self.redis_hits = Counter(
            "api_redis_hits",
            "Number of requests answered by Redis",
            ["endpoint"],
            registry=self.registry,
        )
        self.errors = Counter(
            "api_errors",
            "Number of unsuccessful responses",
            ["endpoint"],
            registry=self.registry,
        )
        self.cache_write_errors = Counter(
            "api_cache_write_errors",
            "Number of fetched definitions that could not be written to Redis",
            registry=self.registry,
        )
        self.latency = Histogram(
            "api_request_duration",
            "Histogram of request duration for each API endpoint in seconds",
            ["endpoint"],
            registry=self.registry,
        )

    @contextmanager
    def track(self, endpoint: str) -> Iterator[None]:
        """Count a request and record its latency, even when it fails."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.latency.labels(endpoint=endpoint).observe(time.perf_counter() - start)
            self.total_requests.labels(endpoint=endpoint).inc()

    def record_hit(self, endpoint: str) -> None:
        self.redis_hits.labels(endpoint=endpoint).inc()

    def record_error(self, endpoint: str) -> None:
        self.errors.labels(endpoint=endpoint).inc()

    def record_cache_write_error(self) -> None:
        self.cache_write_errors.inc()

    def render(self) -> tuple[bytes, str]:
        """Return the exposition payload and its content type."""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
