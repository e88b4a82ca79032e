"""
In-memory test doubles for the store and the upstream clients.
"""

import asyncio

from vocab_cache.errors import CacheUnavailableError, CacheWriteError

TTL = 60


class FakeStore:
    """In-memory VocabularyStore that records every call."""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self.entries = dict(entries or {})
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, str, int]] = []
        self.fail_get = False
        self.fail_set = False
        self.healthy = True

    async def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        if self.fail_get:
            raise CacheUnavailableError("connection refused")
        return self.entries.get(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        self.set_calls.append((key, value, ttl))
        if self.fail_set:
            raise CacheWriteError("connection refused")
        self.entries[key] = value

    async def health_check(self) -> bool:
        return self.healthy

    async def close(self) -> None:
        pass


class FakeFetcher:
    """DefinitionFetcher returning canned definitions."""

    def __init__(self, definitions: dict[str, str] | None = None, error: Exception | None = None) -> None:
        self.definitions = definitions or {}
        self.error = error
        self.calls: list[str] = []

    async def fetch_definition(self, word: str) -> str:
        self.calls.append(word)
        # yield to the loop like a real network call would
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.definitions.get(word, f"definition of {word}")


class FakeGenerator:
    """WordGenerator returning a fixed word."""

    def __init__(self, word: str = "apple", error: Exception | None = None) -> None:
        self.word = word
        self.error = error
        self.calls = 0

    async def fetch_random_word(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.word


class BlockingFetcher(FakeFetcher):
    """DefinitionFetcher that waits until ``release`` is set."""

    def __init__(self, definitions: dict[str, str] | None = None) -> None:
        super().__init__(definitions)
        self.release = asyncio.Event()

    async def fetch_definition(self, word: str) -> str:
        self.calls.append(word)
        await self.release.wait()
        return self.definitions.get(word, f"definition of {word}")
