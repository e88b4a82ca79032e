"""Upstream word API protocols.

The definition lookup and the random-word generator are separate
capabilities so either can be swapped or faked on its own.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DefinitionFetcher(Protocol):
    """Protocol for services that return the definition of a word."""

    async def fetch_definition(self, word: str) -> str:
        """Fetch the definition of a word.

        Args:
            word: The word to define

        Returns:
            The definition text, possibly empty

        Raises:
            UpstreamTransportError: On network failure or timeout
            UpstreamStatusError: On a non-2xx response
            ParseError: If the body is not the expected JSON envelope
        """
        ...


@runtime_checkable
class WordGenerator(Protocol):
    """Protocol for services that produce a random word."""

    async def fetch_random_word(self) -> str:
        """Fetch a random word.

        Returns:
            The first candidate word

        Raises:
            UpstreamTransportError: On network failure or timeout
            UpstreamStatusError: On a non-2xx response
            ParseError: If the body is not the expected JSON envelope
            EmptyResultError: If no candidate words were returned
        """
        ...
