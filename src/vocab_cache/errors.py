"""Error taxonomy for vocabulary lookups.

Handlers map these to HTTP status codes: InvalidInputError is a client
fault (400), every UpstreamError is a server fault (500). Cache errors
never reach the client: a failed read is a soft miss and a failed write
is logged and metered only.
"""


class VocabularyError(Exception):
    """Base class for all vocabulary service errors."""


class InvalidInputError(VocabularyError):
    """The request did not carry a usable word."""


class ConfigError(VocabularyError, ValueError):
    """Settings failed validation."""


class CacheUnavailableError(VocabularyError):
    """The cache backend could not be reached while reading."""


class CacheWriteError(VocabularyError):
    """Populating the cache after a successful fetch failed."""


class UpstreamError(VocabularyError):
    """Base class for failures talking to the external word APIs."""


class UpstreamTransportError(UpstreamError):
    """Network failure or timeout calling an external API."""


class UpstreamStatusError(UpstreamError):
    """An external API answered with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"upstream {url} returned HTTP {status_code}")


class ParseError(UpstreamError):
    """An external API response body was not the expected JSON envelope."""


class EmptyResultError(UpstreamError):
    """The word generator returned no candidate words."""
