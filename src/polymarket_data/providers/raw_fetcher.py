"""Raw fetcher protocol."""

from typing import Protocol


class RawFetcher(Protocol):
    """
    Protocol for the network collaborator behind the cache.

    Implementations return the response body for a fully-qualified URL and
    raise NetworkError on transport failure or any non-success status.
    """

    def get(self, url: str) -> bytes:
        """Fetch url and return the raw body."""
        ...
