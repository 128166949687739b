"""httpx-backed raw fetcher."""

import logging
from typing import Optional

import httpx

from polymarket_data.core.exceptions import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpxFetcher:
    """
    Blocking GET over a shared httpx.Client.

    The client is safe to share between the aggregator's worker threads.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            timeout=timeout_seconds,
            transport=transport,
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )

    def get(self, url: str) -> bytes:
        try:
            response = self._client.get(url)
        except httpx.TimeoutException as e:
            logger.warning("Timeout fetching %s", url)
            raise NetworkError(f"Timeout fetching {url}") from e
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise NetworkError(
                f"GET {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.content

    def close(self) -> None:
        self._client.close()
