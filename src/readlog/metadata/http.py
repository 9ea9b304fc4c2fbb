# ABOUTME: Shared httpx client used by the Google Books and Open Library providers.
# ABOUTME: Spaces requests out, retries transient statuses, raises MetadataFetchError on failure.

import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "readlog/0.1.0"

# Statuses worth another attempt: rate limiting and gateway/backend hiccups.
_TRANSIENT_STATUSES = frozenset({429, 500, 502, 503, 504})

# Upper bound on a server-requested Retry-After wait, in seconds.
_MAX_RETRY_AFTER = 5.0


class MetadataFetchError(Exception):
    """A provider request produced no usable JSON body."""


@runtime_checkable
class HttpClient(Protocol):
    """What a provider needs from HTTP: one JSON GET."""

    def get(self, url: str, params: dict[str, str] | None = None) -> Any: ...


def _retry_after(response: httpx.Response) -> float | None:
    """Seconds from a numeric Retry-After header, capped; None if absent or a date."""
    value = response.headers.get("retry-after")
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return min(max(seconds, 0.0), _MAX_RETRY_AFTER)


class ReadlogHttpClient:
    """JSON-over-HTTP client for metadata lookups during a scan session.

    A scan resolves one ISBN at a time, but each ISBN can fan out to four
    requests across two providers, so consecutive requests are kept at
    least `min_request_interval` apart. Transient statuses are retried up to
    `max_retries` times; the wait doubles each time unless the server asks
    for a specific delay. Callers only ever see parsed JSON or
    MetadataFetchError.

    Usable as a context manager to release the connection pool.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_retries: int = 2,
        retry_delay: float = 0.5,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        options: dict[str, Any] = {"headers": {"User-Agent": USER_AGENT}, "timeout": timeout}
        if transport is not None:
            options["transport"] = transport
        self._client = httpx.Client(**options)
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._last_sent: float | None = None

    def __enter__(self) -> "ReadlogHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """GET url and return the decoded JSON body.

        Raises:
            MetadataFetchError: If the request cannot be sent, the final
                status is not 200, or the body is not JSON.
        """
        attempt = 0
        while True:
            response = self._send(url, params)
            if response.status_code == 200:
                return self._decode(response, url)
            if response.status_code not in _TRANSIENT_STATUSES:
                raise MetadataFetchError(f"HTTP {response.status_code} from {url}")
            if attempt >= self._max_retries:
                raise MetadataFetchError(
                    f"HTTP {response.status_code} from {url} after {attempt + 1} attempts"
                )

            wait = _retry_after(response)
            if wait is None:
                wait = self._retry_delay * (2**attempt)
            attempt += 1
            logger.warning(
                "HTTP %d from %s, retry %d/%d in %.1fs",
                response.status_code,
                url,
                attempt,
                self._max_retries,
                wait,
            )
            time.sleep(wait)

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()

    def _send(self, url: str, params: dict[str, str] | None) -> httpx.Response:
        self._throttle()
        try:
            return self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc

    @staticmethod
    def _decode(response: httpx.Response, url: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise MetadataFetchError(f"Malformed JSON from {url}") from exc

    def _throttle(self) -> None:
        """Block until min_request_interval has passed since the last send."""
        now = time.monotonic()
        if self._last_sent is not None and self._min_interval > 0:
            remaining = self._min_interval - (now - self._last_sent)
            if remaining > 0:
                time.sleep(remaining)
                now = time.monotonic()
        self._last_sent = now
