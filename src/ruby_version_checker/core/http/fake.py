"""Fake HTTP operations for testing.

FakeHttpClient is an in-memory implementation that accepts pre-configured
state in its constructor. Construct instances directly with keyword arguments.
"""

import threading
from urllib.parse import urlparse

from ruby_version_checker.core.errors import FetchError
from ruby_version_checker.core.http.abc import HttpClient, HttpResponse


class FakeHttpClient(HttpClient):
    """In-memory fake implementation of HttpClient.

    This class has NO public setup methods. All state is provided via
    constructor using keyword arguments with sensible defaults (empty dicts).

    URLs present in neither ``bodies`` nor ``statuses`` answer with 404, the
    way a static file server would. Requests are recorded even when they fail.

    Example:
        fake = FakeHttpClient(bodies={"https://example.test/index.txt": "name\\turl"})
        fake.get("https://example.test/index.txt")
        assert fake.requested_urls == ["https://example.test/index.txt"]
    """

    def __init__(
        self,
        *,
        bodies: dict[str, str] | None = None,
        statuses: dict[str, int] | None = None,
        network_errors: set[str] | None = None,
    ) -> None:
        """Create FakeHttpClient with pre-configured state.

        Args:
            bodies: Mapping of URL -> body served with status 200
            statuses: Mapping of URL -> non-2xx status to answer with
            network_errors: URLs that fail as if the connection dropped
        """
        self._bodies = dict(bodies) if bodies is not None else {}
        self._statuses = dict(statuses) if statuses is not None else {}
        self._network_errors = set(network_errors) if network_errors is not None else set()
        self._requested_urls: list[str] = []
        self._lock = threading.Lock()
        self._closed = False

    @property
    def requested_urls(self) -> list[str]:
        """Read-only access to requested URLs for test assertions."""
        with self._lock:
            return list(self._requested_urls)

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, url: str) -> HttpResponse:
        with self._lock:
            self._requested_urls.append(url)

        # Same validation as real implementation
        if urlparse(url).scheme != "https":
            raise FetchError(url, "only https:// URLs are allowed")
        if url in self._network_errors:
            raise FetchError(url, "network error: connection reset")
        if url in self._statuses:
            raise FetchError(url, f"HTTP {self._statuses[url]}")
        if url not in self._bodies:
            raise FetchError(url, "HTTP 404")

        return HttpResponse(url=url, status_code=200, text=self._bodies[url])

    def close(self) -> None:
        self._closed = True
