"""Real HTTP operations using httpx.

All transport and status failures are converted to FetchError at this
boundary, so callers deal with exactly one exception type.
"""

import logging
from urllib.parse import urlparse

import httpx

from ruby_version_checker.core.errors import FetchError
from ruby_version_checker.core.http.abc import HttpClient, HttpResponse

logger = logging.getLogger(__name__)

USER_AGENT = "ruby-version-checker"


class RealHttpClient(HttpClient):
    """Production HttpClient backed by a pooled httpx.Client.

    Only https:// URLs are requested. Redirects are followed, and the final
    URL is checked against the same rule.

    Example:
        client = RealHttpClient(timeout_seconds=10.0)
        try:
            body = client.get("https://cache.ruby-lang.org/pub/ruby/index.txt").text
        finally:
            client.close()
    """

    def __init__(
        self,
        timeout_seconds: float,
        max_connections: int = 8,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create the underlying httpx client.

        Args:
            timeout_seconds: Per-request connect/read timeout
            max_connections: Connection pool size, matched to the worker pool
            transport: Optional httpx transport (httpx.MockTransport in tests)
        """
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout_seconds),
            limits=httpx.Limits(max_connections=max_connections),
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
            transport=transport,
        )

    def get(self, url: str) -> HttpResponse:
        if urlparse(url).scheme != "https":
            raise FetchError(url, "only https:// URLs are allowed")

        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(url, f"network error: {exc}") from exc

        final_url = str(response.url)
        if urlparse(final_url).scheme != "https":
            raise FetchError(url, f"redirected to non-https URL {final_url}")

        return HttpResponse(url=final_url, status_code=response.status_code, text=response.text)

    def close(self) -> None:
        self._client.close()
