"""HTTP operations interface for talking to the Ruby release server.

This module defines the abstract interface for outbound HTTP, following the
ops pattern with ABC-based dependency injection for testability.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Successful (2xx) response body.

    Attributes:
        url: Final URL the body was read from
        status_code: HTTP status code (always 2xx)
        text: Decoded response body
    """

    url: str
    status_code: int
    text: str


class HttpClient(ABC):
    """Abstract interface for HTTP GET requests.

    Real implementations use httpx against the network. Fake implementations
    serve pre-configured bodies from memory so unit tests never touch the
    network.

    The client is constructed once by the CLI entry point and passed down
    explicitly; nothing in the pipeline reaches for a module-level client.
    """

    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """Fetch a URL and return its body.

        Args:
            url: Absolute https:// URL

        Returns:
            HttpResponse for a 2xx reply

        Raises:
            FetchError: On network failure, non-2xx status, or a non-https URL
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release any pooled connections held by the client."""
        ...
