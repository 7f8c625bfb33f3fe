"""Run configuration.

Provides immutable configuration built once at the CLI entry point from
command-line options and their environment variable fallbacks.
"""

from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_INDEX_URL = "https://cache.ruby-lang.org/pub/ruby/index.txt"
DEFAULT_MAX_WORKERS = 8
DEFAULT_TIMEOUT_SECONDS = 30.0

INDEX_URL_ENV_VAR = "RUBY_VERSION_CHECKER_INDEX_URL"
LOG_LEVEL_ENV_VAR = "RUBY_VERSION_CHECKER_LOG_LEVEL"


def validate_index_url(url: str) -> str:
    """Check that the index URL is an absolute https:// URL.

    Raises:
        ValueError: If the scheme is not https or the host is missing
    """
    parsed = urlparse(url)
    if parsed.scheme != "https":
        raise ValueError(f"Index URL must use https://, got {url!r}")
    if not parsed.netloc:
        raise ValueError(f"Index URL has no host: {url!r}")
    return url


@dataclass(frozen=True)
class CheckerConfig:
    """Immutable run configuration.

    All fields are read-only after construction.
    """

    index_url: str = DEFAULT_INDEX_URL
    max_workers: int = DEFAULT_MAX_WORKERS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        validate_index_url(self.index_url)
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
