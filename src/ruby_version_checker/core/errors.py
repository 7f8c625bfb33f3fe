"""Exception types raised by the release discovery pipeline."""


class RubyVersionCheckerError(Exception):
    """Base class for errors raised by ruby-version-checker."""


class FetchError(RubyVersionCheckerError):
    """Retrieving data from the release server failed.

    Raised for network failures, non-2xx responses, non-https URLs and
    malformed listings. When raised while fetching the release index the whole
    run aborts; when raised while fetching a checksum file it only disqualifies
    one release.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ChecksumError(RubyVersionCheckerError):
    """A release's SHA-256 digest is missing, unreachable, or malformed."""

    def __init__(self, version: str, reason: str) -> None:
        self.version = version
        self.reason = reason
        super().__init__(f"No usable checksum for Ruby {version}: {reason}")
