"""Fetch and parse the upstream release index.

The Ruby cache publishes a tab-separated index with one row per archive:

    name        url                                                    sha1  sha256  sha512
    ruby-3.2.2  https://cache.ruby-lang.org/pub/ruby/3.2/ruby-3.2.2.tar.gz  ...   ...     ...

A listing that does not have this shape aborts the run: guessing at a
half-understood listing would silently produce wrong "latest" selections.
"""

import logging

from ruby_version_checker.core.errors import FetchError
from ruby_version_checker.core.http.abc import HttpClient
from ruby_version_checker.core.types import Artifact, IndexEntry, ReleaseCandidate
from ruby_version_checker.core.versions import ParsedVersion, parse_version

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "url", "sha256")


def parse_index(text: str, source: str) -> list[IndexEntry]:
    """Parse index text into entries.

    Args:
        text: Raw body of the index file
        source: URL the body came from (for error messages)

    Returns:
        One IndexEntry per data row, in listing order

    Raises:
        FetchError: If the header is missing a required column or a row is
            shorter than the header
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise FetchError(source, "listing is empty")

    header = [column.strip() for column in lines[0].split("\t")]
    missing = [column for column in REQUIRED_COLUMNS if column not in header]
    if missing:
        raise FetchError(source, f"listing header lacks column(s): {', '.join(missing)}")

    name_idx = header.index("name")
    url_idx = header.index("url")
    sha256_idx = header.index("sha256")

    entries: list[IndexEntry] = []
    for line_number, line in enumerate(lines[1:], start=2):
        fields = line.split("\t")
        if len(fields) < len(header):
            raise FetchError(
                source,
                f"malformed listing row {line_number}: expected {len(header)} columns, "
                f"got {len(fields)}",
            )
        entries.append(
            IndexEntry(
                name=fields[name_idx].strip(),
                url=fields[url_idx].strip(),
                sha256=fields[sha256_idx].strip(),
            )
        )

    return entries


def fetch_index(client: HttpClient, index_url: str) -> list[IndexEntry]:
    """Download and parse the release index.

    Raises:
        FetchError: On any network, status or format failure
    """
    response = client.get(index_url)
    entries = parse_index(response.text, index_url)
    logger.info("Fetched %d index entries from %s", len(entries), index_url)
    return entries


def collect_candidates(entries: list[IndexEntry]) -> list[ReleaseCandidate]:
    """Group index rows into release candidates keyed by parsed version.

    Rows whose name is not a version are skipped. Artifact order follows the
    listing; a URL listed twice for the same release is kept once.
    """
    artifacts_by_version: dict[ParsedVersion, list[Artifact]] = {}
    for entry in entries:
        version = parse_version(entry.name)
        if version is None:
            logger.debug("Skipping non-release entry %r", entry.name)
            continue

        artifacts = artifacts_by_version.setdefault(version, [])
        if any(existing.url == entry.url for existing in artifacts):
            continue
        artifacts.append(Artifact(url=entry.url, listed_sha256=entry.sha256))

    candidates = [
        ReleaseCandidate(version=version, artifacts=tuple(artifacts))
        for version, artifacts in artifacts_by_version.items()
    ]
    logger.info("Parsed %d release candidates", len(candidates))
    return candidates
