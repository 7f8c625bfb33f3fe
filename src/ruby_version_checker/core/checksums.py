"""Resolve and validate SHA-256 digests for release candidates.

Digests normally come inline from the release index. When a row carries no
digest, the sidecar file ``<artifact-url>.sha256`` is fetched instead. Every
digest is checked against the hex format before it is trusted; a candidate
with any unusable digest is dropped rather than emitted without one.
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor

from ruby_version_checker.core.errors import ChecksumError, FetchError
from ruby_version_checker.core.http.abc import HttpClient
from ruby_version_checker.core.types import Artifact, Release, ReleaseCandidate

logger = logging.getLogger(__name__)

SHA256_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")
SIDECAR_SUFFIX = ".sha256"


def normalize_sha256(text: str) -> str | None:
    """Return the lowercase digest, or None if text is not 64 hex characters."""
    candidate = text.strip()
    if SHA256_HEX_PATTERN.match(candidate) is None:
        return None
    return candidate.lower()


def parse_checksum_file(text: str) -> str | None:
    """Extract the digest from sha256sum-style checksum file text.

    The digest is the first whitespace-separated token of the first
    non-empty line ("<hex>  <filename>" or a bare "<hex>").

    Returns:
        Lowercase digest, or None if the file does not start with one
    """
    for line in text.splitlines():
        tokens = line.split()
        if tokens:
            return normalize_sha256(tokens[0])
    return None


def _resolve_artifact(client: HttpClient, version: str, artifact: Artifact) -> str:
    if artifact.listed_sha256:
        digest = normalize_sha256(artifact.listed_sha256)
        if digest is None:
            raise ChecksumError(
                version, f"malformed digest {artifact.listed_sha256!r} for {artifact.url}"
            )
        return digest

    sidecar_url = artifact.url + SIDECAR_SUFFIX
    try:
        response = client.get(sidecar_url)
    except FetchError as e:
        raise ChecksumError(version, f"checksum file unavailable ({e.reason})") from e

    digest = parse_checksum_file(response.text)
    if digest is None:
        raise ChecksumError(version, f"checksum file {sidecar_url} holds no SHA-256 digest")
    return digest


def resolve_release(client: HttpClient, candidate: ReleaseCandidate) -> Release:
    """Attach a verified digest to every artifact of a candidate.

    Raises:
        ChecksumError: If the candidate has no artifacts or any artifact's
            digest cannot be obtained or is malformed
    """
    version = str(candidate.version)
    if not candidate.artifacts:
        raise ChecksumError(version, "no artifacts listed")

    checksums = {
        artifact.url: _resolve_artifact(client, version, artifact)
        for artifact in candidate.artifacts
    }
    return Release(
        version=candidate.version,
        download_urls=candidate.download_urls,
        checksums=checksums,
    )


def _resolve_or_none(client: HttpClient, candidate: ReleaseCandidate) -> Release | None:
    try:
        return resolve_release(client, candidate)
    except ChecksumError as e:
        logger.warning("Dropping Ruby %s: %s", e.version, e.reason)
        return None


def resolve_releases(
    client: HttpClient, candidates: list[ReleaseCandidate], max_workers: int
) -> list[Release]:
    """Resolve checksums for all candidates on a bounded worker pool.

    Each lookup returns its own result; results are gathered into a plain
    list once every lookup has finished. Candidates that fail are logged and
    left out.

    Args:
        client: HTTP client shared by the workers (must be thread-safe)
        candidates: Parsed release candidates
        max_workers: Upper bound on concurrent lookups (>= 1)

    Returns:
        Releases whose every artifact has a verified digest
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(lambda c: _resolve_or_none(client, c), candidates))

    releases = [release for release in results if release is not None]
    dropped = len(candidates) - len(releases)
    if dropped:
        logger.warning(
            "Dropped %d of %d candidates without usable checksums", dropped, len(candidates)
        )
    else:
        logger.info("Resolved checksums for %d candidates", len(releases))
    return releases
