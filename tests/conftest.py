"""Shared test helpers and fixtures."""

import hashlib
from pathlib import Path

import pytest

from ruby_version_checker.core.config import DEFAULT_INDEX_URL
from ruby_version_checker.core.http.fake import FakeHttpClient
from ruby_version_checker.core.types import Release
from ruby_version_checker.core.versions import parse_version

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read a fixture file from tests/fixtures/."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def fixture_sha256(url: str) -> str:
    """Digest listed for an artifact in fixtures/index.txt.

    The fixture lists sha256(url) for every artifact, except for the
    deliberately malformed digest of ruby-3.1.4.tar.gz.
    """
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


def artifact_url(name: str, ext: str = "tar.gz") -> str:
    """Cache URL of an archive, e.g. artifact_url("ruby-3.2.1")."""
    version = parse_version(name)
    assert version is not None
    return f"https://cache.ruby-lang.org/pub/ruby/{version.minor_label}/{name}.{ext}"


def make_release(version: str, *exts: str) -> Release:
    """Build a resolved Release with fixture-style URLs and digests."""
    parsed = parse_version(version)
    assert parsed is not None
    urls = tuple(artifact_url(f"ruby-{version}", ext) for ext in (exts or ("tar.gz",)))
    return Release(
        version=parsed,
        download_urls=urls,
        checksums={url: fixture_sha256(url) for url in urls},
    )


@pytest.fixture
def index_http() -> FakeHttpClient:
    """FakeHttpClient serving fixtures/index.txt at the default index URL."""
    return FakeHttpClient(bodies={DEFAULT_INDEX_URL: load_fixture("index.txt")})
