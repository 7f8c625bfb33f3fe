"""Type definitions for discovered Ruby releases."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ruby_version_checker.core.versions import ParsedVersion


def _frozen_mapping(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class IndexEntry:
    """One row of the upstream release index.

    Every downloadable archive has its own row, so a single release usually
    spans several entries (tar.gz, tar.bz2, tar.xz, zip).
    """

    name: str  # e.g. "ruby-3.2.2"
    url: str
    sha256: str  # Inline digest text exactly as listed; may be empty


@dataclass(frozen=True)
class Artifact:
    """One downloadable archive of a release candidate."""

    url: str
    listed_sha256: str  # Unvalidated digest text from the index ("" if absent)


@dataclass(frozen=True)
class ReleaseCandidate:
    """A parsed release whose checksums have not been resolved yet."""

    version: ParsedVersion
    artifacts: tuple[Artifact, ...]

    @property
    def download_urls(self) -> tuple[str, ...]:
        return tuple(artifact.url for artifact in self.artifacts)


@dataclass(frozen=True)
class Release:
    """A release with a verified SHA-256 digest for every artifact.

    Attributes:
        version: Parsed release version
        download_urls: Artifact URLs in listing order
        checksums: Read-only mapping of artifact URL -> lowercase hex SHA-256
    """

    version: ParsedVersion
    download_urls: tuple[str, ...]
    checksums: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "checksums", _frozen_mapping(self.checksums))


@dataclass(frozen=True)
class MinorLineEntry:
    """The representative release of one minor version line."""

    minor: str  # e.g. "3.2"
    version: str  # e.g. "3.2.2" or "3.4.0-rc1"
    urls: tuple[str, ...]
    checksums: Mapping[str, str]  # Read-only copy taken at construction

    def __post_init__(self) -> None:
        object.__setattr__(self, "checksums", _frozen_mapping(self.checksums))


@dataclass(frozen=True)
class ReleaseCatalog:
    """Mapping of minor line -> MinorLineEntry, ordered by ascending version."""

    entries: Mapping[str, MinorLineEntry]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, minor: str) -> MinorLineEntry | None:
        return self.entries.get(minor)
