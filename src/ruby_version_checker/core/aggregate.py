"""Reduce resolved releases to one representative per minor version line."""

from ruby_version_checker.core.types import MinorLineEntry, Release, ReleaseCatalog


def select_latest(releases: list[Release]) -> Release:
    """Pick the best release of a single minor line.

    Order: any stable release beats every pre-release; then highest patch;
    then highest "-p<n>" patch level; between pre-releases of equal patch the
    lexicographically greater tag wins.

    Raises:
        ValueError: If releases is empty
    """
    if not releases:
        raise ValueError("Cannot select from an empty group of releases")
    # URLs break ties between duplicate versions
    return max(releases, key=lambda r: (r.version.selection_key, r.download_urls))


def latest_per_minor(releases: list[Release]) -> ReleaseCatalog:
    """Build the catalog of latest releases keyed by "<major>.<minor>".

    The result depends only on the set of releases, never on their order:
    selection uses a total order on versions, and the catalog is keyed in
    ascending (major, minor) order.
    """
    groups: dict[tuple[int, int], list[Release]] = {}
    for release in releases:
        groups.setdefault(release.version.minor_line, []).append(release)

    entries: dict[str, MinorLineEntry] = {}
    for minor_line in sorted(groups):
        latest = select_latest(groups[minor_line])
        entries[latest.version.minor_label] = MinorLineEntry(
            minor=latest.version.minor_label,
            version=str(latest.version),
            urls=latest.download_urls,
            checksums=latest.checksums,
        )

    return ReleaseCatalog(entries=entries)
