"""Parse Ruby release identifiers into SemVer-like versions.

Upstream listings contain plenty of entries that are not releases (old
snapshot tarballs, odd historical names). Those are not errors: they parse to
None and the caller skips them.
"""

import re
from dataclasses import dataclass

# Full match on the normalized identifier:
# - major.minor.patch, all numeric without leading zeros (patch is mandatory)
# - optional "-p<n>" patch level, as in "1.9.3-p551" (a release, numeric)
# - otherwise an optional "-<tag>" pre-release suffix such as "preview1" or "rc1"
_VERSION_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-p(?P<patchlevel>0|[1-9]\d*)|-(?P<prerelease>[0-9A-Za-z][0-9A-Za-z.]*))?$"
)

_PRODUCT_PREFIX = "ruby-"


@dataclass(frozen=True)
class ParsedVersion:
    """A version parsed from a release identifier.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release tag after the first "-" (None for releases)
        patchlevel: Numeric "-p<n>" patch level of a release (None if absent)
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    patchlevel: int | None = None

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    @property
    def minor_line(self) -> tuple[int, int]:
        """Grouping key shared by every release of the same minor line."""
        return (self.major, self.minor)

    @property
    def minor_label(self) -> str:
        """Minor line as rendered in the catalog, e.g. "3.2"."""
        return f"{self.major}.{self.minor}"

    @property
    def selection_key(self) -> tuple[bool, int, int, str]:
        """Key whose maximum is the best release within one minor line.

        Any stable release beats every pre-release; then the highest patch
        wins; then the highest patch level, where "1.9.3-p0" outranks a bare
        "1.9.3"; between pre-releases of equal patch the lexicographically
        greater tag wins.
        """
        patchlevel = -1 if self.patchlevel is None else self.patchlevel
        return (self.prerelease is None, self.patch, patchlevel, self.prerelease or "")

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.patchlevel is not None:
            return f"{base}-p{self.patchlevel}"
        if self.prerelease is None:
            return base
        return f"{base}-{self.prerelease}"


def normalize_identifier(identifier: str) -> str:
    """Strip surrounding whitespace, the "ruby-" product prefix and a leading "v"."""
    text = identifier.strip()
    if text.startswith(_PRODUCT_PREFIX):
        text = text[len(_PRODUCT_PREFIX) :]
    if text[:1] in ("v", "V"):
        text = text[1:]
    return text


def parse_version(identifier: str) -> ParsedVersion | None:
    """Parse a release identifier into a ParsedVersion.

    Accepts:
      - Bare versions: "3.2.1"
      - Tag names: "v3.2.1"
      - Release names from the index: "ruby-3.3.0-preview1"

    Args:
        identifier: Directory, tag or release name

    Returns:
        ParsedVersion, or None when the identifier is not a full
        major.minor.patch version

    Examples:
        >>> str(parse_version("ruby-3.2.2"))
        '3.2.2'
        >>> parse_version("v3.4.0-rc1").prerelease
        'rc1'
        >>> parse_version("ruby-1.9.3-p551").patchlevel
        551
        >>> parse_version("ruby-3.2") is None
        True
    """
    match = _VERSION_PATTERN.match(normalize_identifier(identifier))
    if match is None:
        return None

    patchlevel = match.group("patchlevel")
    return ParsedVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease"),
        patchlevel=None if patchlevel is None else int(patchlevel),
    )
