"""Tests for release identifier parsing."""

import pytest

from ruby_version_checker.core.versions import ParsedVersion, normalize_identifier, parse_version


class TestParseVersion:
    """Tests for parse_version function."""

    def test_parse_bare_version(self) -> None:
        assert parse_version("3.2.1") == ParsedVersion(3, 2, 1)

    def test_parse_index_name(self) -> None:
        """Release names from the index carry a "ruby-" prefix."""
        assert parse_version("ruby-3.2.1") == ParsedVersion(3, 2, 1)

    def test_parse_tag_with_v_prefix(self) -> None:
        assert parse_version("v3.3.0") == ParsedVersion(3, 3, 0)

    def test_parse_prerelease_suffix(self) -> None:
        result = parse_version("ruby-3.3.0-preview1")
        assert result == ParsedVersion(3, 3, 0, "preview1")
        assert result is not None
        assert result.is_prerelease is True

    def test_parse_patchlevel_suffix(self) -> None:
        """"-p<n>" is a numeric patch level of a release, not a pre-release."""
        result = parse_version("ruby-1.9.3-p551")
        assert result == ParsedVersion(1, 9, 3, patchlevel=551)
        assert result is not None
        assert result.is_prerelease is False

    def test_tag_starting_with_p_is_still_prerelease(self) -> None:
        result = parse_version("ruby-2.7.0-preview3")
        assert result == ParsedVersion(2, 7, 0, "preview3")
        assert result is not None
        assert result.patchlevel is None

    def test_parse_multi_digit_components(self) -> None:
        assert parse_version("10.12.105") == ParsedVersion(10, 12, 105)

    @pytest.mark.parametrize(
        "identifier",
        [
            "",
            "ruby-3.2",
            "3",
            "3.2.x",
            "3.2.1.4",
            "ruby-0.95",
            "ruby-1.0-961225",
            "stable-snapshot",
            "3.2.1-",
            "03.2.1",
            "3.2.1 extra",
            "ruby-3.2.1.tar.gz",
        ],
    )
    def test_non_versions_return_none(self, identifier: str) -> None:
        assert parse_version(identifier) is None

    @pytest.mark.parametrize(
        ("identifier", "normalized"),
        [
            ("3.2.1", "3.2.1"),
            ("v3.2.1", "3.2.1"),
            ("ruby-3.4.0-rc1", "3.4.0-rc1"),
            ("ruby-2.7.0-preview3", "2.7.0-preview3"),
            ("ruby-1.9.3-p551", "1.9.3-p551"),
            ("ruby-1.9.3-p0", "1.9.3-p0"),
            ("0.0.0", "0.0.0"),
        ],
    )
    def test_str_renders_normalized_input(self, identifier: str, normalized: str) -> None:
        result = parse_version(identifier)
        assert result is not None
        assert str(result) == normalized
        assert str(result) == normalize_identifier(identifier)


class TestParsedVersion:
    """Tests for ParsedVersion properties."""

    def test_minor_line_and_label(self) -> None:
        version = ParsedVersion(3, 10, 2)
        assert version.minor_line == (3, 10)
        assert version.minor_label == "3.10"

    def test_stable_outranks_prerelease_at_equal_patch(self) -> None:
        stable = ParsedVersion(3, 3, 0)
        rc = ParsedVersion(3, 3, 0, "rc1")
        assert stable.selection_key > rc.selection_key

    def test_stable_outranks_prerelease_of_higher_patch(self) -> None:
        preview = ParsedVersion(3, 2, 2, "preview1")
        stable = ParsedVersion(3, 2, 1)
        assert stable.selection_key > preview.selection_key

    def test_higher_patch_outranks_lower_patch(self) -> None:
        assert ParsedVersion(3, 2, 2).selection_key > ParsedVersion(3, 2, 1).selection_key
        rc = ParsedVersion(3, 5, 1, "rc1")
        preview = ParsedVersion(3, 5, 0, "preview9")
        assert rc.selection_key > preview.selection_key

    def test_prerelease_tags_compare_lexicographically(self) -> None:
        preview = ParsedVersion(3, 4, 0, "preview1")
        rc = ParsedVersion(3, 4, 0, "rc1")
        assert rc.selection_key > preview.selection_key

    def test_patchlevels_compare_numerically(self) -> None:
        p72 = ParsedVersion(1, 8, 7, patchlevel=72)
        p374 = ParsedVersion(1, 8, 7, patchlevel=374)
        assert p374.selection_key > p72.selection_key

    def test_patchlevel_outranks_bare_release_and_prereleases(self) -> None:
        p0 = ParsedVersion(1, 9, 3, patchlevel=0)
        assert p0.selection_key > ParsedVersion(1, 9, 3).selection_key
        assert p0.selection_key > ParsedVersion(1, 9, 3, "rc2").selection_key

    def test_higher_patch_outranks_patchlevel(self) -> None:
        p330 = ParsedVersion(1, 9, 2, patchlevel=330)
        assert ParsedVersion(1, 9, 3, patchlevel=0).selection_key > p330.selection_key
