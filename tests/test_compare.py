# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from strict_semver import (
    AlphanumericIdentifier,
    NumericIdentifier,
    ParseError,
    Version,
    compare,
    compare_versions,
    parse_version,
    version_key,
)

PRECEDENCE_STRINGS = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
]


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_core_compared_numerically(self):
        """Test that core fields are not compared as text."""
        assert compare_versions("1.10.0", "1.9.0") == 1
        assert compare_versions("2.0.0", "10.0.0") == -1

    def test_earlier_field_decides(self):
        """Test that a higher minor does not outweigh a lower major."""
        assert compare_versions("1.9.9", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.9.9") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_numeric_below_alphanumeric(self):
        """Test that numeric identifiers always sort below alphanumeric ones."""
        assert compare_versions("1.0.0-9", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-999999", "1.0.0-0A") == -1
        assert compare_versions("1.0.0-alpha", "1.0.0-1") == 1

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1

    def test_alphanumeric_ascii_order(self):
        """Test that alphanumeric identifiers compare by ASCII code point."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-alpha10", "1.0.0-alpha9") == -1
        assert compare_versions("1.0.0--", "1.0.0-0A") == -1

    def test_no_pre_release_aliases(self):
        """Test that 'a' is just text, not shorthand for alpha."""
        assert compare_versions("1.0.0-a", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-rc", "1.0.0-preview") == 1

    def test_prefix_is_lower(self):
        """Test that a strict prefix has lower precedence."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.0") == -1
        assert compare_versions("1.0.0-alpha.beta.1", "1.0.0-alpha.beta") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-alpha+001", "1.0.0-alpha+exp.sha.5114f85") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        v1 = parse_version("1.0.0")
        v2 = parse_version("2.0.0")
        assert compare_versions(v1, v2) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise ParseError."""
        with pytest.raises(ParseError):
            compare_versions("1.0", "1.0.0")


class TestPrecedenceChain:
    """Tests for the SemVer reference precedence chain."""

    def test_core_chain(self):
        """Test 1.0.0 < 1.0.1 < 1.1.0 < 2.0.0."""
        assert parse_version("1.0.0") < parse_version("1.0.1") < parse_version("1.1.0") < parse_version("2.0.0")

    def test_full_prerelease_chain(self):
        """Test the pre-release chain pairwise in both directions."""
        versions = [parse_version(s) for s in PRECEDENCE_STRINGS]
        for i, left in enumerate(versions):
            for j, right in enumerate(versions):
                expected = (i > j) - (i < j)
                assert compare(left, right) == expected, f"{left} vs {right}"

    def test_sorting_shuffled(self):
        """Test that sorting restores the chain."""
        shuffled = list(reversed(PRECEDENCE_STRINGS))
        assert [str(v) for v in sorted(parse_version(s) for s in shuffled)] == PRECEDENCE_STRINGS


class TestRichComparison:
    """Tests for comparison operators on Version."""

    def test_operators(self):
        """Test every rich comparison operator."""
        low = parse_version("1.0.0-rc.1")
        high = parse_version("1.0.0")
        assert low < high
        assert low <= high
        assert high > low
        assert high >= low
        assert low != high
        assert low <= parse_version("1.0.0-rc.1+build")
        assert low >= parse_version("1.0.0-rc.1+build")

    def test_max(self):
        """Test picking the newest version with max()."""
        newest = max(Version(1, 0, 0), parse_version("2.0.0-alpha"))
        assert str(newest) == "2.0.0-alpha"

    def test_compare_with_other_type(self):
        """Test that ordering against a non-Version raises TypeError."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "2.0.0"  # type: ignore

    def test_direct_construction_compares(self):
        """Test comparison of directly built values."""
        rc = Version(1, 0, 0, (AlphanumericIdentifier("rc"), NumericIdentifier(2)))
        assert rc > parse_version("1.0.0-rc.1")
        assert rc < Version(1, 0, 0)


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        versions = ["1.0.0", "1.0.0-rc", "1.0.0-beta", "1.0.0-alpha", "1.0.0-1"]
        assert sorted(versions, key=version_key) == [
            "1.0.0-1",
            "1.0.0-alpha",
            "1.0.0-beta",
            "1.0.0-rc",
            "1.0.0",
        ]

    def test_sorting_chain(self):
        """Test that the key reproduces the reference chain."""
        assert sorted(reversed(PRECEDENCE_STRINGS), key=version_key) == PRECEDENCE_STRINGS

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert str(sorted_versions[0]) == "1.0.0"

    def test_key_ignores_build_metadata(self):
        """Test that the key ignores build metadata."""
        assert version_key("1.0.0-alpha+001") == version_key("1.0.0-alpha+exp.sha")
