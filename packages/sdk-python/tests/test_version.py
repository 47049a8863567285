"""Tests for semantic-version parsing and precedence."""

import pytest

from gomodmerge_sdk.dependencies.version import (
    Version,
    compare_versions,
    is_valid_version,
    parse_version,
)


class TestVersionParsing:
    """Tests for version parsing."""

    def test_parse_full_version(self):
        v = parse_version("v1.2.3")
        assert (v.major, v.minor, v.patch) == (1, 2, 3)
        assert v.prerelease == ()
        assert v.build == ()

    def test_parse_shorthand(self):
        """v1 and v1.2 are shorthand for v1.0.0 and v1.2.0."""
        assert parse_version("v1") == parse_version("v1.0.0")
        assert parse_version("v1.2") == parse_version("v1.2.0")

    def test_parse_prerelease_and_build(self):
        v = parse_version("v1.0.0-rc.1+build.5")
        assert v.prerelease == ("rc", "1")
        assert v.build == ("build", "5")
        assert v.is_prerelease

    def test_parse_pseudo_version(self):
        v = parse_version("v0.0.0-20190101000000-abcdef123456")
        assert v.prerelease == ("20190101000000-abcdef123456",)

    def test_str_is_canonical(self):
        assert str(parse_version("v1.2")) == "v1.2.0"
        assert str(parse_version("v2.0.0-beta.1+meta")) == "v2.0.0-beta.1+meta"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "latest",
            "1.2.3",
            " v1.2.3",
            "v1.2.3.4",
            "v01.2.3",
            "v1.02.3",
            "v1.2-pre",
            "v1+meta",
            "v1.2.3-",
            "v1.2.3-01",
            "v1.2.3-rc..1",
        ],
    )
    def test_invalid_versions_raise(self, text):
        with pytest.raises(ValueError):
            parse_version(text)
        assert not is_valid_version(text)


class TestVersionComparison:
    """Tests for semantic-version precedence."""

    def test_numeric_core(self):
        assert parse_version("v1.0.0") < parse_version("v2.0.0")
        assert parse_version("v1.0.0") < parse_version("v1.1.0")
        assert parse_version("v1.0.0") < parse_version("v1.0.1")
        assert parse_version("v1.10.0") > parse_version("v1.9.0")

    def test_prerelease_before_release(self):
        assert parse_version("v1.0.0-alpha") < parse_version("v1.0.0")
        assert parse_version("v1.0.0") > parse_version("v1.0.0-rc.1")

    def test_semver_precedence_chain(self):
        """The ordering example from the semantic versioning specification."""
        chain = [
            "v1.0.0-alpha",
            "v1.0.0-alpha.1",
            "v1.0.0-alpha.beta",
            "v1.0.0-beta",
            "v1.0.0-beta.2",
            "v1.0.0-beta.11",
            "v1.0.0-rc.1",
            "v1.0.0",
        ]
        for lower, higher in zip(chain, chain[1:]):
            assert compare_versions(lower, higher) == -1, (lower, higher)
            assert compare_versions(higher, lower) == 1, (lower, higher)

    def test_build_metadata_ignored(self):
        assert compare_versions("v1.0.0+a", "v1.0.0+b") == 0
        assert parse_version("v2.0.0+incompatible") == parse_version("v2.0.0")
        assert hash(parse_version("v2.0.0+incompatible")) == hash(parse_version("v2.0.0"))

    def test_pseudo_versions_order_by_timestamp(self):
        older = "v0.0.0-20190101000000-abcdef123456"
        newer = "v0.0.0-20200101000000-123456abcdef"
        assert compare_versions(newer, older) == 1
        assert compare_versions(older, "v0.1.0") == -1

    def test_invalid_sorts_below_valid(self):
        assert compare_versions("garbage", "v0.0.1") == -1
        assert compare_versions("v0.0.1", "garbage") == 1
        assert compare_versions("", "v0.0.1") == -1

    def test_unprefixed_version_is_invalid(self):
        """The go tool requires the v prefix; without it the string ranks lowest."""
        assert compare_versions("1.2.0", "v1.0.0") == -1
        assert compare_versions("1.2.0", "1.0.0") == 0

    def test_invalid_versions_compare_equal(self):
        assert compare_versions("garbage", "other-garbage") == 0
        assert compare_versions(None, "") == 0

    def test_version_not_equal_to_other_types(self):
        assert parse_version("v1.0.0") != "v1.0.0"
        assert isinstance(parse_version("v1.0.0"), Version)
