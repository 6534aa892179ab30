"""Unit tests for PrefixResolver component."""

import os

import pytest

from relocate.resolver import (
    DEFAULT_MATCHERS,
    MatchStatus,
    PrefixResolver,
    list_subdirectories,
    wildcard_pattern,
)
from conftest import make_dirs


@pytest.fixture
def base(tmp_path):
    return str(tmp_path / "base")


def resolve(base, prefix, *names, allow_caseless=False):
    make_dirs(base, *names)
    return PrefixResolver().resolve(prefix, base, allow_caseless=allow_caseless)


class TestListSubdirectories:
    """Tests for subdirectory enumeration."""

    def test_only_directories(self, base):
        """Test files are not listed."""
        make_dirs(base, "sub")
        with open(os.path.join(base, "file"), "w") as handle:
            handle.write("x")
        assert list_subdirectories(base) == ["sub"]

    def test_symlink_to_directory(self, base, tmp_path):
        """Test symbolic links to directories are listed."""
        make_dirs(str(tmp_path), "elsewhere")
        make_dirs(base)
        os.symlink(str(tmp_path / "elsewhere"), os.path.join(base, "link"))
        assert list_subdirectories(base) == ["link"]

    def test_dangling_symlink_skipped(self, base):
        """Test links to nothing are not listed."""
        make_dirs(base)
        os.symlink(os.path.join(base, "missing"), os.path.join(base, "dangling"))
        assert list_subdirectories(base) == []

    def test_hidden_directories_listed(self, base):
        """Test names starting with a dot are candidates too."""
        make_dirs(base, ".config")
        assert list_subdirectories(base) == [".config"]


class TestPlainTier:
    """Tests for case-sensitive prefix matching."""

    def test_exactly_one_match(self, base):
        """Test a unique prefix."""
        result = resolve(base, "ab", "abc", "xyz")
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "abc"
        assert result.advisory is None
        assert result.tier == "plain"
        assert result.ok

    def test_multiple_matches(self, base):
        """Test the sorted-first match wins and the rest are reported."""
        result = resolve(base, "ab", "abd", "abc", "xyz")
        assert result.status == MatchStatus.MULTIPLE
        assert result.first_match == "abc"
        assert result.matches == ["abc", "abd"]
        assert result.advisory == f"Also: {base} ab -> abd"
        assert result.ok

    def test_full_name_is_a_prefix(self, base):
        """Test a complete name matches itself and longer names."""
        result = resolve(base, "src", "src", "src2")
        assert result.first_match == "src"
        assert result.status == MatchStatus.MULTIPLE

    def test_empty_prefix_matches_everything(self, base):
        """Test an empty prefix matches every subdirectory."""
        result = resolve(base, "", "b", "a")
        assert result.first_match == "a"
        assert result.matches == ["a", "b"]

    def test_glob_characters_are_literal(self, base):
        """Test '*' and '?' in a prefix are ordinary characters."""
        result = resolve(base, "a*", "abc")
        assert result.status == MatchStatus.NONE

    def test_sorting_is_by_code_point(self, base):
        """Test uppercase sorts before lowercase."""
        result = resolve(base, "", "apple", "Zebra")
        assert result.first_match == "Zebra"


class TestCaselessTier:
    """Tests for caseless prefix matching."""

    def test_caseless_disabled(self, base):
        """Test no caseless match unless allowed."""
        result = resolve(base, "foo", "Foo")
        assert result.status == MatchStatus.NONE

    def test_caseless_enabled(self, base):
        """Test caseless match when allowed."""
        result = resolve(base, "foo", "Foo", allow_caseless=True)
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "Foo"
        assert result.tier == "caseless"

    def test_exact_case_wins_over_caseless(self, base):
        """Test the caseless tier isn't tried when the plain tier matches."""
        result = resolve(base, "foo", "Foobar", "foo", allow_caseless=True)
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "foo"

    def test_caseless_advisory(self, base):
        """Test the advisory names the caseless tier."""
        result = resolve(base, "doc", "Docs", "DOCUMENTS", allow_caseless=True)
        assert result.first_match == "DOCUMENTS"
        assert result.advisory == f"Also (ignoring case): {base} doc -> Docs"

    def test_resolver_default(self, base):
        """Test the resolver's allow_caseless default is used."""
        make_dirs(base, "Foo")
        assert PrefixResolver(allow_caseless=True).resolve("foo", base).first_match == "Foo"
        assert PrefixResolver().resolve("foo", base).status == MatchStatus.NONE


class TestWildcardTiers:
    """Tests for dot-wildcard matching."""

    def test_wildcard_pattern(self):
        """Test dots become match-anything runs and the rest is escaped."""
        assert wildcard_pattern("v..3") == "v.*.*3"
        assert wildcard_pattern("a+.b") == "a\\+.*b"

    def test_dots_match_anything(self, base):
        """Test 'v..3' reaches 'v1.2.3' through the wildcard tier."""
        result = resolve(base, "v..3", "v1.2.3")
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "v1.2.3"
        assert result.tier == "wildcard"

    def test_dot_matches_zero_characters(self, base):
        """Test a dot may match nothing at all."""
        result = resolve(base, "ab.c", "abc")
        assert result.first_match == "abc"

    def test_wildcard_prefix_is_anchored(self, base):
        """Test the wildcard tier matches at the start of the name."""
        result = resolve(base, "s.m", "src-main", "xsm")
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "src-main"

    def test_non_prefix_wildcard(self, base):
        """Test the last tier matches anywhere in the name."""
        result = resolve(base, "ma.n", "src-main")
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "src-main"
        assert result.tier == "non-prefix wildcard"

    def test_non_prefix_wildcard_advisory(self, base):
        """Test the advisory names the non-prefix wildcard tier."""
        result = resolve(base, "ma.n", "b-main", "a-main")
        assert result.advisory == f"Also (non-prefix wildcards): {base} ma.n -> b-main"

    def test_leading_dot_matches_anywhere(self, base):
        """Test a leading dot already matches anywhere via the wildcard tier."""
        result = resolve(base, ".main", "src-main")
        assert result.first_match == "src-main"
        assert result.tier == "wildcard"

    def test_no_dots_no_wildcards(self, base):
        """Test a prefix without dots never reaches the wildcard tiers."""
        result = resolve(base, "main", "src-main")
        assert result.status == MatchStatus.NONE

    def test_stop_at_first_non_empty_tier(self, base):
        """Test a wildcard-prefix match hides non-prefix matches."""
        result = resolve(base, "a.c", "abc", "xabc")
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "abc"

    def test_plain_match_hides_wildcard_matches(self, base):
        """Test a literal dotted name wins before wildcards are tried."""
        result = resolve(base, "v1.2", "v1.2", "v1x2")
        assert result.status == MatchStatus.EXACTLY_ONE
        assert result.first_match == "v1.2"

    def test_tier_order(self):
        """Test the tiers are tried in their fixed order."""
        assert [m.name for m in DEFAULT_MATCHERS] == [
            "plain", "caseless", "wildcard", "non-prefix wildcard",
        ]


class TestNoMatchesAndMisuse:
    """Tests for failures."""

    def test_no_matches_message(self, base):
        """Test the message names the directory and the prefix."""
        result = resolve(base, "zz", "abc")
        assert result.status == MatchStatus.NONE
        assert result.first_match is None
        assert result.advisory == f"There's no subdirectory of {base} that starts with 'zz'."
        assert not result.ok

    def test_missing_base_directory(self, tmp_path):
        """Test a vanished directory is a no-match naming the path."""
        missing = str(tmp_path / "gone")
        result = PrefixResolver().resolve("a", missing)
        assert result.status == MatchStatus.NONE
        assert missing in result.advisory

    def test_base_is_a_file(self, tmp_path):
        """Test a file as the base directory is a no-match."""
        path = tmp_path / "file"
        path.write_text("x")
        result = PrefixResolver().resolve("a", str(path))
        assert result.status == MatchStatus.NONE

    def test_empty_base_means_root(self):
        """Test an empty base directory is the root directory."""
        result = PrefixResolver().resolve("", "")
        assert result.ok
        assert os.path.isdir(os.path.join("/", result.first_match))

    def test_missing_arguments(self):
        """Test missing arguments are misuse."""
        assert PrefixResolver().resolve(None, None).status == MatchStatus.MISUSED
        assert PrefixResolver().resolve("a", None).status == MatchStatus.MISUSED
