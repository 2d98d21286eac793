"""Tests for tag classification."""

from retag.core.tags import (
    filter_non_root_tags,
    filter_version_tags,
    find_root_tag,
    is_root_tag_name,
    shorten_commit,
)


class TestIsRootTagName:
    def test_bare_major_versions(self) -> None:
        assert is_root_tag_name("v1") is True
        assert is_root_tag_name("v12") is True

    def test_rejects_versions_with_minor(self) -> None:
        assert is_root_tag_name("v1.2") is False
        assert is_root_tag_name("v1.2.3") is False
        assert is_root_tag_name("v12.3") is False

    def test_accepts_suffix_without_minor(self) -> None:
        assert is_root_tag_name("v1-beta") is True
        assert is_root_tag_name("v2rc") is True

    def test_rejects_other_names(self) -> None:
        assert is_root_tag_name("release-1") is False
        assert is_root_tag_name("v") is False
        assert is_root_tag_name("1") is False


class TestFindRootTag:
    def test_finds_root_among_other_tags(self) -> None:
        assert find_root_tag(["v1.0.0", "release", "v1", "v1.1.0"]) == "v1"

    def test_first_listed_wins_when_several_exist(self) -> None:
        assert find_root_tag(["v2", "v1"]) == "v2"
        assert find_root_tag(["v1", "v2"]) == "v1"

    def test_suffixed_major_is_root(self) -> None:
        assert find_root_tag(["v2-beta", "v2.0.0"]) == "v2-beta"

    def test_returns_none_without_root(self) -> None:
        assert find_root_tag(["v1.0.0", "release-1"]) is None

    def test_returns_none_for_empty_list(self) -> None:
        assert find_root_tag([]) is None


class TestFilterVersionTags:
    def test_keeps_major_minor_tags_in_order(self) -> None:
        tags = ["v1", "v1.2", "v1.2.3", "release-1", "v2"]
        assert filter_version_tags(tags) == ["v1.2", "v1.2.3"]

    def test_prefix_match_allows_suffixes(self) -> None:
        assert filter_version_tags(["v2.0-rc1", "x1.0"]) == ["v2.0-rc1"]


class TestFilterNonRootTags:
    def test_excludes_exactly_the_root_tag(self) -> None:
        tags = ["v1.0.0", "v1", "beta", "v1.1.0"]
        assert filter_non_root_tags(tags) == ["v1.0.0", "beta", "v1.1.0"]

    def test_only_first_root_is_excluded(self) -> None:
        assert filter_non_root_tags(["v1", "v2", "v2.0.0"]) == ["v2", "v2.0.0"]

    def test_unchanged_without_root(self) -> None:
        tags = ["release-2", "v1.0.0", "alpha"]
        assert filter_non_root_tags(tags) == tags

    def test_root_only_repository_leaves_nothing(self) -> None:
        assert filter_non_root_tags(["v3"]) == []


def test_shorten_commit_uses_seven_characters() -> None:
    assert shorten_commit("0123456789abcdef") == "0123456"
