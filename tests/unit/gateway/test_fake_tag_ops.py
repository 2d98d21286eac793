"""Tests for FakeGitTagOps behavior that other tests rely on."""

from pathlib import Path

import pytest

from retag.errors import RefResolutionFailed, TagDeleteFailed, TagDiscoveryFailed
from retag.gateway.git.tag_ops.fake import FakeGitTagOps
from tests.test_utils.builders import COMMIT_A, COMMIT_B, COMMIT_HEAD, REPO_ROOT


def test_repository_root_defaults_to_cwd() -> None:
    assert FakeGitTagOps().get_repository_root(Path("/x")) == Path("/x")
    assert FakeGitTagOps(repo_root=Path("/r")).get_repository_root(Path("/r/sub")) == Path("/r")
    assert FakeGitTagOps(is_repo=False).get_repository_root(Path("/x")) is None


def test_fetch_overwrites_local_tags_with_remote_ones() -> None:
    git = FakeGitTagOps(tags={"v1": COMMIT_A}, remote_tags={"v1": COMMIT_B, "v2": COMMIT_A})

    git.fetch_remote_tags(REPO_ROOT, "origin")

    assert git.local_tags == {"v1": COMMIT_B, "v2": COMMIT_A}
    assert git.fetched_remotes == ["origin"]


def test_fetch_error() -> None:
    git = FakeGitTagOps(fetch_error="could not read from remote")

    with pytest.raises(TagDiscoveryFailed):
        git.fetch_remote_tags(REPO_ROOT, "origin")


def test_resolve_head_and_tags() -> None:
    git = FakeGitTagOps(tags={"v1": COMMIT_A}, head=COMMIT_HEAD)

    assert git.resolve_commit(REPO_ROOT, "HEAD") == COMMIT_HEAD
    assert git.resolve_commit(REPO_ROOT, "v1") == COMMIT_A
    with pytest.raises(RefResolutionFailed):
        git.resolve_commit(REPO_ROOT, "v2")


def test_delete_missing_tag_fails() -> None:
    with pytest.raises(TagDeleteFailed):
        FakeGitTagOps().delete_local_tag(REPO_ROOT, "v1")
