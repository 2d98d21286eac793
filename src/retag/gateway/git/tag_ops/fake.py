"""Fake implementation of git tag operations for testing."""

from __future__ import annotations

from pathlib import Path

from retag.errors import (
    PushRejected,
    RefResolutionFailed,
    TagCreateFailed,
    TagDeleteFailed,
    TagDiscoveryFailed,
)
from retag.gateway.git.tag_ops.abc import GitTagOps


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of git tag operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - tags: Local tags in listing order, mapped to the commit each points at
    - remote_tags: Tags on the remote; fetch copies them over local tags
    - head: Commit that 'HEAD' resolves to
    - is_repo: Whether cwd is inside a repository
    - repo_root: Root reported by get_repository_root() (defaults to cwd)
    - fetch_error: Message to fail fetch_remote_tags() with
    - create_failures / push_rejections: Tag names whose create/push fails

    Mutation Tracking:
    -----------------
    - fetched_remotes: Remotes passed to fetch_remote_tags()
    - deleted_tags: Tag names from delete_local_tag()
    - created_tags: (tag_name, commit) tuples from create_tag()
    - pushed_tags: (remote, tag_name) tuples from force_push_tag()
    """

    def __init__(
        self,
        *,
        tags: dict[str, str] | None = None,
        remote_tags: dict[str, str] | None = None,
        head: str | None = None,
        is_repo: bool = True,
        repo_root: Path | None = None,
        fetch_error: str | None = None,
        create_failures: set[str] | None = None,
        push_rejections: set[str] | None = None,
    ) -> None:
        self._tags: dict[str, str] = dict(tags) if tags is not None else {}
        self._remote_tags: dict[str, str] = dict(remote_tags) if remote_tags is not None else {}
        self._head = head
        self._is_repo = is_repo
        self._repo_root = repo_root
        self._fetch_error = fetch_error
        self._create_failures = create_failures if create_failures is not None else set()
        self._push_rejections = push_rejections if push_rejections is not None else set()

        # Mutation tracking
        self._fetched_remotes: list[str] = []
        self._deleted_tags: list[str] = []
        self._created_tags: list[tuple[str, str]] = []  # (tag_name, commit)
        self._pushed_tags: list[tuple[str, str]] = []  # (remote, tag_name)

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path | None:
        if not self._is_repo:
            return None
        return self._repo_root if self._repo_root is not None else cwd

    def fetch_remote_tags(self, repo_root: Path, remote: str) -> None:
        if self._fetch_error is not None:
            raise TagDiscoveryFailed(self._fetch_error)
        self._fetched_remotes.append(remote)
        self._tags.update(self._remote_tags)

    def list_local_tags(self, repo_root: Path) -> list[str]:
        return list(self._tags)

    def resolve_commit(self, repo_root: Path, ref: str) -> str:
        if ref == "HEAD" and self._head is not None:
            return self._head
        if ref in self._tags:
            return self._tags[ref]
        raise RefResolutionFailed(f"Could not resolve '{ref}' to a commit", ref=ref)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def delete_local_tag(self, repo_root: Path, tag_name: str) -> None:
        if tag_name not in self._tags:
            raise TagDeleteFailed(f"tag '{tag_name}' not found.", tag_name=tag_name)
        del self._tags[tag_name]
        self._deleted_tags.append(tag_name)

    def create_tag(self, repo_root: Path, tag_name: str, commit: str) -> None:
        if tag_name in self._create_failures or tag_name in self._tags:
            raise TagCreateFailed(f"Failed to create tag '{tag_name}'", tag_name=tag_name)
        self._tags[tag_name] = commit
        self._created_tags.append((tag_name, commit))

    def force_push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        if tag_name in self._push_rejections:
            raise PushRejected(
                f"Failed to force-push tag '{tag_name}' to remote '{remote}'",
                tag_name=tag_name,
                remote=remote,
            )
        self._remote_tags[tag_name] = self._tags[tag_name]
        self._pushed_tags.append((remote, tag_name))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def local_tags(self) -> dict[str, str]:
        """Current local tag -> commit mapping, for test assertions."""
        return dict(self._tags)

    @property
    def remote_tag_commits(self) -> dict[str, str]:
        """Current remote tag -> commit mapping, for test assertions."""
        return dict(self._remote_tags)

    @property
    def fetched_remotes(self) -> list[str]:
        return self._fetched_remotes.copy()

    @property
    def deleted_tags(self) -> list[str]:
        return self._deleted_tags.copy()

    @property
    def created_tags(self) -> list[tuple[str, str]]:
        """Get list of tags created during test.

        Returns list of (tag_name, commit) tuples.
        """
        return self._created_tags.copy()

    @property
    def pushed_tags(self) -> list[tuple[str, str]]:
        """Get list of tags pushed during test.

        Returns list of (remote, tag_name) tuples.
        """
        return self._pushed_tags.copy()
