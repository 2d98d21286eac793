"""No-op git tag operations wrapper for dry-run mode.

This module provides a wrapper that prevents execution of destructive
tag operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from retag.gateway.git.tag_ops.abc import GitTagOps
from retag.output.output import user_output


class DryRunGitTagOps(GitTagOps):
    """No-op wrapper that prevents execution of destructive tag operations.

    Mutations (delete_local_tag, create_tag, force_push_tag) print what would
    happen. Queries, including the tag fetch, are delegated so the run works
    against the remote's real tag set.

    Usage:
        real_ops = RealGitTagOps()
        noop_ops = DryRunGitTagOps(real_ops)

        # Query operations work normally
        commit = noop_ops.resolve_commit(repo_root, "v1")

        # Mutation operations print dry-run message
        noop_ops.delete_local_tag(repo_root, "v1")
    """

    def __init__(self, wrapped: GitTagOps) -> None:
        """Create a dry-run wrapper around a GitTagOps implementation.

        Args:
            wrapped: The GitTagOps implementation to wrap (usually RealGitTagOps)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._wrapped.get_repository_root(cwd)

    def fetch_remote_tags(self, repo_root: Path, remote: str) -> None:
        self._wrapped.fetch_remote_tags(repo_root, remote)

    def list_local_tags(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_local_tags(repo_root)

    def resolve_commit(self, repo_root: Path, ref: str) -> str:
        return self._wrapped.resolve_commit(repo_root, ref)

    # ============================================================================
    # Mutation Operations (print dry-run message)
    # ============================================================================

    def delete_local_tag(self, repo_root: Path, tag_name: str) -> None:
        """Print dry-run message instead of deleting the tag."""
        user_output(f"[DRY RUN] Would run: git tag -d {tag_name}")

    def create_tag(self, repo_root: Path, tag_name: str, commit: str) -> None:
        """Print dry-run message instead of creating the tag."""
        user_output(f"[DRY RUN] Would run: git tag {tag_name} {commit}")

    def force_push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Print dry-run message instead of pushing the tag."""
        refspec = f"refs/tags/{tag_name}:refs/tags/{tag_name}"
        user_output(f"[DRY RUN] Would run: git push {remote} {refspec} --force")
