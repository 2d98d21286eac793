"""Production git tag operations using subprocess."""

import subprocess
from pathlib import Path

from retag.errors import (
    PushRejected,
    RefResolutionFailed,
    TagCreateFailed,
    TagDeleteFailed,
    TagDiscoveryFailed,
)
from retag.gateway.git.tag_ops.abc import GitTagOps
from retag.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context

# Timeout in seconds for network-touching git operations (fetch, push).
_GIT_NETWORK_TIMEOUT = 120


class RealGitTagOps(GitTagOps):
    """Production implementation of tag operations using subprocess."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the repository root, or None outside a repository."""
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0 or not result.stdout.strip():
            return None
        return Path(result.stdout.strip())

    def fetch_remote_tags(self, repo_root: Path, remote: str) -> None:
        """Fetch tags, overwriting local tags that moved on the remote."""
        try:
            run_subprocess_with_context(
                cmd=["git", "fetch", remote, "--tags", "--force"],
                operation_context=f"fetch tags from remote '{remote}'",
                cwd=repo_root,
                timeout=_GIT_NETWORK_TIMEOUT,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            raise TagDiscoveryFailed(str(e)) from e

    def list_local_tags(self, repo_root: Path) -> list[str]:
        """List local tag names."""
        try:
            result = run_subprocess_with_context(
                cmd=["git", "tag", "--list"],
                operation_context="list tags",
                cwd=repo_root,
            )
        except RuntimeError as e:
            raise TagDiscoveryFailed(str(e)) from e
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def resolve_commit(self, repo_root: Path, ref: str) -> str:
        """Resolve a ref to the full hash of the commit it points at."""
        try:
            result = run_subprocess_with_context(
                cmd=["git", "rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"],
                operation_context=f"resolve '{ref}' to a commit",
                cwd=repo_root,
            )
        except RuntimeError as e:
            raise RefResolutionFailed(f"Could not resolve '{ref}' to a commit", ref=ref) from e
        return result.stdout.strip()

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def delete_local_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag."""
        try:
            run_subprocess_with_context(
                cmd=["git", "tag", "-d", tag_name],
                operation_context=f"delete local tag '{tag_name}'",
                cwd=repo_root,
            )
        except RuntimeError as e:
            raise TagDeleteFailed(str(e), tag_name=tag_name) from e

    def create_tag(self, repo_root: Path, tag_name: str, commit: str) -> None:
        """Create a lightweight tag at a commit."""
        try:
            run_subprocess_with_context(
                cmd=["git", "tag", tag_name, commit],
                operation_context=f"create tag '{tag_name}' at {commit}",
                cwd=repo_root,
            )
        except RuntimeError as e:
            raise TagCreateFailed(str(e), tag_name=tag_name) from e

    def force_push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Force-push a single tag ref to the remote."""
        refspec = f"refs/tags/{tag_name}:refs/tags/{tag_name}"
        try:
            run_subprocess_with_context(
                cmd=["git", "push", remote, refspec, "--force"],
                operation_context=f"force-push tag '{tag_name}' to remote '{remote}'",
                cwd=repo_root,
                timeout=_GIT_NETWORK_TIMEOUT,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            raise PushRejected(str(e), tag_name=tag_name, remote=remote) from e
