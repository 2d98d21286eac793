"""Abstract base class for the git operations retag depends on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class GitTagOps(ABC):
    """Abstract interface for repository, tag and remote operations.

    Every failure is reported through a distinct exception from
    ``retag.errors``; no operation fails silently.
    All implementations (real, fake, dry-run) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the root of the working tree containing cwd.

        Returns:
            Path to the repository root, or None if cwd is not inside a repository
        """
        ...

    @abstractmethod
    def fetch_remote_tags(self, repo_root: Path, remote: str) -> None:
        """Synchronize local tags with the remote's tags.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')

        Raises:
            TagDiscoveryFailed: If the fetch fails (network, auth, unknown remote)
        """
        ...

    @abstractmethod
    def list_local_tags(self, repo_root: Path) -> list[str]:
        """List local tag names in the order git reports them.

        Raises:
            TagDiscoveryFailed: If tags cannot be listed
        """
        ...

    @abstractmethod
    def resolve_commit(self, repo_root: Path, ref: str) -> str:
        """Resolve a tag name or 'HEAD' to a full commit hash.

        Annotated tags are peeled to the commit they point at.

        Raises:
            RefResolutionFailed: If the ref does not exist
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def delete_local_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag.

        Raises:
            TagDeleteFailed: If the tag does not exist locally or cannot be removed
        """
        ...

    @abstractmethod
    def create_tag(self, repo_root: Path, tag_name: str, commit: str) -> None:
        """Create a lightweight tag at a commit.

        Raises:
            TagCreateFailed: If the tag cannot be created
        """
        ...

    @abstractmethod
    def force_push_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Force-push refs/tags/<tag_name> to the same ref on the remote.

        Raises:
            PushRejected: If the remote rejects the push
        """
        ...
