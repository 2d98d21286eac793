"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from retag.gateway.git.tag_ops.abc import GitTagOps
from retag.gateway.git.tag_ops.dry_run import DryRunGitTagOps
from retag.gateway.git.tag_ops.real import RealGitTagOps
from retag.gateway.prompt.abc import Prompter
from retag.gateway.prompt.real import ClickPrompter


@dataclass(frozen=True)
class RetagContext:
    """Immutable context holding all dependencies for one retag run.

    Created at CLI entry point and threaded through the workflows.
    Tests build one with fake gateways and pass it as the click ``obj``.
    """

    git: GitTagOps
    prompter: Prompter
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        git: GitTagOps,
        prompter: Prompter,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "RetagContext":
        """Create a context around test doubles.

        When dry_run is set the given gateway is wrapped the same way
        create_context() wraps the real one.
        """
        resolved_cwd = cwd if cwd is not None else Path("/test/repo")
        if dry_run:
            git = DryRunGitTagOps(git)
        return RetagContext(git=git, prompter=prompter, cwd=resolved_cwd, dry_run=dry_run)


def create_context(*, dry_run: bool) -> RetagContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, tag mutations are printed instead of executed

    Returns:
        RetagContext with real git and click-backed prompts
    """
    git: GitTagOps = RealGitTagOps()
    if dry_run:
        git = DryRunGitTagOps(git)
    return RetagContext(git=git, prompter=ClickPrompter(), cwd=Path.cwd(), dry_run=dry_run)
