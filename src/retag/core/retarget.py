"""Retarget a tag: delete it locally, recreate it at a commit, force-push it.

The three mutations are not transactional. A failure in any step aborts the
operation with that step's own exception and nothing is rolled back; a tag
deleted before a failed create stays absent locally until the next run
fetches it again.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from retag.core.tags import shorten_commit
from retag.gateway.git.tag_ops.abc import GitTagOps
from retag.output.output import user_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeRecord:
    """One completed retarget: the tag and its commit before and after."""

    tag_name: str
    old_commit: str
    new_commit: str

    @property
    def old_short(self) -> str:
        return shorten_commit(self.old_commit)

    @property
    def new_short(self) -> str:
        return shorten_commit(self.new_commit)

    def describe(self) -> str:
        return f"{self.tag_name}: {self.old_short} -> {self.new_short}"


def retarget_tag(
    git: GitTagOps,
    *,
    repo_root: Path,
    remote: str,
    tag_name: str,
    destination_commit: str,
    dry_run: bool = False,
) -> ChangeRecord:
    """Move tag_name to destination_commit locally and on the remote.

    Runs even when the tag already points at destination_commit, so the
    remote ref is always rewritten.

    Args:
        git: Gateway used for every git operation
        repo_root: Repository root
        remote: Remote to force-push to
        tag_name: Tag to move
        destination_commit: Full hash the tag should point at afterwards
        dry_run: Skip the per-step success lines; the gateway only prints commands

    Returns:
        ChangeRecord with the pre-update and new commit

    Raises:
        RefResolutionFailed: If the tag cannot be resolved before the update
        TagDeleteFailed: If the local tag cannot be deleted
        TagCreateFailed: If the tag cannot be recreated
        PushRejected: If the remote rejects the force-push
    """
    old_commit = git.resolve_commit(repo_root, tag_name)
    logger.debug("Retargeting %s: %s -> %s", tag_name, old_commit, destination_commit)

    user_output(
        click.style(
            f"Updating tag {tag_name} to point to commit {shorten_commit(destination_commit)}",
            fg="green",
        )
    )

    git.delete_local_tag(repo_root, tag_name)
    if not dry_run:
        user_output(click.style(f"Local tag {tag_name} deleted.", fg="green"))

    git.create_tag(repo_root, tag_name, destination_commit)
    if not dry_run:
        user_output(
            click.style(
                f"Local tag {tag_name} created at {shorten_commit(destination_commit)}.",
                fg="green",
            )
        )

    git.force_push_tag(repo_root, remote, tag_name)
    if not dry_run:
        user_output(click.style(f"Tag {tag_name} force-pushed to {remote}.", fg="green"))

    return ChangeRecord(tag_name=tag_name, old_commit=old_commit, new_commit=destination_commit)
