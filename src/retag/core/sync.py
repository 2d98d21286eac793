"""Decide whether moving a tag should also move the root tag.

The root tag follows a tag only when both pointed at the same commit before
the tag was moved. The cascade is one level deep: other tags that shared the
old commit are never touched.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from retag.core.retarget import ChangeRecord, retarget_tag
from retag.core.tags import shorten_commit
from retag.gateway.git.tag_ops.abc import GitTagOps
from retag.gateway.prompt.abc import Prompter
from retag.output.output import user_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CascadePlan:
    """The root tag is in sync with the tag being moved and may follow it."""

    root_tag: str
    shared_commit: str


def plan_cascade(
    git: GitTagOps, *, repo_root: Path, root_tag: str | None, tag_name: str
) -> CascadePlan | None:
    """Capture, before tag_name is moved, whether the root tag should follow.

    Returns:
        CascadePlan when a root tag exists and shares tag_name's commit,
        otherwise None
    """
    if root_tag is None:
        return None
    root_commit = git.resolve_commit(repo_root, root_tag)
    tag_commit = git.resolve_commit(repo_root, tag_name)
    logger.debug("root %s=%s, %s=%s", root_tag, root_commit, tag_name, tag_commit)
    if root_commit != tag_commit:
        return None
    return CascadePlan(root_tag=root_tag, shared_commit=root_commit)


def offer_cascade(
    git: GitTagOps,
    prompter: Prompter,
    plan: CascadePlan,
    *,
    repo_root: Path,
    remote: str,
    tag_name: str,
    destination_commit: str,
    dry_run: bool = False,
) -> ChangeRecord | None:
    """Ask whether the root tag should follow tag_name and move it if so.

    Must only be called after tag_name itself was retargeted successfully.

    Returns:
        The root tag's ChangeRecord, or None if the user declined
    """
    question = (
        f"Root tag {plan.root_tag} was in sync with {tag_name} "
        f"({shorten_commit(plan.shared_commit)}). "
        f"Update {plan.root_tag} to {shorten_commit(destination_commit)} as well?"
    )
    if not prompter.confirm(question, default=True):
        user_output(click.style(f"Root tag {plan.root_tag} left unchanged.", fg="yellow"))
        return None
    return retarget_tag(
        git,
        repo_root=repo_root,
        remote=remote,
        tag_name=plan.root_tag,
        destination_commit=destination_commit,
        dry_run=dry_run,
    )
