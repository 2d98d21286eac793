"""The two interactive workflows and the end-of-run summary.

Each workflow returns the ChangeRecords it produced, in the order the tags
were moved. Nothing is accumulated outside these return values.
"""

import logging
from pathlib import Path

import click

from retag.core.config import RetagConfig, load_config
from retag.core.context import RetagContext
from retag.core.retarget import ChangeRecord, retarget_tag
from retag.core.sync import offer_cascade, plan_cascade
from retag.core.tags import (
    filter_non_root_tags,
    filter_version_tags,
    find_root_tag,
    shorten_commit,
)
from retag.errors import NoEligibleTags, NotARepository, RootTagMissing
from retag.output.output import user_output

logger = logging.getLogger(__name__)

UPDATE_ACTION = "update"
BUMP_ACTION = "bump"

ACTION_CHOICES: list[tuple[str, str]] = [
    ("Update a Tag", UPDATE_ACTION),
    ("Bump a Root Tag", BUMP_ACTION),
]


def discover_tags(ctx: RetagContext, *, repo_root: Path, remote: str) -> list[str]:
    """Fetch the remote's tags, then list local tags in repository order."""
    ctx.git.fetch_remote_tags(repo_root, remote)
    tags = ctx.git.list_local_tags(repo_root)
    logger.debug("Discovered %d tags: %s", len(tags), tags)
    return tags


def update_tag_workflow(
    ctx: RetagContext, *, repo_root: Path, config: RetagConfig
) -> list[ChangeRecord]:
    """Move a chosen non-root tag to HEAD, cascading to the root tag if it was in sync."""
    tags = discover_tags(ctx, repo_root=repo_root, remote=config.remote)
    root_tag = find_root_tag(tags)
    candidates = filter_non_root_tags(tags)
    if not candidates:
        raise NoEligibleTags("No tags available for update.")

    selected_tag = ctx.prompter.select(
        "Select a tag to update:", [(tag, tag) for tag in candidates]
    )
    head_commit = ctx.git.resolve_commit(repo_root, "HEAD")

    confirmed = ctx.prompter.confirm(
        f"Do you want to update tag {selected_tag} to point to the latest commit "
        f"({shorten_commit(head_commit)})?",
        default=True,
    )
    if not confirmed:
        user_output(click.style("Tag update canceled.", fg="yellow"))
        return []

    # Must be decided before the selected tag moves.
    cascade = plan_cascade(ctx.git, repo_root=repo_root, root_tag=root_tag, tag_name=selected_tag)

    records = [
        retarget_tag(
            ctx.git,
            repo_root=repo_root,
            remote=config.remote,
            tag_name=selected_tag,
            destination_commit=head_commit,
            dry_run=ctx.dry_run,
        )
    ]

    if cascade is not None:
        root_record = offer_cascade(
            ctx.git,
            ctx.prompter,
            cascade,
            repo_root=repo_root,
            remote=config.remote,
            tag_name=selected_tag,
            destination_commit=head_commit,
            dry_run=ctx.dry_run,
        )
        if root_record is not None:
            records.append(root_record)

    return records


def bump_root_tag_workflow(
    ctx: RetagContext, *, repo_root: Path, config: RetagConfig
) -> list[ChangeRecord]:
    """Point the root tag at the commit of a chosen version tag."""
    tags = discover_tags(ctx, repo_root=repo_root, remote=config.remote)
    version_tags = filter_version_tags(tags)
    if not version_tags:
        raise NoEligibleTags("No version tags found.")

    selected_tag = ctx.prompter.select(
        "Select a version tag to bump the root tag to:", [(tag, tag) for tag in version_tags]
    )

    root_tag = find_root_tag(tags)
    if root_tag is None:
        raise RootTagMissing("No root tag found. Exiting.")

    commit = ctx.git.resolve_commit(repo_root, selected_tag)

    confirmed = ctx.prompter.confirm(
        f"Do you want to bump root tag {root_tag} to point to the commit of tag "
        f"{selected_tag} ({shorten_commit(commit)})?",
        default=True,
    )
    if not confirmed:
        user_output(click.style("Tag update canceled.", fg="yellow"))
        return []

    return [
        retarget_tag(
            ctx.git,
            repo_root=repo_root,
            remote=config.remote,
            tag_name=root_tag,
            destination_commit=commit,
            dry_run=ctx.dry_run,
        )
    ]


def run_session(ctx: RetagContext) -> list[ChangeRecord]:
    """Check the repository, ask which workflow to run, and run it.

    Raises:
        NotARepository: If the working directory is not inside a git repository
        RetagError: Any gateway or precondition failure from the workflow
        UserCancelled: If the user aborts a prompt
    """
    repo_root = ctx.git.get_repository_root(ctx.cwd)
    if repo_root is None:
        raise NotARepository("Not a Git repository.")

    config = load_config(repo_root)
    logger.debug("repo_root=%s remote=%s", repo_root, config.remote)

    action = ctx.prompter.select("What would you like to do?", ACTION_CHOICES)
    if action == UPDATE_ACTION:
        return update_tag_workflow(ctx, repo_root=repo_root, config=config)
    return bump_root_tag_workflow(ctx, repo_root=repo_root, config=config)


def format_summary(records: list[ChangeRecord]) -> list[str]:
    """Render one `tag: old -> new` line per record."""
    return [record.describe() for record in records]
