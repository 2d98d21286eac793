import logging

import click

from retag.cli.workflows import format_summary, run_session
from retag.core.context import RetagContext, create_context
from retag.errors import RetagError, UserCancelled
from retag.output.output import user_output

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command("retag", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="retag")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print tag changes instead of making them")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """Move git tags and keep the root version tag in sync.

    Run inside a repository. Choose between moving a tag to the latest
    commit (optionally taking the root tag such as v2 along) or pointing
    the root tag at an existing version tag such as v2.3.1. Tags are
    force-pushed to the configured remote (default: origin).

    \b
    Optional .retag.toml at the repository root:
      remote = "upstream"
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)
    retag_ctx: RetagContext = ctx.obj

    if retag_ctx.dry_run:
        user_output("[DRY RUN MODE]\n")

    try:
        records = run_session(retag_ctx)
    except UserCancelled:
        user_output(click.style("Canceled by user", fg="yellow"))
        raise SystemExit(1) from None
    except RetagError as e:
        logger.debug("%s failure", e.error_type, exc_info=True)
        user_output(click.style("Error: ", fg="red") + e.message)
        raise SystemExit(1) from None
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        user_output(click.style("An unexpected error occurred.", fg="red"))
        user_output(type(e).__name__)
        raise SystemExit(1) from None

    if not records:
        return

    user_output("")
    header = "Summary of changes (dry run):" if retag_ctx.dry_run else "Summary of changes:"
    user_output(click.style(header, bold=True))
    for line in format_summary(records):
        user_output(f"  {line}")


def main() -> None:
    """CLI entry point used by the `retag` console script."""
    cli()
