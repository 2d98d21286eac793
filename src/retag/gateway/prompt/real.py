"""Terminal prompts backed by click."""

from typing import TypeVar

import click

from retag.errors import UserCancelled
from retag.gateway.prompt.abc import Prompter
from retag.output.output import user_confirm, user_select

T = TypeVar("T")


class ClickPrompter(Prompter):
    """Production prompts; an aborted prompt becomes UserCancelled."""

    def select(self, message: str, choices: list[tuple[str, T]]) -> T:
        try:
            return user_select(message, choices)
        except (KeyboardInterrupt, click.Abort) as e:
            raise UserCancelled() from e

    def confirm(self, message: str, *, default: bool) -> bool:
        try:
            return user_confirm(message, default=default)
        except (KeyboardInterrupt, click.Abort) as e:
            raise UserCancelled() from e
