"""Fake Prompter implementation for testing."""

from typing import Any, TypeVar

from retag.errors import UserCancelled
from retag.gateway.prompt.abc import Prompter

T = TypeVar("T")


class FakePrompter(Prompter):
    """Scripted prompts that answer from pre-configured queues.

    This class has NO public setup methods. All answers are provided via
    constructor. Once a queue is exhausted the next prompt of that kind
    raises UserCancelled, which is how tests simulate a user abort.

    Answers:
    -------
    - selections: Labels to pick, consumed in order by select()
    - confirmations: Booleans returned in order by confirm()

    Tracking:
    --------
    - select_messages / confirm_messages: Prompts that were shown
    - offered_choices: Labels offered by each select() call
    """

    def __init__(
        self,
        *,
        selections: list[str] | None = None,
        confirmations: list[bool] | None = None,
    ) -> None:
        self._selections = list(selections) if selections is not None else []
        self._confirmations = list(confirmations) if confirmations is not None else []

        self._select_messages: list[str] = []
        self._confirm_messages: list[str] = []
        self._offered_choices: list[list[str]] = []

    def select(self, message: str, choices: list[tuple[str, T]]) -> T:
        self._select_messages.append(message)
        self._offered_choices.append([label for label, _ in choices])
        if not self._selections:
            raise UserCancelled()
        wanted = self._selections.pop(0)
        values: dict[str, Any] = dict(choices)
        if wanted not in values:
            raise ValueError(f"'{wanted}' was not offered; choices were {list(values)}")
        return values[wanted]

    def confirm(self, message: str, *, default: bool) -> bool:
        self._confirm_messages.append(message)
        if not self._confirmations:
            raise UserCancelled()
        return self._confirmations.pop(0)

    @property
    def select_messages(self) -> list[str]:
        return self._select_messages.copy()

    @property
    def confirm_messages(self) -> list[str]:
        return self._confirm_messages.copy()

    @property
    def offered_choices(self) -> list[list[str]]:
        return [list(c) for c in self._offered_choices]
