"""Prompt abstraction so workflows can be driven without a terminal."""

from abc import ABC, abstractmethod
from typing import TypeVar

T = TypeVar("T")


class Prompter(ABC):
    """Abstract interactive prompts for dependency injection."""

    @abstractmethod
    def select(self, message: str, choices: list[tuple[str, T]]) -> T:
        """Ask the user to pick exactly one of the (label, value) choices.

        Raises:
            UserCancelled: If the user aborts the prompt
        """
        ...

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question.

        Raises:
            UserCancelled: If the user aborts the prompt
        """
        ...
