"""Tests for ClickPrompter cancellation handling."""

from unittest.mock import patch

import click
import pytest

from retag.errors import UserCancelled
from retag.gateway.prompt.real import ClickPrompter


def test_select_returns_chosen_value() -> None:
    with patch("retag.gateway.prompt.real.user_select", return_value="bump"):
        assert ClickPrompter().select("?", [("Bump", "bump")]) == "bump"


def test_confirm_passes_default() -> None:
    with patch("retag.gateway.prompt.real.user_confirm", return_value=True) as mock_confirm:
        assert ClickPrompter().confirm("Proceed?", default=True) is True

    mock_confirm.assert_called_once_with("Proceed?", default=True)


@pytest.mark.parametrize("error", [click.Abort(), KeyboardInterrupt()])
def test_aborted_select_is_user_cancelled(error: BaseException) -> None:
    with patch("retag.gateway.prompt.real.user_select", side_effect=error):
        with pytest.raises(UserCancelled):
            ClickPrompter().select("?", [("a", "a")])


@pytest.mark.parametrize("error", [click.Abort(), KeyboardInterrupt()])
def test_aborted_confirm_is_user_cancelled(error: BaseException) -> None:
    with patch("retag.gateway.prompt.real.user_confirm", side_effect=error):
        with pytest.raises(UserCancelled):
            ClickPrompter().confirm("?", default=True)
