"""Tests for subprocess_utils module."""

import os
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from retag.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context


def test_copied_env_for_git_subprocess_sets_git_terminal_prompt() -> None:
    """copied_env_for_git_subprocess sets GIT_TERMINAL_PROMPT=0."""
    env = copied_env_for_git_subprocess()
    assert env["GIT_TERMINAL_PROMPT"] == "0"


def test_copied_env_for_git_subprocess_does_not_modify_os_environ() -> None:
    with patch.dict(os.environ, {"PATH": "/usr/bin"}, clear=True):
        env = copied_env_for_git_subprocess()
        assert "GIT_TERMINAL_PROMPT" not in os.environ
    assert env["PATH"] == "/usr/bin"


def test_run_returns_completed_process() -> None:
    completed = MagicMock(returncode=0, stdout="ok\n")
    with patch("retag.subprocess_utils.subprocess.run", return_value=completed) as mock_run:
        result = run_subprocess_with_context(
            cmd=["git", "tag"], operation_context="list tags", cwd=Path("/repo")
        )

    assert result is completed
    assert mock_run.call_args.kwargs["check"] is True
    assert mock_run.call_args.kwargs["text"] is True


def test_run_failure_includes_context_and_stderr() -> None:
    error = subprocess.CalledProcessError(1, ["git", "tag", "-d", "v1"], stderr="tag not found\n")
    with patch("retag.subprocess_utils.subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError, match="Failed to delete tag 'v1': tag not found$"):
            run_subprocess_with_context(
                cmd=["git", "tag", "-d", "v1"],
                operation_context="delete tag 'v1'",
                cwd=Path("/repo"),
            )


def test_run_timeout() -> None:
    error = subprocess.TimeoutExpired(["git", "push"], 5)
    with patch("retag.subprocess_utils.subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError, match="timed out after 5s"):
            run_subprocess_with_context(
                cmd=["git", "push"], operation_context="push", cwd=Path("/repo"), timeout=5
            )


def test_run_missing_executable() -> None:
    with patch("retag.subprocess_utils.subprocess.run", side_effect=FileNotFoundError()):
        with pytest.raises(RuntimeError, match="git not found"):
            run_subprocess_with_context(cmd=["git"], operation_context="run git", cwd=Path("/"))
