"""Subprocess helpers shared by the real gateways."""

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy of the current environment with git credential prompts disabled.

    Without GIT_TERMINAL_PROMPT=0 a fetch or push against a remote that needs
    credentials would block on a hidden terminal prompt.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path,
    timeout: float | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command and raise RuntimeError carrying context on failure.

    Args:
        cmd: Command and arguments
        operation_context: Human readable description, e.g. "delete tag 'v1'"
        cwd: Working directory
        timeout: Seconds before the command is killed
        env: Environment for the child process

    Returns:
        The completed process with captured text output

    Raises:
        RuntimeError: If the command exits non-zero, times out, or cannot start
    """
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
            env=env,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        message = f"Failed to {operation_context}"
        if stderr:
            message = f"{message}: {stderr}"
        raise RuntimeError(message) from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"Failed to {operation_context}: timed out after {timeout}s") from e
    except FileNotFoundError as e:
        raise RuntimeError(f"Failed to {operation_context}: {cmd[0]} not found") from e
    return result
