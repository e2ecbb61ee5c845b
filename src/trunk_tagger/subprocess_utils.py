"""Subprocess helpers for running git with useful error context."""

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of the environment suitable for non-interactive git calls.

    GIT_TERMINAL_PROMPT=0 makes git fail fast instead of waiting on a
    credential prompt that nobody in CI will ever answer.
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
    """Run a command, raising RuntimeError with context if it fails.

    Args:
        cmd: Command and arguments
        operation_context: Human-readable description used in error messages
            (e.g., "push tag 'trunk/abc' to remote 'origin'")
        cwd: Working directory
        timeout: Optional timeout in seconds
        env: Optional environment (defaults to inherited environment)

    Returns:
        The completed process with captured text output

    Raises:
        RuntimeError: If the command exits non-zero, times out, or the
            executable cannot be found
    """
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
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
        msg = f"Failed to {operation_context}: exit code {e.returncode}"
        if stderr:
            msg = f"{msg}\n{stderr}"
        raise RuntimeError(msg) from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"Failed to {operation_context}: timed out after {timeout}s") from e
    except FileNotFoundError as e:
        raise RuntimeError(f"Failed to {operation_context}: {cmd[0]} not found") from e
    return result
