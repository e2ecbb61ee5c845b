"""Tests for subprocess_utils module."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from trunk_tagger.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context


def test_copied_env_for_git_subprocess_sets_git_terminal_prompt() -> None:
    """copied_env_for_git_subprocess sets GIT_TERMINAL_PROMPT=0."""
    env = copied_env_for_git_subprocess()
    assert env["GIT_TERMINAL_PROMPT"] == "0"


def test_copied_env_for_git_subprocess_preserves_existing_env() -> None:
    env = copied_env_for_git_subprocess()
    assert "PATH" in env


def test_successful_command_returns_output(tmp_path: Path) -> None:
    result = run_subprocess_with_context(
        cmd=["git", "--version"], operation_context="read git version", cwd=tmp_path
    )
    assert result.stdout.startswith("git version")


def test_nonzero_exit_raises_with_context_and_stderr() -> None:
    error = subprocess.CalledProcessError(
        128, ["git", "push"], output="", stderr="fatal: unable to access remote\n"
    )
    with patch("trunk_tagger.subprocess_utils.subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                cmd=["git", "push"], operation_context="push tag", cwd=Path("/repo")
            )

    assert str(exc_info.value) == (
        "Failed to push tag: exit code 128\nfatal: unable to access remote"
    )


def test_timeout_raises_runtime_error() -> None:
    error = subprocess.TimeoutExpired(["git", "fetch"], 120)
    with patch("trunk_tagger.subprocess_utils.subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError, match="Failed to fetch tags: timed out after 120s"):
            run_subprocess_with_context(
                cmd=["git", "fetch"],
                operation_context="fetch tags",
                cwd=Path("/repo"),
                timeout=120,
            )


def test_missing_executable_raises_runtime_error(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError, match="no-such-binary-for-trunk-tagger not found"):
        run_subprocess_with_context(
            cmd=["no-such-binary-for-trunk-tagger"],
            operation_context="run missing tool",
            cwd=tmp_path,
        )
