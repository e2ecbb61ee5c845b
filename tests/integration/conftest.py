"""Fixtures for integration tests that run the real git binary.

Every test gets a bare ``origin`` repository with one commit on main, plus a
factory for independent clones of it. Separate clones stand in for separate
CI runners: each has its own local tag namespace, and they share only the
remote.
"""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command in cwd and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def _configure_identity(repo: Path) -> None:
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "commit.gpgsign", "false")
    run_git(repo, "config", "tag.gpgsign", "false")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    skip_no_git = pytest.mark.skip(reason="git not installed")
    for item in items:
        if "integration" not in item.keywords:
            continue
        if shutil.which("git") is None:
            item.add_marker(skip_no_git)


@pytest.fixture
def origin(tmp_path: Path) -> Path:
    """Bare repository with a single commit on main."""
    bare = tmp_path / "origin.git"
    subprocess.run(
        ["git", "init", "--bare", "--initial-branch=main", str(bare)],
        check=True,
        capture_output=True,
    )

    seed = tmp_path / "seed"
    seed.mkdir()
    run_git(seed, "init", "--initial-branch=main")
    _configure_identity(seed)
    (seed / "README.md").write_text("seed\n", encoding="utf-8")
    run_git(seed, "add", "README.md")
    run_git(seed, "commit", "-m", "Initial commit")
    run_git(seed, "remote", "add", "origin", str(bare))
    run_git(seed, "push", "origin", "main")
    return bare


@pytest.fixture
def make_clone(tmp_path: Path, origin: Path) -> Callable[[str], Path]:
    """Factory returning a fresh clone of origin under tmp_path/<name>."""

    def _make_clone(name: str) -> Path:
        clone = tmp_path / name
        subprocess.run(
            ["git", "clone", str(origin), str(clone)],
            check=True,
            capture_output=True,
        )
        _configure_identity(clone)
        return clone

    return _make_clone


@pytest.fixture
def repo(make_clone: Callable[[str], Path]) -> Path:
    """A working clone of origin, checked out at main."""
    return make_clone("runner")
