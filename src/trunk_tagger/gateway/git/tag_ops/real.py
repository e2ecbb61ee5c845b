"""Production Git tag operations using subprocess."""

import subprocess
from pathlib import Path

from trunk_tagger.gateway.git.tag_ops.abc import GitTagOps
from trunk_tagger.gateway.git.tag_ops.types import TagPushError, TagPushResult
from trunk_tagger.subprocess_utils import (
    copied_env_for_git_subprocess,
    run_subprocess_with_context,
)

# Timeout in seconds for network-touching git operations (ls-remote, push, fetch).
# Prevents indefinite hangs on network issues or credential prompts.
_GIT_NETWORK_TIMEOUT = 120

_ALREADY_EXISTS_MARKER = "already exists"


class RealGitTagOps(GitTagOps):
    """Production implementation of Git tag operations using subprocess."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def local_tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a git tag exists locally."""
        result = subprocess.run(
            ["git", "tag", "-l", tag_name],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        return tag_name in result.stdout.strip().split("\n")

    def remote_tag_exists(self, repo_root: Path, remote: str, tag_name: str) -> bool:
        """Check if a tag exists on the remote via ls-remote."""
        ref = f"refs/tags/{tag_name}"
        result = run_subprocess_with_context(
            cmd=["git", "ls-remote", "--tags", remote, ref],
            operation_context=f"list tag '{tag_name}' on remote '{remote}'",
            cwd=repo_root,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )
        for line in result.stdout.splitlines():
            _, _, listed_ref = line.partition("\t")
            if listed_ref in (ref, f"{ref}^{{}}"):
                return True
        return False

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, commit_sha: str) -> None:
        """Create a lightweight local tag."""
        run_subprocess_with_context(
            cmd=["git", "tag", tag_name, commit_sha],
            operation_context=f"create tag '{tag_name}' at {commit_sha}",
            cwd=repo_root,
        )

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag."""
        run_subprocess_with_context(
            cmd=["git", "tag", "-d", tag_name],
            operation_context=f"delete tag '{tag_name}'",
            cwd=repo_root,
        )

    def push_tag(
        self, repo_root: Path, remote: str, tag_name: str
    ) -> TagPushResult | TagPushError:
        """Push a tag, reporting name collisions on the remote."""
        ref = f"refs/tags/{tag_name}"
        try:
            run_subprocess_with_context(
                cmd=["git", "push", remote, f"{ref}:{ref}"],
                operation_context=f"push tag '{tag_name}' to remote '{remote}'",
                cwd=repo_root,
                timeout=_GIT_NETWORK_TIMEOUT,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            message = str(e)
            return TagPushError(
                message=message,
                already_exists=_ALREADY_EXISTS_MARKER in message,
            )
        return TagPushResult()

    def fetch_tags(self, repo_root: Path, remote: str) -> None:
        """Fetch tags from the remote."""
        run_subprocess_with_context(
            cmd=["git", "fetch", remote, "--tags"],
            operation_context=f"fetch tags from remote '{remote}'",
            cwd=repo_root,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )
