"""Production Git commit queries using subprocess."""

import subprocess
from pathlib import Path

from trunk_tagger.gateway.git.commit_ops.abc import GitCommitOps


class RealGitCommitOps(GitCommitOps):
    """Production implementation of Git commit queries using subprocess."""

    def commit_exists(self, repo_root: Path, commit_sha: str) -> bool:
        """Check whether a commit object exists."""
        result = subprocess.run(
            ["git", "cat-file", "-e", f"{commit_sha}^{{commit}}"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0

    def is_ancestor(self, repo_root: Path, commit_sha: str, ref: str) -> bool:
        """Check reachability with merge-base --is-ancestor.

        Exit code 1 means "not an ancestor"; any other non-zero code (e.g. an
        unknown ref) is also treated as unreachable.
        """
        result = subprocess.run(
            ["git", "merge-base", "--is-ancestor", commit_sha, ref],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0
