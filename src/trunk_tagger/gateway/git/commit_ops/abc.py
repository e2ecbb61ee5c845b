"""Abstract base class for Git commit queries.

This sub-gateway answers the two questions validation needs about a commit:
does it exist in the object database, and is it reachable from a given ref.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class GitCommitOps(ABC):
    """Abstract interface for Git commit queries.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def commit_exists(self, repo_root: Path, commit_sha: str) -> bool:
        """Check whether a commit object exists in the repository.

        Args:
            repo_root: Path to the repository root
            commit_sha: Full commit SHA

        Returns:
            True if the object exists and is a commit, False otherwise
        """
        ...

    @abstractmethod
    def is_ancestor(self, repo_root: Path, commit_sha: str, ref: str) -> bool:
        """Check whether a commit is reachable from a ref.

        A commit is considered its own ancestor.

        Args:
            repo_root: Path to the repository root
            commit_sha: Candidate ancestor commit SHA
            ref: Descendant ref (e.g., 'origin/main')

        Returns:
            True if commit_sha is an ancestor of ref, False otherwise
        """
        ...
