"""Fake implementation of Git commit queries for testing."""

from __future__ import annotations

from pathlib import Path

from trunk_tagger.gateway.git.commit_ops.abc import GitCommitOps


class FakeGitCommitOps(GitCommitOps):
    """In-memory fake implementation of Git commit queries.

    Constructor Injection:
    ---------------------
    - commits: Set of commit SHAs present in the object database
    - ancestry: Mapping of ref -> set of commit SHAs reachable from it

    Query Tracking:
    --------------
    - queried_commits: SHAs passed to commit_exists()
    """

    def __init__(
        self,
        *,
        commits: set[str] | None = None,
        ancestry: dict[str, set[str]] | None = None,
    ) -> None:
        self._commits: set[str] = commits if commits is not None else set()
        self._ancestry: dict[str, set[str]] = ancestry if ancestry is not None else {}
        self._queried_commits: list[str] = []

    def commit_exists(self, repo_root: Path, commit_sha: str) -> bool:
        self._queried_commits.append(commit_sha)
        return commit_sha in self._commits

    def is_ancestor(self, repo_root: Path, commit_sha: str, ref: str) -> bool:
        return commit_sha in self._ancestry.get(ref, set())

    @property
    def queried_commits(self) -> list[str]:
        """SHAs passed to commit_exists(), for test assertions."""
        return self._queried_commits.copy()
