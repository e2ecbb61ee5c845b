"""Dry-run tag operations for `trunk-tagger --dry-run`.

Tag queries still run against the real repository so the run takes the same
path it would for real. Every tag mutation is printed as the git command it
stands for and then skipped.
"""

from pathlib import Path

from trunk_tagger.gateway.feedback.abc import UserFeedback
from trunk_tagger.gateway.git.tag_ops.abc import GitTagOps
from trunk_tagger.gateway.git.tag_ops.types import TagPushError, TagPushResult


class DryRunGitTagOps(GitTagOps):
    """Prints tag mutations instead of running them.

    create_tag, delete_tag, push_tag and fetch_tags each emit one
    ``[DRY RUN] Would run: git ...`` line through UserFeedback. push_tag reports
    success, so a dry run follows the publisher's happy path to the end.

    Example:
        ops = DryRunGitTagOps(RealGitTagOps(), feedback)
        ops.remote_tag_exists(repo_root, "origin", "trunk/<sha>")  # real query
        ops.push_tag(repo_root, "origin", "trunk/<sha>")  # printed only
    """

    def __init__(self, wrapped: GitTagOps, feedback: UserFeedback) -> None:
        """Wrap a GitTagOps implementation.

        Args:
            wrapped: Implementation that answers queries
            feedback: Where to print the would-run lines
        """
        self._wrapped = wrapped
        self._feedback = feedback

    # ============================================================================
    # Query Operations (answered by the wrapped implementation)
    # ============================================================================

    def local_tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        return self._wrapped.local_tag_exists(repo_root, tag_name)

    def remote_tag_exists(self, repo_root: Path, remote: str, tag_name: str) -> bool:
        return self._wrapped.remote_tag_exists(repo_root, remote, tag_name)

    # ============================================================================
    # Mutation Operations (printed, never run)
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, commit_sha: str) -> None:
        self._feedback.info(f"[DRY RUN] Would run: git tag {tag_name} {commit_sha}")

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        self._feedback.info(f"[DRY RUN] Would run: git tag -d {tag_name}")

    def push_tag(
        self, repo_root: Path, remote: str, tag_name: str
    ) -> TagPushResult | TagPushError:
        self._feedback.info(f"[DRY RUN] Would run: git push {remote} refs/tags/{tag_name}")
        return TagPushResult()

    def fetch_tags(self, repo_root: Path, remote: str) -> None:
        self._feedback.info(f"[DRY RUN] Would run: git fetch {remote} --tags")
