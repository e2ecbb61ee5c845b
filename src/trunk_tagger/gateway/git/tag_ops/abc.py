"""Abstract base class for Git tag operations.

This sub-gateway covers everything the publisher does with tags: existence
checks in the local and remote namespaces, local creation and deletion,
pushing, and refreshing the local view of remote tags.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from trunk_tagger.gateway.git.tag_ops.types import TagPushError, TagPushResult


class GitTagOps(ABC):
    """Abstract interface for Git tag operations.

    Queries look at the local or remote namespace; mutations change one of them.
    All implementations (real, fake, dry-run) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def local_tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a tag exists in the local tag namespace.

        Args:
            repo_root: Path to the repository root
            tag_name: Exact tag name (e.g., 'trunk/<sha>')

        Returns:
            True if the tag exists locally, False otherwise
        """
        ...

    @abstractmethod
    def remote_tag_exists(self, repo_root: Path, remote: str, tag_name: str) -> bool:
        """Check if a tag exists on a remote.

        Lists only the exact ref refs/tags/<tag_name> on the remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')
            tag_name: Exact tag name

        Returns:
            True if the remote has the tag, False otherwise

        Raises:
            RuntimeError: If the remote cannot be queried
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def create_tag(self, repo_root: Path, tag_name: str, commit_sha: str) -> None:
        """Create a lightweight local tag pointing at a commit.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to create
            commit_sha: Commit the tag points at

        Raises:
            RuntimeError: If git command fails (e.g., the tag already exists)
        """
        ...

    @abstractmethod
    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to delete

        Raises:
            RuntimeError: If git command fails
        """
        ...

    @abstractmethod
    def push_tag(
        self, repo_root: Path, remote: str, tag_name: str
    ) -> TagPushResult | TagPushError:
        """Push a local tag to a remote under the same name.

        The remote creates the tag only if absent; a push for a name that is
        already taken comes back as TagPushError(already_exists=True).

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')
            tag_name: Tag name to push

        Returns:
            TagPushResult on success, TagPushError otherwise
        """
        ...

    @abstractmethod
    def fetch_tags(self, repo_root: Path, remote: str) -> None:
        """Fetch all tags from a remote into the local namespace.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')

        Raises:
            RuntimeError: If git command fails
        """
        ...
