"""Fake implementation of Git tag operations for testing."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from trunk_tagger.gateway.git.tag_ops.abc import GitTagOps
from trunk_tagger.gateway.git.tag_ops.types import TagPushError, TagPushResult


class FakeRemote:
    """In-memory remote tag namespace with create-if-absent push semantics.

    Several FakeGitTagOps instances may share one FakeRemote to model
    concurrent publishers racing against the same repository.

    Constructor Injection:
    ---------------------
    - tags: Mapping of tag name -> commit SHA already on the remote
    - fail_pushes: Number of upcoming pushes to reject with a transient error
      (None rejects every push)
    - failure_message: Message carried by injected push failures
    - before_push: Callback run at the start of every push, before the
      namespace is inspected (lets a test slip in a competing publisher)
    """

    def __init__(
        self,
        *,
        tags: dict[str, str] | None = None,
        fail_pushes: int | None = 0,
        failure_message: str = "remote: internal server error",
        before_push: Callable[[], None] | None = None,
    ) -> None:
        self._tags: dict[str, str] = tags if tags is not None else {}
        self._fail_pushes = fail_pushes
        self._failure_message = failure_message
        self.before_push = before_push
        self._push_attempts: list[tuple[str, str]] = []

    def has_tag(self, tag_name: str) -> bool:
        return tag_name in self._tags

    def add_tag(self, tag_name: str, commit_sha: str) -> None:
        """Put a tag on the remote out of band, as another publisher would."""
        self._tags[tag_name] = commit_sha

    def receive_push(self, tag_name: str, commit_sha: str) -> TagPushResult | TagPushError:
        """Apply a push of tag_name -> commit_sha to the namespace."""
        self._push_attempts.append((tag_name, commit_sha))
        if self.before_push is not None:
            self.before_push()

        if self._fail_pushes is None:
            return TagPushError(message=self._failure_message)
        if self._fail_pushes > 0:
            self._fail_pushes -= 1
            return TagPushError(message=self._failure_message)

        existing = self._tags.get(tag_name)
        if existing is not None:
            if existing == commit_sha:
                # git reports "Everything up-to-date" for an identical ref
                return TagPushResult()
            return TagPushError(
                message=f"! [rejected] {tag_name} -> {tag_name} (already exists)",
                already_exists=True,
            )
        self._tags[tag_name] = commit_sha
        return TagPushResult()

    @property
    def tags(self) -> dict[str, str]:
        """Snapshot of the remote tag namespace."""
        return dict(self._tags)

    @property
    def push_attempts(self) -> list[tuple[str, str]]:
        """(tag_name, commit_sha) for every push received, accepted or not."""
        return self._push_attempts.copy()


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of Git tag operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - local_tags: Mapping of tag name -> commit SHA in the local namespace
    - remotes: Mapping of remote name -> FakeRemote
    - create_tag_raises: Exception to raise when create_tag() is called
    - delete_tag_raises: Exception to raise when delete_tag() is called
    - remote_query_raises: Exception to raise when remote_tag_exists() is called
    - fetch_tags_raises: Exception to raise when fetch_tags() is called

    Mutation Tracking:
    -----------------
    - created_tags: List of (tag_name, commit_sha) tuples from create_tag()
    - deleted_tags: List of tag names from delete_tag()
    - pushed_tags: List of (remote, tag_name) tuples from successful push_tag()
    - fetched_remotes: List of remote names from fetch_tags()
    """

    def __init__(
        self,
        *,
        local_tags: dict[str, str] | None = None,
        remotes: dict[str, FakeRemote] | None = None,
        create_tag_raises: Exception | None = None,
        delete_tag_raises: Exception | None = None,
        remote_query_raises: Exception | None = None,
        fetch_tags_raises: Exception | None = None,
    ) -> None:
        self._local_tags: dict[str, str] = local_tags if local_tags is not None else {}
        self._remotes: dict[str, FakeRemote] = (
            remotes if remotes is not None else {"origin": FakeRemote()}
        )
        self._create_tag_raises = create_tag_raises
        self._delete_tag_raises = delete_tag_raises
        self._remote_query_raises = remote_query_raises
        self._fetch_tags_raises = fetch_tags_raises

        # Mutation tracking
        self._created_tags: list[tuple[str, str]] = []
        self._deleted_tags: list[str] = []
        self._pushed_tags: list[tuple[str, str]] = []
        self._fetched_remotes: list[str] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def local_tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        return tag_name in self._local_tags

    def remote_tag_exists(self, repo_root: Path, remote: str, tag_name: str) -> bool:
        if self._remote_query_raises is not None:
            raise self._remote_query_raises
        return self._remote(remote).has_tag(tag_name)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, commit_sha: str) -> None:
        if self._create_tag_raises is not None:
            raise self._create_tag_raises
        if tag_name in self._local_tags:
            raise RuntimeError(f"Failed to create tag '{tag_name}': tag already exists")
        self._local_tags[tag_name] = commit_sha
        self._created_tags.append((tag_name, commit_sha))

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        if self._delete_tag_raises is not None:
            raise self._delete_tag_raises
        if tag_name not in self._local_tags:
            raise RuntimeError(f"Failed to delete tag '{tag_name}': tag not found")
        del self._local_tags[tag_name]
        self._deleted_tags.append(tag_name)

    def push_tag(
        self, repo_root: Path, remote: str, tag_name: str
    ) -> TagPushResult | TagPushError:
        commit_sha = self._local_tags.get(tag_name)
        if commit_sha is None:
            return TagPushError(message=f"src refspec refs/tags/{tag_name} does not match any")
        result = self._remote(remote).receive_push(tag_name, commit_sha)
        if isinstance(result, TagPushResult):
            self._pushed_tags.append((remote, tag_name))
        return result

    def fetch_tags(self, repo_root: Path, remote: str) -> None:
        if self._fetch_tags_raises is not None:
            raise self._fetch_tags_raises
        self._fetched_remotes.append(remote)
        for tag_name, commit_sha in self._remote(remote).tags.items():
            self._local_tags.setdefault(tag_name, commit_sha)

    def _remote(self, remote: str) -> FakeRemote:
        if remote not in self._remotes:
            raise RuntimeError(f"'{remote}' does not appear to be a git repository")
        return self._remotes[remote]

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def local_tags(self) -> dict[str, str]:
        """Snapshot of the local tag namespace."""
        return dict(self._local_tags)

    @property
    def created_tags(self) -> list[tuple[str, str]]:
        """Get list of tags created during test.

        Returns list of (tag_name, commit_sha) tuples.
        This property is for test assertions only.
        """
        return self._created_tags.copy()

    @property
    def deleted_tags(self) -> list[str]:
        """Get list of local tag names deleted during test."""
        return self._deleted_tags.copy()

    @property
    def pushed_tags(self) -> list[tuple[str, str]]:
        """Get list of tags pushed successfully during test.

        Returns list of (remote, tag_name) tuples.
        This property is for test assertions only.
        """
        return self._pushed_tags.copy()

    @property
    def fetched_remotes(self) -> list[str]:
        """Get list of remotes whose tags were fetched during test."""
        return self._fetched_remotes.copy()
