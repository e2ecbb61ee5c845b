"""Idempotent, race-tolerant trunk tag publishing.

The publisher makes sure exactly one tag named trunk/<sha> exists, pointing at
<sha>, locally and on the remote. Any number of publishers may run at once for
the same commit. The remote push is the linearization point: a push either
creates the tag (this publisher won) or is rejected because the name is taken
(another publisher won), and both outcomes mean the tag now exists.

Flow:
    Start -> CheckExists -> {AlreadyExists | Attempt}
    Attempt -> {Created | RetryCheck}
    RetryCheck -> {AlreadyExists | Attempt | PublishFailure}
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from trunk_tagger.config import PublisherConfig
from trunk_tagger.gateway.feedback.abc import UserFeedback
from trunk_tagger.gateway.git.commit_ops.abc import GitCommitOps
from trunk_tagger.gateway.git.gateway import GitGateway
from trunk_tagger.gateway.git.tag_ops.types import TagPushResult
from trunk_tagger.gateway.time.abc import Time
from trunk_tagger.naming import is_valid_commit_sha, tag_name_for_commit
from trunk_tagger.non_ideal_state import PublishFailure, UnreachableCommitError, ValidationError
from trunk_tagger.trigger import TriggerContext
from trunk_tagger.types import PublishOutcome, TagAlreadyExists, TagCreated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttemptSucceeded:
    """The tag was created locally and accepted by the remote."""


@dataclass(frozen=True)
class AttemptFailed:
    """One create-and-push attempt failed.

    Attributes:
        message: Why the attempt failed
        remote_rejected_existing: True if the remote refused the push because
            the tag name is already taken
        left_local_tag: True if this attempt's unpublished local tag could not
            be deleted
    """

    message: str
    remote_rejected_existing: bool = False
    left_local_tag: bool = False


def check_commit_sha_format(trigger: TriggerContext) -> ValidationError | None:
    """Reject malformed manually supplied SHAs.

    Push-triggered SHAs come from the CI system itself and are not checked.
    """
    if trigger.is_manual and not is_valid_commit_sha(trigger.commit_sha):
        return ValidationError(commit_sha=trigger.commit_sha)
    return None


def check_commit_reachable(
    commit_ops: GitCommitOps,
    repo_root: Path,
    trigger: TriggerContext,
    main_ref: str,
) -> UnreachableCommitError | None:
    """Ensure the commit exists and, for manual triggers, is on the main branch."""
    if not commit_ops.commit_exists(repo_root, trigger.commit_sha):
        return UnreachableCommitError(
            commit_sha=trigger.commit_sha, reason="missing", main_ref=main_ref
        )
    if trigger.is_manual and not commit_ops.is_ancestor(repo_root, trigger.commit_sha, main_ref):
        return UnreachableCommitError(
            commit_sha=trigger.commit_sha, reason="not-on-main", main_ref=main_ref
        )
    return None


class TrunkTagPublisher:
    """Creates and pushes trunk/<sha> tags with retry-with-backoff.

    Holds no mutable state between calls; every decision is made against the
    repository's current tag namespace.
    """

    def __init__(
        self,
        *,
        git: GitGateway,
        time: Time,
        feedback: UserFeedback,
        config: PublisherConfig,
        repo_root: Path,
    ) -> None:
        self._git = git
        self._time = time
        self._feedback = feedback
        self._config = config
        self._repo_root = repo_root

    def publish(self, trigger: TriggerContext) -> PublishOutcome:
        """Validate the trigger's commit and make sure its trunk tag exists.

        Returns:
            TagCreated if this call published the tag, TagAlreadyExists if it
            was already there (or a concurrent publisher won), otherwise the
            non-ideal state for the stage that failed
        """
        invalid = check_commit_sha_format(trigger)
        if invalid is not None:
            return invalid

        unreachable = check_commit_reachable(
            self._git.commit, self._repo_root, trigger, self._config.main_ref
        )
        if unreachable is not None:
            return unreachable

        if trigger.is_manual:
            self._feedback.info(
                f"Commit {trigger.commit_sha} is valid and exists on {self._config.main_ref}"
            )
        else:
            self._feedback.info(f"Commit {trigger.commit_sha} is valid (automatic push trigger)")

        commit_sha = trigger.commit_sha
        tag_name = tag_name_for_commit(commit_sha)

        if self._tag_exists(tag_name):
            self._feedback.success("Tag already exists - no action needed")
            return TagAlreadyExists(tag_name=tag_name, commit_sha=commit_sha)

        self._feedback.info(f"Tag {tag_name} does not exist, proceeding with creation")
        return self._create_with_retry(tag_name, commit_sha)

    def _create_with_retry(self, tag_name: str, commit_sha: str) -> PublishOutcome:
        policy = self._config.retry
        max_attempts = policy.max_attempts
        deadline = None
        if self._config.deadline_seconds is not None:
            deadline = self._time.monotonic() + self._config.deadline_seconds

        last_error: str | None = None
        # Set once a failed attempt leaves its own tag behind locally. From then
        # on the local namespace says nothing about other publishers.
        own_local_tag = False
        for attempt in range(1, max_attempts + 1):
            self._feedback.info(
                f"Attempt {attempt}/{max_attempts}: "
                f"Creating tag {tag_name} for commit {commit_sha}"
            )

            # Closes most of the window against concurrent publishers; the
            # push below settles whatever race remains.
            if self._tag_exists(tag_name, include_local=not own_local_tag):
                self._feedback.success(
                    f"Tag {tag_name} was created by another process, exiting successfully"
                )
                return TagAlreadyExists(tag_name=tag_name, commit_sha=commit_sha)

            result = self._attempt(tag_name, commit_sha, create_local=not own_local_tag)
            if isinstance(result, AttemptSucceeded):
                if attempt > 1:
                    self._feedback.info(f"Success on attempt {attempt}")
                return TagCreated(tag_name=tag_name, commit_sha=commit_sha, attempts=attempt)

            last_error = result.message
            own_local_tag = result.left_local_tag
            self._refresh_remote_tags()

            if result.remote_rejected_existing and self._tag_exists(
                tag_name, include_local=not own_local_tag
            ):
                self._feedback.success(
                    f"Tag {tag_name} was created by another process, exiting successfully"
                )
                return TagAlreadyExists(tag_name=tag_name, commit_sha=commit_sha)

            if attempt == max_attempts:
                break

            delay = policy.delay_for_retry(attempt)
            if deadline is not None and self._time.monotonic() + delay > deadline:
                self._feedback.info(
                    f"Deadline of {self._config.deadline_seconds}s reached, "
                    f"not retrying after attempt {attempt}"
                )
                return PublishFailure(
                    tag_name=tag_name,
                    attempts=attempt,
                    max_attempts=max_attempts,
                    last_error=last_error,
                    deadline_exceeded=True,
                )
            self._feedback.info(f"Failed. Retrying in {_format_seconds(delay)} seconds...")
            self._time.sleep(delay)

        self._feedback.info("All retry attempts exhausted")
        return PublishFailure(
            tag_name=tag_name,
            attempts=max_attempts,
            max_attempts=max_attempts,
            last_error=last_error,
        )

    def _attempt(
        self, tag_name: str, commit_sha: str, *, create_local: bool
    ) -> AttemptSucceeded | AttemptFailed:
        """Create the local tag (unless one is left from a failed attempt) and push it."""
        if create_local:
            try:
                self._git.tag.create_tag(self._repo_root, tag_name, commit_sha)
            except RuntimeError as e:
                self._feedback.info("Failed to create local tag")
                return AttemptFailed(message=str(e))

        push = self._git.tag.push_tag(self._repo_root, self._config.remote, tag_name)
        if isinstance(push, TagPushResult):
            self._feedback.success(f"Successfully created and pushed tag {tag_name}")
            return AttemptSucceeded()

        self._feedback.info("Failed to push tag to remote")
        # A leftover local tag would make the next create_tag fail.
        deleted = self._delete_local_tag_quietly(tag_name)
        return AttemptFailed(
            message=push.message,
            remote_rejected_existing=push.already_exists,
            left_local_tag=not deleted,
        )

    def _tag_exists(self, tag_name: str, *, include_local: bool = True) -> bool:
        """Check the local namespace, then the remote.

        An unreachable remote counts as "not found": the push that follows is
        what decides, and it fails safely if the tag is in fact there.
        """
        if include_local and self._git.tag.local_tag_exists(self._repo_root, tag_name):
            self._feedback.info(f"Tag {tag_name} already exists locally")
            return True
        try:
            on_remote = self._git.tag.remote_tag_exists(
                self._repo_root, self._config.remote, tag_name
            )
        except RuntimeError as e:
            logger.warning("Could not query remote tags: %s", e)
            return False
        if on_remote:
            self._feedback.info(f"Tag {tag_name} already exists on remote")
        return on_remote

    def _delete_local_tag_quietly(self, tag_name: str) -> bool:
        try:
            self._git.tag.delete_tag(self._repo_root, tag_name)
        except RuntimeError as e:
            logger.debug("Ignoring failure to delete local tag %s: %s", tag_name, e)
            return False
        return True

    def _refresh_remote_tags(self) -> None:
        """Fetch remote tags so a racing publisher's tag becomes visible locally."""
        try:
            self._git.tag.fetch_tags(self._repo_root, self._config.remote)
        except RuntimeError as e:
            logger.warning("Could not fetch tags from %s: %s", self._config.remote, e)


def _format_seconds(seconds: float) -> str:
    if float(seconds).is_integer():
        return str(int(seconds))
    return str(seconds)
