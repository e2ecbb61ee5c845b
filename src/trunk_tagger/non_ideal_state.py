"""Non-ideal states returned by the publisher.

Each failure the publisher can end in is a frozen dataclass deriving from
NonIdealState, returned as part of a discriminated union instead of raised.
Callers narrow the union with isinstance(); the CLI turns any NonIdealState
into an error message and exit code 1.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

Stage = Literal["validation", "reachability", "publish"]


class NonIdealState(ABC):
    """Base for expected failure results."""

    @property
    @abstractmethod
    def error_type(self) -> str:
        """Stable machine-readable identifier for the failure."""
        ...

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description for operator output."""
        ...

    @property
    @abstractmethod
    def stage(self) -> Stage:
        """Which stage of the run failed."""
        ...


@dataclass(frozen=True)
class ValidationError(NonIdealState):
    """A manually supplied commit identifier is not a 40-character lowercase hex SHA."""

    commit_sha: str

    @property
    def error_type(self) -> str:
        return "invalid-commit-sha"

    @property
    def stage(self) -> Stage:
        return "validation"

    @property
    def message(self) -> str:
        return (
            "Invalid commit SHA format. Expected 40 hexadecimal characters, "
            f"got: {self.commit_sha}"
        )


@dataclass(frozen=True)
class UnreachableCommitError(NonIdealState):
    """The commit is missing from the object database or not on the main branch.

    Attributes:
        commit_sha: The commit that failed the check
        reason: "missing" if the object does not exist, "not-on-main" if it is
            not an ancestor of main_ref
        main_ref: The ref reachability was tested against
    """

    commit_sha: str
    reason: Literal["missing", "not-on-main"]
    main_ref: str

    @property
    def error_type(self) -> str:
        if self.reason == "missing":
            return "commit-not-found"
        return "commit-not-on-main"

    @property
    def stage(self) -> Stage:
        return "reachability"

    @property
    def message(self) -> str:
        if self.reason == "missing":
            return f"Commit SHA {self.commit_sha} does not exist in repository"
        return (
            f"Commit {self.commit_sha} is not reachable from {self.main_ref}. "
            "Only commits that exist on the main branch can be tagged"
        )


@dataclass(frozen=True)
class PublishFailure(NonIdealState):
    """The retry budget ran out without the tag appearing on the remote.

    Attributes:
        tag_name: Tag that could not be published
        attempts: Attempts actually made
        max_attempts: Attempts the retry policy allowed
        last_error: Error text from the final failed attempt, if any
        deadline_exceeded: True if the caller-supplied deadline cut the
            retries short
    """

    tag_name: str
    attempts: int
    max_attempts: int
    last_error: str | None = None
    deadline_exceeded: bool = False

    @property
    def error_type(self) -> str:
        if self.deadline_exceeded:
            return "publish-deadline-exceeded"
        return "publish-retries-exhausted"

    @property
    def stage(self) -> Stage:
        return "publish"

    @property
    def message(self) -> str:
        if self.deadline_exceeded:
            summary = (
                f"Tag creation for {self.tag_name} stopped by deadline after "
                f"{self.attempts}/{self.max_attempts} attempts"
            )
        else:
            summary = (
                f"Tag creation for {self.tag_name} failed after all "
                f"{self.attempts} retry attempts"
            )
        if self.last_error:
            return f"{summary}: {self.last_error}"
        return summary
