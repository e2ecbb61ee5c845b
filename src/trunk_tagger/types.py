"""Success results of a publish run."""

from dataclasses import dataclass

from trunk_tagger.non_ideal_state import PublishFailure, UnreachableCommitError, ValidationError


@dataclass(frozen=True)
class TagCreated:
    """This run created the tag and pushed it to the remote."""

    tag_name: str
    commit_sha: str
    attempts: int


@dataclass(frozen=True)
class TagAlreadyExists:
    """The tag was already present locally or on the remote; nothing was done.

    Also returned when a concurrent publisher won the race mid-retry.
    """

    tag_name: str
    commit_sha: str


PublishOutcome = (
    TagCreated | TagAlreadyExists | ValidationError | UnreachableCommitError | PublishFailure
)
