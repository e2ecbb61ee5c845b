"""Discriminated union types for tag push.

TagPushResult | TagPushError are a result-or-error pair: the push is
the one tag mutation whose failure the publisher must inspect, because a
rejection for an already-existing name means another publisher won.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagPushResult:
    """Success result from pushing a tag to a remote."""


@dataclass(frozen=True)
class TagPushError:
    """Error result from pushing a tag.

    Carries an error_type string like the non-ideal states, but is consumed
    inside the publisher and never reaches EnsureIdeal.

    Attributes:
        message: Error output from the push
        already_exists: True when the remote refused the push because a tag
            with that name is already present
    """

    message: str
    already_exists: bool = False

    @property
    def error_type(self) -> str:
        if self.already_exists:
            return "tag-already-exists-on-remote"
        return "tag-push-failed"
