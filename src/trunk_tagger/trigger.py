"""Trigger context: which commit to tag and why."""

from dataclasses import dataclass
from enum import Enum


class TriggerKind(Enum):
    """How the run was started."""

    PUSH = "push"
    MANUAL = "manual"


@dataclass(frozen=True)
class TriggerContext:
    """The commit to tag and the kind of trigger that supplied it.

    Attributes:
        kind: PUSH for the automatic trigger (the commit is the pushed branch
            tip), MANUAL for an explicitly requested commit
        commit_sha: Commit identifier to tag, not yet validated
        event_name: CI event name, kept for reporting (e.g., 'push',
            'workflow_dispatch')
    """

    kind: TriggerKind
    commit_sha: str
    event_name: str

    @property
    def is_manual(self) -> bool:
        return self.kind is TriggerKind.MANUAL


def resolve_trigger(
    *,
    event_name: str | None,
    event_sha: str | None,
    manual_sha: str | None,
) -> TriggerContext:
    """Build a TriggerContext from CI inputs.

    A non-empty manual SHA always wins and makes the trigger MANUAL. Without
    one, the event SHA is used and the trigger is PUSH, even for a dispatch
    event with the input left blank: that SHA is the current tip by
    construction, so the ancestor check has nothing to add.

    Args:
        event_name: CI event name (GITHUB_EVENT_NAME); defaults to 'push'
        event_sha: Commit the event ran for (GITHUB_SHA)
        manual_sha: Manually supplied commit SHA, possibly empty

    Raises:
        ValueError: If neither a manual SHA nor an event SHA is available
    """
    resolved_event = event_name or "push"
    if manual_sha:
        return TriggerContext(
            kind=TriggerKind.MANUAL,
            commit_sha=manual_sha,
            event_name=resolved_event,
        )
    if not event_sha:
        raise ValueError("No commit to tag: pass --commit-sha or set GITHUB_SHA")
    return TriggerContext(kind=TriggerKind.PUSH, commit_sha=event_sha, event_name=resolved_event)
