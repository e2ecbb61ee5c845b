"""Tests for resolving CI inputs into a TriggerContext."""

import pytest

from trunk_tagger.trigger import TriggerContext, TriggerKind, resolve_trigger

EVENT_SHA = "1" * 40
MANUAL_SHA = "2" * 40


def test_push_event_uses_event_sha() -> None:
    trigger = resolve_trigger(event_name="push", event_sha=EVENT_SHA, manual_sha="")

    assert trigger == TriggerContext(
        kind=TriggerKind.PUSH, commit_sha=EVENT_SHA, event_name="push"
    )
    assert not trigger.is_manual


def test_manual_sha_wins_over_event_sha() -> None:
    """A supplied manual SHA makes the trigger manual regardless of the event SHA."""
    trigger = resolve_trigger(
        event_name="workflow_dispatch", event_sha=EVENT_SHA, manual_sha=MANUAL_SHA
    )

    assert trigger.kind is TriggerKind.MANUAL
    assert trigger.commit_sha == MANUAL_SHA
    assert trigger.event_name == "workflow_dispatch"
    assert trigger.is_manual


def test_dispatch_with_blank_input_tags_event_commit() -> None:
    """A dispatch run with the SHA input left empty behaves like a push."""
    trigger = resolve_trigger(event_name="workflow_dispatch", event_sha=EVENT_SHA, manual_sha="")

    assert trigger.kind is TriggerKind.PUSH
    assert trigger.commit_sha == EVENT_SHA
    assert trigger.event_name == "workflow_dispatch"


def test_manual_sha_is_not_validated_here() -> None:
    """Format validation belongs to the publisher, so bad input passes through."""
    trigger = resolve_trigger(event_name=None, event_sha=None, manual_sha="not-a-sha")

    assert trigger.kind is TriggerKind.MANUAL
    assert trigger.commit_sha == "not-a-sha"


def test_event_name_defaults_to_push() -> None:
    trigger = resolve_trigger(event_name=None, event_sha=EVENT_SHA, manual_sha=None)
    assert trigger.event_name == "push"


@pytest.mark.parametrize("event_sha", [None, ""])
def test_no_commit_available_raises(event_sha: str | None) -> None:
    with pytest.raises(ValueError, match="No commit to tag"):
        resolve_trigger(event_name="push", event_sha=event_sha, manual_sha="")
