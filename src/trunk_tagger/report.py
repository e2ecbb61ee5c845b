"""Final run summary and CI step outputs."""

import uuid
from dataclasses import dataclass
from pathlib import Path

from trunk_tagger.naming import tag_name_for_commit
from trunk_tagger.non_ideal_state import PublishFailure
from trunk_tagger.trigger import TriggerContext
from trunk_tagger.types import PublishOutcome, TagAlreadyExists, TagCreated


@dataclass(frozen=True)
class RunSummary:
    """Everything the operator sees about a finished run.

    Attributes:
        status: 'created', 'already-exists' or 'failed'
        tag_name: Tag the run was about
        commit_sha: Commit the run was about
        trigger: Trigger that started the run
        failed_stage: Stage that failed ('validation', 'reachability',
            'publish'), None on success
        attempts: Attempts made by the publish stage, when known
        error: Error message, None on success
    """

    status: str
    tag_name: str
    commit_sha: str
    trigger: TriggerContext
    failed_stage: str | None = None
    attempts: int | None = None
    error: str | None = None


def summarize(outcome: PublishOutcome, trigger: TriggerContext) -> RunSummary:
    """Collapse a publish outcome into a RunSummary."""
    tag_name = tag_name_for_commit(trigger.commit_sha)
    if isinstance(outcome, TagCreated):
        return RunSummary(
            status="created",
            tag_name=outcome.tag_name,
            commit_sha=outcome.commit_sha,
            trigger=trigger,
            attempts=outcome.attempts,
        )
    if isinstance(outcome, TagAlreadyExists):
        return RunSummary(
            status="already-exists",
            tag_name=outcome.tag_name,
            commit_sha=outcome.commit_sha,
            trigger=trigger,
        )
    attempts = outcome.attempts if isinstance(outcome, PublishFailure) else None
    return RunSummary(
        status="failed",
        tag_name=tag_name,
        commit_sha=trigger.commit_sha,
        trigger=trigger,
        failed_stage=outcome.stage,
        attempts=attempts,
        error=outcome.message,
    )


def render_summary(summary: RunSummary) -> list[str]:
    """Plain-text summary lines for the job log."""
    target = f"tag {summary.tag_name} for commit {summary.commit_sha}"
    if summary.status == "already-exists":
        headline = f"✅ Tag {summary.tag_name} already existed - no action needed"
    elif summary.status == "created":
        headline = f"✅ Successfully created {target}"
    else:
        headline = f"❌ Failed to create {target}"

    lines = [headline, "", "Tag details:"]
    lines.append(f"  Name: {summary.tag_name}")
    lines.append(f"  Commit: {summary.commit_sha}")
    lines.append(f"  Trigger: {summary.trigger.event_name}")
    if summary.trigger.is_manual:
        lines.append(f"  Manual commit: {summary.trigger.commit_sha}")
    if summary.failed_stage is not None:
        lines.append(f"  Failed stage: {summary.failed_stage}")
        if summary.attempts is not None:
            lines.append(f"  Attempts: {summary.attempts}")
    return lines


def render_markdown(summary: RunSummary) -> str:
    """Markdown block for the CI job summary page."""
    rows = [
        "| | |",
        "|---|---|",
        f"| Status | `{summary.status}` |",
        f"| Tag | `{summary.tag_name}` |",
        f"| Commit | `{summary.commit_sha}` |",
        f"| Trigger | `{summary.trigger.event_name}` |",
    ]
    if summary.failed_stage is not None:
        rows.append(f"| Failed stage | `{summary.failed_stage}` |")
    if summary.error is not None:
        rows.append(f"| Error | {summary.error.splitlines()[0]} |")
    return "### Trunk tagging\n\n" + "\n".join(rows) + "\n"


def format_step_output(key: str, value: str) -> str:
    """One GITHUB_OUTPUT entry.

    Single-line values are written as ``key=value``. Values containing a line
    break use the ``key<<DELIMITER`` form with a random delimiter, so their
    content cannot start a new key.
    """
    if "\n" not in value and "\r" not in value:
        return f"{key}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{key}<<{delimiter}\n{value}\n{delimiter}\n"


def write_step_outputs(path: Path, summary: RunSummary) -> None:
    """Append sha, tag_name and status to a GITHUB_OUTPUT-style file."""
    with path.open("a", encoding="utf-8") as f:
        f.write(format_step_output("sha", summary.commit_sha))
        f.write(format_step_output("tag_name", summary.tag_name))
        f.write(format_step_output("status", summary.status))


def write_step_summary(path: Path, summary: RunSummary) -> None:
    """Append the markdown summary to a GITHUB_STEP_SUMMARY-style file."""
    with path.open("a", encoding="utf-8") as f:
        f.write(render_markdown(summary))
