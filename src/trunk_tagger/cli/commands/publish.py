from dataclasses import replace
from pathlib import Path

import click

from trunk_tagger.cli.ensure_ideal import EnsureIdeal
from trunk_tagger.context import TaggerContext
from trunk_tagger.report import render_summary, summarize, write_step_outputs, write_step_summary
from trunk_tagger.trigger import resolve_trigger


@click.command("publish")
@click.option(
    "--commit-sha",
    "manual_sha",
    default="",
    help="Commit to tag on manual request. Leave empty to tag the event commit.",
)
@click.option(
    "--event-name",
    envvar="GITHUB_EVENT_NAME",
    default=None,
    help="CI event name, for reporting. [env: GITHUB_EVENT_NAME]",
)
@click.option(
    "--sha",
    "event_sha",
    envvar="GITHUB_SHA",
    default=None,
    help="Commit the CI event ran for. [env: GITHUB_SHA]",
)
@click.option("--remote", default=None, help="Remote to publish to (default: origin)")
@click.option(
    "--main-branch",
    default=None,
    help="Branch manual commits must be reachable from (default: main)",
)
@click.option(
    "--deadline",
    type=click.FloatRange(min=0),
    default=None,
    help="Give up retrying once this many seconds have passed",
)
@click.option(
    "--github-output",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="GITHUB_OUTPUT",
    default=None,
    help="Append sha, tag_name and status step outputs here. [env: GITHUB_OUTPUT]",
)
@click.option(
    "--step-summary",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="GITHUB_STEP_SUMMARY",
    default=None,
    help="Append a markdown job summary here. [env: GITHUB_STEP_SUMMARY]",
)
@click.pass_obj
def publish_cmd(
    ctx: TaggerContext,
    manual_sha: str,
    event_name: str | None,
    event_sha: str | None,
    remote: str | None,
    main_branch: str | None,
    deadline: float | None,
    github_output: Path | None,
    step_summary: Path | None,
) -> None:
    """Create and push the trunk/<sha> tag for a commit.

    Exits 0 when the tag was created or already existed, 1 when validation,
    the reachability check, or publishing failed.
    """
    try:
        trigger = resolve_trigger(event_name=event_name, event_sha=event_sha, manual_sha=manual_sha)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    config = ctx.config
    if remote is not None:
        config = replace(config, remote=remote)
    if main_branch is not None:
        config = replace(config, main_branch=main_branch)
    if deadline is not None:
        config = replace(config, deadline_seconds=deadline)
    ctx = ctx.with_config(config)

    if ctx.dry_run:
        ctx.feedback.info("[DRY RUN] No tags will be created, pushed or deleted")

    outcome = ctx.publisher().publish(trigger)

    summary = summarize(outcome, trigger)
    if github_output is not None:
        write_step_outputs(github_output, summary)
    if step_summary is not None:
        write_step_summary(step_summary, summary)
    for line in render_summary(summary):
        click.echo(line)

    EnsureIdeal.ideal_state(outcome, ctx.feedback)
