from pathlib import Path

import click

from trunk_tagger.naming import tag_name_for_commit
from trunk_tagger.report import format_step_output
from trunk_tagger.trigger import resolve_trigger


@click.command("tag-name")
@click.option("--commit-sha", "manual_sha", default="", help="Manually requested commit")
@click.option("--sha", "event_sha", envvar="GITHUB_SHA", default=None, help="[env: GITHUB_SHA]")
@click.option(
    "--github-output",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="GITHUB_OUTPUT",
    default=None,
    help="Append sha and tag_name step outputs here. [env: GITHUB_OUTPUT]",
)
def tag_name_cmd(manual_sha: str, event_sha: str | None, github_output: Path | None) -> None:
    """Print the trunk tag name for the commit a run would tag."""
    try:
        trigger = resolve_trigger(event_name=None, event_sha=event_sha, manual_sha=manual_sha)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    tag_name = tag_name_for_commit(trigger.commit_sha)
    if github_output is not None:
        with github_output.open("a", encoding="utf-8") as f:
            f.write(format_step_output("sha", trigger.commit_sha))
            f.write(format_step_output("tag_name", tag_name))
    click.echo(tag_name)
