import click

from trunk_tagger.naming import is_valid_commit_sha
from trunk_tagger.non_ideal_state import ValidationError


@click.command("validate-sha")
@click.argument("commit_sha", required=False, default="")
def validate_sha_cmd(commit_sha: str) -> None:
    """Check a manually supplied SHA before the repository is checked out.

    An empty COMMIT_SHA means the event commit will be used and passes.
    """
    if not commit_sha:
        click.echo("✅ Using current commit SHA - no pre-checkout validation needed")
        return

    if not is_valid_commit_sha(commit_sha):
        error = ValidationError(commit_sha=commit_sha)
        click.echo(click.style("Error: ", fg="red") + error.message, err=True)
        raise SystemExit(1)

    click.echo(f"✅ Pre-checkout validation passed for: {commit_sha}")
