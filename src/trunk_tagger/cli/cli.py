import logging
from pathlib import Path

import click

from trunk_tagger.cli.commands.publish import publish_cmd
from trunk_tagger.cli.commands.tag_name import tag_name_cmd
from trunk_tagger.cli.commands.validate_sha import validate_sha_cmd
from trunk_tagger.config import ConfigError
from trunk_tagger.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="trunk-tagger")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("-q", "--quiet", is_flag=True, help="Only print errors and the final summary")
@click.option(
    "--repo",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Repository working directory (default: current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: <repo>/.trunk-tagger.toml, if present)",
)
@click.option("--dry-run", is_flag=True, help="Print tag mutations instead of running them")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    quiet: bool,
    repo: Path | None,
    config_path: Path | None,
    dry_run: bool,
) -> None:
    """Tag trunk commits as trunk/<sha>, idempotently and safely under concurrency."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(
                repo_root=repo if repo is not None else Path.cwd(),
                config_path=config_path,
                dry_run=dry_run,
                quiet=quiet,
            )
        except ConfigError as e:
            raise click.ClickException(str(e)) from e


cli.add_command(publish_cmd)
cli.add_command(tag_name_cmd)
cli.add_command(validate_sha_cmd)


def main() -> None:
    """CLI entry point used by the `trunk-tagger` console script."""
    cli()
