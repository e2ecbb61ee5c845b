"""Production UserFeedback implementations using click."""

import click

from trunk_tagger.gateway.feedback.abc import UserFeedback


class InteractiveFeedback(UserFeedback):
    """Shows all messages on stderr."""

    def info(self, message: str) -> None:
        click.echo(message, err=True)

    def success(self, message: str) -> None:
        click.echo(click.style(message, fg="green"), err=True)

    def error(self, message: str) -> None:
        click.echo(click.style("Error: ", fg="red") + message, err=True)


class SuppressedFeedback(UserFeedback):
    """Drops progress messages, keeps errors (used with --quiet)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        click.echo(click.style("Error: ", fg="red") + message, err=True)
