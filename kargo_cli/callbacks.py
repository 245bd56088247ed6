"""Click adapter for the kargo output callback protocol."""

import logging

import click
from kargo.callbacks import LoggingCallback, OutputCallback

PROGRESS_META_KEY = "kargo.progress"


class ClickCallback:
    """Callback that writes kargo progress messages with click."""

    def __init__(self, silent: bool = False):
        self.silent = silent

    def progress(self, message: str) -> None:
        if not self.silent:
            click.echo(message)

    def success(self, message: str) -> None:
        if not self.silent:
            click.echo(message)

    def warning(self, message: str) -> None:
        if not self.silent:
            click.echo(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        """Errors always go to stderr, even in silent mode."""
        click.echo(click.style(message, fg="red"), err=True)


def progress_callback() -> OutputCallback:
    """Build the callback chosen by the root ``--progress`` option.

    Commands invoked without the root command report as plain text.
    """
    mode = click.get_current_context().meta.get(PROGRESS_META_KEY, "text")
    if mode == "log":
        return LoggingCallback(logging.getLogger("kargo"))
    return ClickCallback(silent=mode == "quiet")
