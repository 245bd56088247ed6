from functools import wraps

import click
from kargo.exceptions import KargoError


class ClickExceptionRed(click.ClickException):
    def format_message(self) -> str:
        return click.style(self.message, fg="red")


def handle_exceptions(func):
    """Turn kargo errors raised by a command into a red message and exit status 1."""

    @wraps(func)
    def wrapped(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KargoError as e:
            raise ClickExceptionRed(f"❌ {e}") from None
        except click.ClickException:
            raise  # if it was already a click exception from the cli commands, just re-raise it

    return wrapped
