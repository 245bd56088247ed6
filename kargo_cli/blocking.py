"""Run async command bodies from synchronous click commands."""

import asyncio
from functools import wraps

import click


def blocking(f):
    """Run the coroutine function ``f`` to completion on a fresh event loop.

    Ctrl-C during a helm install or a readiness wait aborts the command with
    click's "Aborted!" instead of a traceback.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except KeyboardInterrupt:
            raise click.Abort() from None

    return wrapper
