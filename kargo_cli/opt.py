import logging
from functools import partial, wraps
from typing import Optional

import click
from kargo.config import KargoConfig
from kargo.exceptions import KargoConfigurationError
from rich import traceback
from rich.logging import RichHandler

from .exceptions import ClickExceptionRed


def _opt_log_level_callback(ctx, param, value):
    traceback.install()

    basicConfig = partial(logging.basicConfig, handlers=[RichHandler()])
    if value:
        basicConfig(level=value.upper())
    else:
        basicConfig(level=logging.INFO)


opt_log_level = click.option(
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the log level",
    expose_value=False,
    callback=_opt_log_level_callback,
)

opt_config = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    envvar="KARGO_CONFIG",
    help="Path to the kargo config file (defaults to $XDG_CONFIG_HOME/kargo/config.yaml)",
)

opt_namespace = click.option("-n", "--namespace", type=str, default=None, help="Kubernetes namespace to use")

opt_delete_namespace = click.option(
    "--delete-namespace",
    is_flag=True,
    default=False,
    help="Also delete the namespace and wait until it is gone",
)


def load_config(path: Optional[str]) -> KargoConfig:
    try:
        return KargoConfig.load(path)
    except KargoConfigurationError as e:
        raise ClickExceptionRed(str(e)) from None


def pass_config(f):
    """Pass the KargoConfig loaded by the root command as the first argument.

    Commands invoked without the root command (e.g. from tests) load the
    default config instead.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        config = ctx.find_object(KargoConfig)
        if config is None:
            config = load_config(None)
        return f(config, *args, **kwargs)

    return wrapper

opt_progress = click.option(
    "--progress",
    type=click.Choice(["text", "log", "quiet"]),
    default="text",
    show_default=True,
    help="Report progress as plain text, as log records, or not at all (errors are always shown)",
)
