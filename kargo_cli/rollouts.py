from typing import Optional

import click
from kargo.components import rollouts as component
from kargo.config import KargoConfig

from .alias import AliasedGroup
from .blocking import blocking
from .callbacks import progress_callback
from .exceptions import handle_exceptions
from .opt import opt_namespace, pass_config


@click.group(cls=AliasedGroup)
def rollouts():
    """Inspect Argo Rollouts"""


@rollouts.command()
@opt_namespace
@click.option("--wait", is_flag=True, default=False, help="Wait up to 60s for the controller to be Running")
@pass_config
@handle_exceptions
@blocking
async def status(config: KargoConfig, namespace: Optional[str], wait: bool):
    """Show whether the Argo Rollouts controller is present"""
    await component.status(config, progress_callback(), wait=wait, namespace=namespace)
