import click
from kargo.components import cluster
from kargo.config import KargoConfig

from .alias import AliasedGroup
from .blocking import blocking
from .callbacks import progress_callback
from .exceptions import handle_exceptions
from .opt import pass_config


@click.group(cls=AliasedGroup)
def kind():
    """Manage the local Kind cluster"""


@kind.command()
@pass_config
@handle_exceptions
@blocking
async def up(config: KargoConfig):
    """Create the Kind cluster if needed and export its kubeconfig"""
    await cluster.up(config, progress_callback())


@kind.command("up-clean")
@pass_config
@handle_exceptions
@blocking
async def up_clean(config: KargoConfig):
    """Delete and recreate the Kind cluster"""
    await cluster.up_clean(config, progress_callback())


@kind.command()
@pass_config
@handle_exceptions
@blocking
async def down(config: KargoConfig):
    """Delete the Kind cluster"""
    await cluster.down(config, progress_callback())


@kind.command()
@pass_config
@handle_exceptions
@blocking
async def status(config: KargoConfig):
    """Show whether the Kind cluster exists and is reachable"""
    await cluster.status(config, progress_callback())
