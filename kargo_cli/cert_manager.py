import click
from kargo.components import cert_manager as component
from kargo.config import KargoConfig

from .alias import AliasedGroup
from .blocking import blocking
from .callbacks import progress_callback
from .exceptions import handle_exceptions
from .opt import opt_delete_namespace, pass_config


@click.group("cert-manager", cls=AliasedGroup)
def cert_manager():
    """Manage the cert-manager installation"""


@cert_manager.command()
@pass_config
@handle_exceptions
@blocking
async def up(config: KargoConfig):
    """Install or upgrade cert-manager (creates the cluster first if needed)"""
    await component.up(config, progress_callback())


@cert_manager.command("up-clean")
@pass_config
@handle_exceptions
@blocking
async def up_clean(config: KargoConfig):
    """Uninstall cert-manager, wait, and install it again"""
    await component.up_clean(config, progress_callback())


@cert_manager.command()
@opt_delete_namespace
@pass_config
@handle_exceptions
@blocking
async def down(config: KargoConfig, delete_namespace: bool):
    """Uninstall cert-manager and delete its CRDs"""
    await component.down(config, progress_callback(), delete_namespace=delete_namespace)


@cert_manager.command()
@pass_config
@handle_exceptions
@blocking
async def status(config: KargoConfig):
    """Show the cert-manager release, pods and CRDs"""
    await component.status(config, progress_callback())
