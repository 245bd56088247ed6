import click
from kargo.components import argocd as component
from kargo.config import KargoConfig

from .alias import AliasedGroup
from .blocking import blocking
from .callbacks import progress_callback
from .exceptions import handle_exceptions
from .opt import opt_delete_namespace, pass_config


@click.group(cls=AliasedGroup)
def argocd():
    """Manage the Argo CD installation"""


@argocd.command()
@pass_config
@handle_exceptions
@blocking
async def up(config: KargoConfig):
    """Install or upgrade Argo CD (creates the cluster first if needed)"""
    await component.up(config, progress_callback())


@argocd.command("up-clean")
@pass_config
@handle_exceptions
@blocking
async def up_clean(config: KargoConfig):
    """Uninstall Argo CD, wait, and install it again"""
    await component.up_clean(config, progress_callback())


@argocd.command()
@opt_delete_namespace
@pass_config
@handle_exceptions
@blocking
async def down(config: KargoConfig, delete_namespace: bool):
    """Uninstall Argo CD"""
    await component.down(config, progress_callback(), delete_namespace=delete_namespace)


@argocd.command()
@pass_config
@handle_exceptions
@blocking
async def status(config: KargoConfig):
    """Show the Argo CD release, pods and services"""
    await component.status(config, progress_callback())


@argocd.command()
@pass_config
@handle_exceptions
@blocking
async def password(config: KargoConfig):
    """Print the initial Argo CD admin password"""
    click.echo(await component.admin_password(config))
