import click

from .alias import AliasedGroup
from .argocd import argocd
from .callbacks import PROGRESS_META_KEY
from .cert_manager import cert_manager
from .kind import kind
from .opt import load_config, opt_config, opt_log_level, opt_progress
from .port_forward import port_forward
from .rollouts import rollouts
from .version import version


@click.group(cls=AliasedGroup)
@opt_log_level
@opt_config
@opt_progress
@click.pass_context
def kargo(ctx: click.Context, config_path, progress):
    """Local Kubernetes development environment bootstrap tool"""
    ctx.meta[PROGRESS_META_KEY] = progress
    ctx.obj = load_config(config_path)


kargo.add_command(kind)
kargo.add_command(cert_manager)
kargo.add_command(argocd)
kargo.add_command(rollouts)
kargo.add_command(port_forward)
kargo.add_command(version)


def main():
    kargo(prog_name="kargo")


if __name__ == "__main__":
    main()
