from typing import Optional

import click
from kargo.config import KargoConfig
from kargo.portforward import is_port_forward_running, start_port_forward, stop_port_forward

from .alias import AliasedGroup
from .exceptions import handle_exceptions
from .opt import opt_namespace, pass_config

arg_service = click.argument("service", type=str, required=False, default=None)

opt_local_port = click.option(
    "--local-port", type=click.IntRange(1, 65535), default=None, help="Local port to listen on"
)
opt_remote_port = click.option(
    "--remote-port", type=click.IntRange(1, 65535), default=None, help="Service port to forward to"
)


def _target(config: KargoConfig, service: Optional[str], namespace: Optional[str]) -> tuple[str, str]:
    """Default to the Argo CD server when no service is named."""
    return service or config.argocd.server_service, namespace or config.argocd.namespace


@click.group("port-forward", cls=AliasedGroup)
def port_forward():
    """Manage background kubectl port-forward sessions

    Without a SERVICE argument the Argo CD server service is used.
    """


@port_forward.command()
@arg_service
@opt_namespace
@opt_local_port
@opt_remote_port
@pass_config
@handle_exceptions
def start(
    config: KargoConfig,
    service: Optional[str],
    namespace: Optional[str],
    local_port: Optional[int],
    remote_port: Optional[int],
):
    """Start forwarding a local port to a service in the background"""
    service, namespace = _target(config, service, namespace)
    local_port = local_port or config.argocd.local_port
    remote_port = remote_port or config.argocd.remote_port

    running, pid = is_port_forward_running(service, namespace)
    if running:
        click.echo(f"ℹ️  Port forwarding for svc/{service} in namespace '{namespace}' is already running (PID {pid})")
        return

    session = start_port_forward(service, namespace, local_port, remote_port, kubectl=config.tools.kubectl)
    click.echo(
        f"✅ Forwarding localhost:{session.local_port} to svc/{service}:{session.remote_port} "
        f"in namespace '{namespace}' (PID {session.pid})"
    )


@port_forward.command()
@arg_service
@opt_namespace
@pass_config
@handle_exceptions
def stop(config: KargoConfig, service: Optional[str], namespace: Optional[str]):
    """Stop a background port-forward session"""
    service, namespace = _target(config, service, namespace)
    pid = stop_port_forward(service, namespace)
    click.echo(f"✅ Stopped port forwarding for svc/{service} in namespace '{namespace}' (PID {pid})")


@port_forward.command()
@arg_service
@opt_namespace
@pass_config
@handle_exceptions
def status(config: KargoConfig, service: Optional[str], namespace: Optional[str]):
    """Show whether a port-forward session is running"""
    service, namespace = _target(config, service, namespace)
    running, pid = is_port_forward_running(service, namespace)
    if running:
        click.echo(f"✅ Port forwarding for svc/{service} in namespace '{namespace}' is running (PID {pid})")
    else:
        click.echo(f"❌ Port forwarding for svc/{service} in namespace '{namespace}' is not running")
