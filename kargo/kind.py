"""Kind cluster management operations."""

from typing import List

from .common import check_command, check_output, tool_installed


def kind_installed(kind: str) -> bool:
    """Check if Kind is installed and available in the PATH."""
    return tool_installed(kind)


async def list_kind_clusters(kind: str) -> List[str]:
    """List all Kind clusters."""
    stdout = await check_output([kind, "get", "clusters"], "get clusters")
    return [line.strip() for line in stdout.splitlines() if line.strip()]


async def kind_cluster_exists(kind: str, cluster_name: str) -> bool:
    """Check if a Kind cluster exists.

    Unlike the helm release check, a failing ``kind get clusters`` is an error
    and not reported as a missing cluster.
    """
    return cluster_name in await list_kind_clusters(kind)


async def create_kind_cluster(kind: str, cluster_name: str, wait: str = "60s") -> None:
    """Create a Kind cluster and wait for its control plane."""
    await check_command([kind, "create", "cluster", "--name", cluster_name, "--wait", wait], "create cluster")


async def delete_kind_cluster(kind: str, cluster_name: str) -> None:
    """Delete a Kind cluster."""
    await check_command([kind, "delete", "cluster", "--name", cluster_name], "delete cluster")


async def export_kubeconfig(kind: str, cluster_name: str) -> None:
    """Export the kubeconfig of a Kind cluster and make it the current context."""
    await check_command([kind, "export", "kubeconfig", "--name", cluster_name], "export kubeconfig")
