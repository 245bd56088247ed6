"""Kubectl operations for cluster inspection and cleanup."""

import logging
from typing import Optional, Sequence

from .common import check_command, check_output, run_command

logger = logging.getLogger(__name__)


async def get_cluster_info(context: str, kubectl: str = "kubectl") -> str:
    """Return ``kubectl cluster-info`` output for a context."""
    return await check_output([kubectl, "cluster-info", "--context", context], "get cluster info")


async def get_node_status(context: str, kubectl: str = "kubectl") -> None:
    """Print the nodes of a context to the terminal."""
    await check_command([kubectl, "get", "nodes", "--context", context], "get node status")


async def create_namespace(namespace: str, kubectl: str = "kubectl") -> bool:
    """Create a namespace, returning False when kubectl refuses (usually because it exists)."""
    try:
        returncode, _, stderr = await run_command([kubectl, "create", "namespace", namespace])
    except RuntimeError as e:
        logger.warning("Could not create namespace %s: %s", namespace, e)
        return False
    if returncode != 0:
        logger.debug("kubectl create namespace %s exited with %d: %s", namespace, returncode, stderr)
    return returncode == 0


async def namespace_exists(namespace: str, kubectl: str = "kubectl") -> bool:
    """Check if a namespace exists; any kubectl failure counts as absent."""
    try:
        returncode, _, _ = await run_command([kubectl, "get", "namespace", namespace])
    except RuntimeError:
        return False
    return returncode == 0


async def delete_namespace(namespace: str, kubectl: str = "kubectl") -> None:
    await check_command([kubectl, "delete", "namespace", namespace, "--wait=false"], f"delete namespace '{namespace}'")


async def get_resources(
    resource: str, namespace: Optional[str] = None, selector: Optional[str] = None, kubectl: str = "kubectl"
) -> str:
    """Return the table kubectl prints for ``kubectl get <resource>``."""
    cmd = [kubectl, "get", resource]
    if namespace:
        cmd.extend(["--namespace", namespace])
    if selector:
        cmd.extend(["-l", selector])
    return await check_output(cmd, f"get {resource}")


async def _delete_best_effort(resource: str, names: Sequence[str], kubectl: str) -> bool:
    if not names:
        return True
    cmd = [kubectl, "delete", resource, *names, "--ignore-not-found"]
    try:
        returncode, _, stderr = await run_command(cmd)
    except RuntimeError as e:
        logger.warning("Could not delete %s %s: %s", resource, ", ".join(names), e)
        return False
    if returncode != 0:
        logger.warning("Could not delete %s %s: %s", resource, ", ".join(names), stderr)
    return returncode == 0


async def delete_crds(names: Sequence[str], kubectl: str = "kubectl") -> bool:
    """Delete custom resource definitions; failures are logged, never raised."""
    return await _delete_best_effort("crd", names, kubectl)


async def delete_api_services(names: Sequence[str], kubectl: str = "kubectl") -> bool:
    """Delete API services; failures are logged, never raised."""
    return await _delete_best_effort("apiservice", names, kubectl)
