"""Helm chart management operations."""

import logging
from typing import Optional, Sequence

from .common import check_command, run_command, tool_installed

logger = logging.getLogger(__name__)


def helm_installed(name: str) -> bool:
    return tool_installed(name)


async def release_exists(name: str, namespace: str, helm: str = "helm") -> bool:
    """Check if a helm release exists in the namespace.

    Any failure of ``helm status`` counts as "not installed", including
    failures unrelated to the release (unreachable cluster, denied access,
    missing helm binary).
    """
    try:
        returncode, _, stderr = await run_command([helm, "status", name, "--namespace", namespace])
    except RuntimeError as e:
        logger.debug("helm status %s failed: %s", name, e)
        return False
    if returncode != 0:
        logger.debug("helm status %s exited with %d: %s", name, returncode, stderr)
    return returncode == 0


async def ensure_helm_repo(name: str, url: str, helm: str = "helm") -> None:
    """Add a helm repository if it doesn't already exist."""
    await check_command([helm, "repo", "add", name, url], f"add helm repository '{name}'")


async def update_helm_repos(helm: str = "helm") -> None:
    await check_command([helm, "repo", "update"], "update helm repositories")


def _chart_args(
    action: str, name: str, chart: str, namespace: str, version: Optional[str], values: Sequence[str], helm: str
) -> list[str]:
    args = [helm, action, name, chart, "--namespace", namespace]
    if version:
        args.extend(["--version", version])
    for value in values:
        args.extend(["--set", value])
    return args


async def install_helm_chart(
    name: str,
    chart: str,
    namespace: str,
    version: Optional[str] = None,
    values: Sequence[str] = (),
    helm: str = "helm",
) -> None:
    """Install a helm chart as release ``name``."""
    args = _chart_args("install", name, chart, namespace, version, values, helm)
    await check_command(args, f"install helm release '{name}'")


async def upgrade_helm_chart(
    name: str,
    chart: str,
    namespace: str,
    version: Optional[str] = None,
    values: Sequence[str] = (),
    helm: str = "helm",
) -> None:
    """Upgrade the existing release ``name`` to the given chart version."""
    args = _chart_args("upgrade", name, chart, namespace, version, values, helm)
    await check_command(args, f"upgrade helm release '{name}'")


async def uninstall_helm_chart(name: str, namespace: str, helm: str = "helm") -> None:
    await check_command([helm, "uninstall", name, "--namespace", namespace], f"uninstall helm release '{name}'")


async def helm_release_status(name: str, namespace: str, helm: str = "helm") -> None:
    """Print ``helm status`` for a release to the terminal."""
    await check_command([helm, "status", name, "--namespace", namespace], f"get status of helm release '{name}'")
