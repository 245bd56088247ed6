"""Argo CD and Argo Rollouts helpers."""

import base64
import binascii
from typing import Optional

from .callbacks import OutputCallback, SilentCallback
from .common import check_output, run_command
from .exceptions import KargoError
from .readiness import wait_until

ARGOCD_ADMIN_SECRET = "argocd-initial-admin-secret"
ROLLOUTS_SELECTOR = "app.kubernetes.io/name=argo-rollouts"


async def get_argocd_admin_password(namespace: str, kubectl: str = "kubectl") -> str:
    """Read and decode the initial admin password generated by Argo CD."""
    encoded = await check_output(
        [
            kubectl,
            "get",
            "secret",
            ARGOCD_ADMIN_SECRET,
            "--namespace",
            namespace,
            "-o",
            "jsonpath={.data.password}",
        ],
        "get ArgoCD admin password",
    )
    try:
        return base64.b64decode(encoded.strip(), validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise KargoError(f"Failed to decode ArgoCD admin password: {e}") from e


async def _rollouts_pods(namespace: str, kubectl: str) -> Optional[str]:
    try:
        returncode, stdout, _ = await run_command(
            [kubectl, "get", "pods", "--namespace", namespace, "-l", ROLLOUTS_SELECTOR, "--no-headers"]
        )
    except RuntimeError:
        return None
    if returncode != 0:
        return None
    return stdout


async def argo_rollouts_exists(namespace: str, kubectl: str = "kubectl") -> bool:
    """Check for Argo Rollouts controller pods in the namespace."""
    pods = await _rollouts_pods(namespace, kubectl)
    return bool(pods and pods.strip())


async def wait_for_argo_rollouts_ready(
    namespace: str, kubectl: str = "kubectl", callback: OutputCallback = None
) -> None:
    """Wait until a controller pod reports ``Running``."""
    if callback is None:
        callback = SilentCallback()

    async def running() -> bool:
        pods = await _rollouts_pods(namespace, kubectl)
        return pods is not None and "Running" in pods

    callback.progress(f"⏳ Waiting for Argo Rollouts to be ready in namespace '{namespace}'...")
    await wait_until(running, "Argo Rollouts to be ready", namespace)
    callback.success("✅ Argo Rollouts is ready")
