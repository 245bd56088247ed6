"""Status of Argo Rollouts.

kargo does not install Argo Rollouts; it only reports whether its controller
is present and can wait for it to come up.
"""

from typing import Optional

from ..argo import argo_rollouts_exists, wait_for_argo_rollouts_ready
from ..callbacks import OutputCallback, SilentCallback
from ..config import KargoConfig


async def status(
    config: KargoConfig, callback: OutputCallback = None, wait: bool = False, namespace: Optional[str] = None
) -> bool:
    if callback is None:
        callback = SilentCallback()

    namespace = namespace or config.rollouts.namespace
    kubectl = config.tools.kubectl

    callback.progress("📊 Checking Argo Rollouts status...")
    if wait:
        await wait_for_argo_rollouts_ready(namespace, kubectl, callback)
        return True

    if not await argo_rollouts_exists(namespace, kubectl):
        callback.progress(f"❌ Argo Rollouts is not installed in namespace '{namespace}'")
        return False

    callback.success(f"✅ Argo Rollouts controller found in namespace '{namespace}'")
    return True
