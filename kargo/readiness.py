"""Fixed-interval readiness polling.

Every wait here is a plain loop: probe, sleep, repeat, give up after a fixed
number of attempts. There is no backoff and no cancellation other than
killing the process.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from .callbacks import OutputCallback, SilentCallback
from .common import run_command
from .exceptions import ReadinessTimeoutError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 60
POLL_INTERVAL = 1.0

Probe = Callable[[], Awaitable[bool]]


async def wait_until(
    probe: Probe,
    what: str,
    namespace: str,
    attempts: int = MAX_ATTEMPTS,
    interval: float = POLL_INTERVAL,
) -> None:
    """Call ``probe`` until it returns True, at most ``attempts`` times."""
    for attempt in range(1, attempts + 1):
        if await probe():
            logger.debug("%s in namespace %s ready after %d attempt(s)", what, namespace, attempt)
            return
        await asyncio.sleep(interval)

    raise ReadinessTimeoutError(what, namespace, attempts)


async def wait_for_namespace_deleted(
    namespace: str, kubectl: str = "kubectl", callback: OutputCallback = None
) -> None:
    """Wait until ``kubectl get namespace`` stops finding the namespace."""
    if callback is None:
        callback = SilentCallback()

    # any failure of the lookup counts as "gone"
    async def gone() -> bool:
        try:
            returncode, _, _ = await run_command([kubectl, "get", "namespace", namespace])
        except RuntimeError:
            return True
        return returncode != 0

    callback.progress(f"⏳ Waiting for namespace '{namespace}' to be fully deleted...")
    await wait_until(gone, "namespace deletion", namespace)
    callback.success(f"✅ Namespace '{namespace}' has been deleted")
