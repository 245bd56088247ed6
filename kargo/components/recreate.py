"""The "delete then recreate" strategy behind every ``up_clean`` verb.

This is not a reconciliation: the component is removed, kargo sleeps for a
fixed settle delay, and the component is installed again. The component is
unavailable for the whole of that window.
"""

import asyncio
from typing import Awaitable, Callable

from ..callbacks import OutputCallback, SilentCallback

SETTLE_DELAY = 5.0


async def delete_then_recreate(
    down: Callable[[], Awaitable[None]],
    up: Callable[[], Awaitable[None]],
    settle_delay: float = SETTLE_DELAY,
    callback: OutputCallback = None,
) -> None:
    if callback is None:
        callback = SilentCallback()

    await down()

    callback.progress("⏳ Waiting for cleanup to complete...")
    await asyncio.sleep(settle_delay)

    await up()
