from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kargo.exceptions import KargoError

from .recreate import SETTLE_DELAY, delete_then_recreate


class TestDeleteThenRecreate:
    @pytest.mark.asyncio
    @patch("kargo.components.recreate.asyncio.sleep", new_callable=AsyncMock)
    async def test_down_settle_up(self, mock_sleep):
        events = []
        mock_sleep.side_effect = lambda delay: events.append(("sleep", delay))

        async def down():
            events.append("down")

        async def up():
            events.append("up")

        callback = MagicMock()
        await delete_then_recreate(down, up, callback=callback)

        assert events == ["down", ("sleep", SETTLE_DELAY), "up"]
        assert SETTLE_DELAY == 5.0
        callback.progress.assert_called_once_with("⏳ Waiting for cleanup to complete...")

    @pytest.mark.asyncio
    @patch("kargo.components.recreate.asyncio.sleep", new_callable=AsyncMock)
    async def test_down_failure_skips_up(self, mock_sleep):
        up = AsyncMock()

        with pytest.raises(KargoError, match="uninstall failed"):
            await delete_then_recreate(AsyncMock(side_effect=KargoError("uninstall failed")), up)

        mock_sleep.assert_not_awaited()
        up.assert_not_awaited()
