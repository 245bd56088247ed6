from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kargo.exceptions import ReadinessTimeoutError
from kargo.readiness import MAX_ATTEMPTS, POLL_INTERVAL, wait_for_namespace_deleted, wait_until


class TestWaitUntil:
    @pytest.mark.asyncio
    @patch("kargo.readiness.asyncio.sleep", new_callable=AsyncMock)
    async def test_wait_until_probes_exactly_max_attempts(self, mock_sleep):
        calls = 0

        async def probe():
            nonlocal calls
            calls += 1
            return False

        with pytest.raises(ReadinessTimeoutError) as exc_info:
            await wait_until(probe, "something", "default")

        assert calls == MAX_ATTEMPTS == 60
        assert exc_info.value.attempts == 60
        assert str(exc_info.value) == "Timeout waiting for something in namespace 'default' after 60 attempts"
        assert mock_sleep.await_count == 60
        mock_sleep.assert_awaited_with(POLL_INTERVAL)

    @pytest.mark.asyncio
    @patch("kargo.readiness.asyncio.sleep", new_callable=AsyncMock)
    async def test_wait_until_returns_on_first_success(self, mock_sleep):
        probe = AsyncMock(side_effect=[False, False, True])

        await wait_until(probe, "something", "default")

        assert probe.await_count == 3
        assert mock_sleep.await_count == 2

    @pytest.mark.asyncio
    @patch("kargo.readiness.asyncio.sleep", new_callable=AsyncMock)
    async def test_wait_until_custom_budget(self, mock_sleep):
        probe = AsyncMock(return_value=False)

        with pytest.raises(ReadinessTimeoutError, match="after 3 attempts"):
            await wait_until(probe, "something", "default", attempts=3, interval=0.5)

        assert probe.await_count == 3
        mock_sleep.assert_awaited_with(0.5)


class TestWaitForNamespaceDeleted:
    @pytest.mark.asyncio
    @patch("kargo.readiness.asyncio.sleep", new_callable=AsyncMock)
    @patch("kargo.readiness.run_command")
    async def test_namespace_deleted(self, mock_run_command, mock_sleep):
        mock_run_command.side_effect = [
            (0, "argocd   Terminating", ""),
            (1, "", 'namespaces "argocd" not found'),
        ]
        callback = MagicMock()

        await wait_for_namespace_deleted("argocd", "kubectl", callback)

        mock_run_command.assert_called_with(["kubectl", "get", "namespace", "argocd"])
        callback.success.assert_called_once_with("✅ Namespace 'argocd' has been deleted")

    @pytest.mark.asyncio
    @patch("kargo.readiness.asyncio.sleep", new_callable=AsyncMock)
    @patch("kargo.readiness.run_command")
    async def test_namespace_lookup_failure_counts_as_deleted(self, mock_run_command, mock_sleep):
        mock_run_command.side_effect = RuntimeError("Command not found: kubectl")

        await wait_for_namespace_deleted("argocd")

        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    @patch("kargo.readiness.asyncio.sleep", new_callable=AsyncMock)
    @patch("kargo.readiness.run_command")
    async def test_namespace_never_deleted(self, mock_run_command, mock_sleep):
        mock_run_command.return_value = (0, "argocd   Terminating", "")

        with pytest.raises(ReadinessTimeoutError, match="namespace deletion in namespace 'argocd'"):
            await wait_for_namespace_deleted("argocd")

        assert mock_run_command.call_count == 60
