"""Tests for the command helpers, run against real processes."""

import pytest

from .common import check_command, check_output, run_command, run_command_with_output, tool_installed
from .exceptions import CommandError


class TestToolInstalled:
    def test_tool_installed_true(self):
        assert tool_installed("sh") is True

    def test_tool_installed_false(self):
        assert tool_installed("kargo-definitely-not-a-binary") is False


class TestRunCommand:
    @pytest.mark.asyncio
    async def test_run_command_captures_output(self):
        returncode, stdout, stderr = await run_command(["sh", "-c", "echo ' out '; echo err >&2; exit 3"])

        assert returncode == 3
        assert stdout == "out"
        assert stderr == "err"

    @pytest.mark.asyncio
    async def test_run_command_empty(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            await run_command([])

    @pytest.mark.asyncio
    async def test_run_command_not_found(self):
        with pytest.raises(RuntimeError, match="Command not found: kargo-definitely-not-a-binary"):
            await run_command(["kargo-definitely-not-a-binary"])

    @pytest.mark.asyncio
    async def test_run_command_with_output_returncode(self):
        assert await run_command_with_output(["sh", "-c", "exit 0"]) == 0
        assert await run_command_with_output(["sh", "-c", "exit 2"]) == 2


class TestCheckHelpers:
    @pytest.mark.asyncio
    async def test_check_output_success(self):
        assert await check_output(["sh", "-c", "echo hello"], "say hello") == "hello"

    @pytest.mark.asyncio
    async def test_check_output_failure(self):
        with pytest.raises(CommandError) as exc_info:
            await check_output(["sh", "-c", "echo nope >&2; exit 4"], "say hello")

        assert exc_info.value.returncode == 4
        assert exc_info.value.stderr == "nope"
        assert str(exc_info.value) == "Failed to say hello: 'sh -c echo nope >&2; exit 4' exited with code 4: nope"

    @pytest.mark.asyncio
    async def test_check_command_failure(self):
        with pytest.raises(CommandError, match="exited with code 1"):
            await check_command(["sh", "-c", "exit 1"], "fail")

    @pytest.mark.asyncio
    async def test_check_command_missing_binary(self):
        with pytest.raises(CommandError) as exc_info:
            await check_command(["kargo-definitely-not-a-binary", "up"], "start")

        assert exc_info.value.returncode is None
        assert "could not run 'kargo-definitely-not-a-binary'" in str(exc_info.value)
