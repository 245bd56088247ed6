"""Helpers for invoking the external collaborator binaries."""

import asyncio
import builtins
import logging
import shlex
import shutil

from .exceptions import CommandError

logger = logging.getLogger(__name__)


def tool_installed(name: str) -> bool:
    """Check if a binary is installed and available in the PATH."""
    return shutil.which(name) is not None


async def run_command(cmd: list[str]) -> tuple[int, str, str]:
    """Run a command and return exit code, stdout, stderr."""
    if not cmd:
        raise ValueError("Command list cannot be empty")

    logger.debug("Running command: %s", shlex.join(cmd))
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd, stdout=asyncio.subprocess.PIPE, stderr=asyncio.subprocess.PIPE
        )
        stdout, stderr = await process.communicate()

        stdout_str = stdout.decode(errors="replace").strip()
        stderr_str = stderr.decode(errors="replace").strip()

        return process.returncode, stdout_str, stderr_str
    except builtins.FileNotFoundError as e:
        raise RuntimeError(f"Command not found: {cmd[0]}") from e
    except PermissionError as e:
        raise RuntimeError(f"Permission denied executing command: {cmd[0]} - {e}") from e
    except OSError as e:
        raise RuntimeError(f"OS error executing command '{cmd[0]}': {e}") from e


async def run_command_with_output(cmd: list[str]) -> int:
    """Run a command with real-time output streaming and return exit code."""
    if not cmd:
        raise ValueError("Command list cannot be empty")

    logger.debug("Running command: %s", shlex.join(cmd))
    try:
        process = await asyncio.create_subprocess_exec(*cmd)
        return await process.wait()
    except builtins.FileNotFoundError as e:
        raise RuntimeError(f"Command not found: {cmd[0]}") from e
    except PermissionError as e:
        raise RuntimeError(f"Permission denied executing command: {cmd[0]} - {e}") from e
    except OSError as e:
        raise RuntimeError(f"OS error executing command '{cmd[0]}': {e}") from e


async def check_command(cmd: list[str], operation: str) -> None:
    """Run a command with streamed output, raising CommandError on failure."""
    try:
        returncode = await run_command_with_output(cmd)
    except RuntimeError as e:
        raise CommandError(operation, cmd, None, str(e)) from e
    if returncode != 0:
        raise CommandError(operation, cmd, returncode)


async def check_output(cmd: list[str], operation: str) -> str:
    """Run a command and return its stdout, raising CommandError on failure."""
    try:
        returncode, stdout, stderr = await run_command(cmd)
    except RuntimeError as e:
        raise CommandError(operation, cmd, None, str(e)) from e
    if returncode != 0:
        raise CommandError(operation, cmd, returncode, stderr)
    return stdout
