"""Background ``kubectl port-forward`` sessions tracked by PID files.

A session is identified by its (service, namespace) pair. The forwarding
process runs in its own session so that it outlives the kargo invocation
that started it; the only record of it is the PID file under the kargo data
directory. A PID file pointing at a dead process is deleted the next time
the session is checked.

No locking is done around the check/start/write sequence, two concurrent
invocations for the same pair can race.
"""

import logging
import os
import re
import signal
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import data_path
from .exceptions import PortForwardError, PortForwardNotRunningError, PortForwardStateError

logger = logging.getLogger(__name__)

PID_FILE_MODE = 0o600
DATA_DIR_MODE = 0o700
PID_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PortForwardSession:
    service: str
    namespace: str
    local_port: int
    remote_port: int
    pid: int
    pid_file: Path


def port_forward_pid_file(service: str, namespace: str, data_dir: Optional[Path] = None) -> Path:
    """Return the PID file path for a (service, namespace) pair."""
    return (data_dir or data_path()) / f"port-forward-{service}-{namespace}.pid"


def _port_forward_command(kubectl: str, service: str, namespace: str, local_port: int, remote_port: int) -> list[str]:
    return [kubectl, "port-forward", f"svc/{service}", f"{local_port}:{remote_port}", "--namespace", namespace]


def _process_alive(pid: int) -> bool:
    # an exited child of this process stays a zombie until reaped
    try:
        reaped, _ = os.waitpid(pid, os.WNOHANG)
    except ChildProcessError:
        reaped = 0
    if reaped:
        return False

    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


def is_port_forward_running(service: str, namespace: str, data_dir: Optional[Path] = None) -> tuple[bool, int]:
    """Return ``(running, pid)`` for a session.

    A PID file whose process is gone is removed. A PID file that does not
    contain a process id raises PortForwardStateError.
    """
    pid_file = port_forward_pid_file(service, namespace, data_dir)

    try:
        content = pid_file.read_text()
    except FileNotFoundError:
        return False, 0
    except OSError as e:
        raise PortForwardError(f"Failed to read PID file {pid_file}: {e}", service, namespace) from e

    text = content.strip()
    if not PID_PATTERN.fullmatch(text):
        raise PortForwardStateError(str(pid_file), service, namespace, content)
    pid = int(text)
    if pid <= 0:
        raise PortForwardStateError(str(pid_file), service, namespace, content)

    if not _process_alive(pid):
        logger.info("Removing stale PID file %s (process %d is gone)", pid_file, pid)
        pid_file.unlink(missing_ok=True)
        return False, 0

    return True, pid


def _write_pid_file(pid_file: Path, pid: int) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=pid_file.parent, prefix=f".{pid_file.name}.")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(str(pid))
        os.chmod(tmp_name, PID_FILE_MODE)
        os.replace(tmp_name, pid_file)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def start_port_forward(
    service: str,
    namespace: str,
    local_port: int,
    remote_port: int,
    kubectl: str = "kubectl",
    data_dir: Optional[Path] = None,
) -> PortForwardSession:
    """Launch a detached port-forward process and record its PID.

    Callers are expected to check ``is_port_forward_running`` first; this
    function does not refuse to start a second process for the same pair.
    """
    directory = data_dir or data_path()
    try:
        directory.mkdir(mode=DATA_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise PortForwardError(f"Failed to create kargo data directory {directory}: {e}", service, namespace) from e

    cmd = _port_forward_command(kubectl, service, namespace, local_port, remote_port)
    logger.debug("Starting port-forward: %s", " ".join(cmd))
    try:
        process = subprocess.Popen(cmd, start_new_session=True)
    except OSError as e:
        raise PortForwardError(f"Failed to start port-forward: {e}", service, namespace) from e

    pid_file = port_forward_pid_file(service, namespace, directory)
    try:
        _write_pid_file(pid_file, process.pid)
    except OSError as e:
        # never leave a forwarder running without a PID file
        process.kill()
        process.wait()
        raise PortForwardError(f"Failed to save PID file {pid_file}: {e}", service, namespace) from e

    return PortForwardSession(service, namespace, local_port, remote_port, process.pid, pid_file)


def stop_port_forward(service: str, namespace: str, data_dir: Optional[Path] = None) -> int:
    """Terminate a running session's process group and remove its PID file.

    Returns the PID that was signalled.
    """
    running, pid = is_port_forward_running(service, namespace, data_dir)
    if not running:
        raise PortForwardNotRunningError(service, namespace)

    pid_file = port_forward_pid_file(service, namespace, data_dir)
    try:
        # the forwarder is a session leader, so its pgid is its pid
        os.killpg(pid, signal.SIGTERM)
    except OSError as e:
        raise PortForwardError(f"Failed to stop port forwarding process {pid}: {e}", service, namespace) from e
    finally:
        pid_file.unlink(missing_ok=True)

    return pid
