"""Custom exceptions for the kargo package.

Library code raises these instead of click exceptions so the orchestration
verbs can be driven from something other than the CLI.
"""

from typing import Optional, Sequence


class KargoError(Exception):
    """Base exception for all kargo errors."""

    pass


class ToolNotInstalledError(KargoError):
    """Raised when a required tool (kind, kubectl, helm) is not installed."""

    def __init__(self, tool_name: str, additional_info: str = ""):
        self.tool_name = tool_name
        message = f"{tool_name} is not installed (or not in your PATH)"
        if additional_info:
            message += f": {additional_info}"
        super().__init__(message)


class CommandError(KargoError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, operation: str, command: Sequence[str], returncode: Optional[int], stderr: str = ""):
        self.operation = operation
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Failed to {operation}: could not run '{self.command[0]}'"
        else:
            message = f"Failed to {operation}: '{' '.join(self.command)}' exited with code {returncode}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)


class KargoOperationError(KargoError):
    """Raised when an orchestration verb (up, down, ...) fails."""

    def __init__(self, operation: str, component: str, cause: Optional[Exception] = None):
        self.operation = operation
        self.component = component
        self.cause = cause
        if cause:
            message = f"Failed to {operation} {component}: {cause}"
        else:
            message = f"Failed to {operation} {component}"
        super().__init__(message)


class ReadinessTimeoutError(KargoError):
    """Raised when a readiness poll exhausts its attempt budget."""

    def __init__(self, what: str, namespace: str, attempts: int):
        self.what = what
        self.namespace = namespace
        self.attempts = attempts
        super().__init__(f"Timeout waiting for {what} in namespace '{namespace}' after {attempts} attempts")


class PortForwardError(KargoError):
    """Raised when a port-forward session cannot be started or stopped."""

    def __init__(self, message: str, service: str, namespace: str):
        self.service = service
        self.namespace = namespace
        super().__init__(message)


class PortForwardNotRunningError(PortForwardError):
    """Raised when stopping a port-forward session that is not running."""

    def __init__(self, service: str, namespace: str):
        super().__init__(
            f"Port forwarding for service '{service}' in namespace '{namespace}' is not running", service, namespace
        )


class PortForwardStateError(PortForwardError):
    """Raised when the PID file of a session holds something other than a process id."""

    def __init__(self, pid_file: str, service: str, namespace: str, content: str):
        self.pid_file = pid_file
        self.content = content
        super().__init__(f"Malformed PID file {pid_file}: {content!r} is not a process id", service, namespace)


class KargoConfigurationError(KargoError):
    """Raised when the kargo configuration file cannot be loaded."""

    def __init__(self, message: str, config_path: Optional[str] = None):
        self.config_path = config_path
        super().__init__(message)
