"""Bootstrap a local Kind cluster with cert-manager and Argo CD.

Every operation shells out to kind, kubectl or helm; this package adds the
existence checks, readiness polling, port-forward bookkeeping and ordering
around those calls.
"""

from .callbacks import LoggingCallback, OutputCallback, SilentCallback
from .config import KargoConfig, data_path, kubeconfig_path
from .exceptions import (
    CommandError,
    KargoConfigurationError,
    KargoError,
    KargoOperationError,
    PortForwardError,
    PortForwardNotRunningError,
    PortForwardStateError,
    ReadinessTimeoutError,
    ToolNotInstalledError,
)
from .helm import release_exists
from .kind import kind_cluster_exists
from .portforward import (
    PortForwardSession,
    is_port_forward_running,
    port_forward_pid_file,
    start_port_forward,
    stop_port_forward,
)
from .readiness import wait_for_namespace_deleted, wait_until

__all__ = [
    # Callbacks
    "OutputCallback",
    "SilentCallback",
    "LoggingCallback",
    # Configuration
    "KargoConfig",
    "data_path",
    "kubeconfig_path",
    # Exceptions
    "KargoError",
    "CommandError",
    "KargoConfigurationError",
    "KargoOperationError",
    "PortForwardError",
    "PortForwardNotRunningError",
    "PortForwardStateError",
    "ReadinessTimeoutError",
    "ToolNotInstalledError",
    # Existence checks and polling
    "kind_cluster_exists",
    "release_exists",
    "wait_until",
    "wait_for_namespace_deleted",
    # Port forwarding
    "PortForwardSession",
    "port_forward_pid_file",
    "is_port_forward_running",
    "start_port_forward",
    "stop_port_forward",
]
