from .exceptions import (
    CommandError,
    KargoError,
    KargoOperationError,
    PortForwardError,
    PortForwardNotRunningError,
    PortForwardStateError,
    ToolNotInstalledError,
)


def test_tool_not_installed_error():
    assert str(ToolNotInstalledError("kind")) == "kind is not installed (or not in your PATH)"
    assert str(ToolNotInstalledError("helm", "see helm.sh")) == "helm is not installed (or not in your PATH): see helm.sh"


def test_command_error_with_returncode():
    error = CommandError("create cluster", ("kind", "create", "cluster"), 1, "docker not running")

    assert error.command == ["kind", "create", "cluster"]
    assert str(error) == "Failed to create cluster: 'kind create cluster' exited with code 1: docker not running"


def test_command_error_could_not_run():
    error = CommandError("create cluster", ["kind", "create", "cluster"], None, "Command not found: kind")

    assert str(error) == "Failed to create cluster: could not run 'kind': Command not found: kind"


def test_operation_error_adds_one_sentence_of_context():
    cause = CommandError("uninstall", ["helm", "uninstall"], 1)
    error = KargoOperationError("uninstall", "cert-manager", cause)

    assert error.cause is cause
    assert str(error) == f"Failed to uninstall cert-manager: {cause}"
    assert str(KargoOperationError("install", "ArgoCD")) == "Failed to install ArgoCD"


def test_port_forward_errors_are_kargo_errors():
    not_running = PortForwardNotRunningError("svc", "ns")
    malformed = PortForwardStateError("/tmp/x.pid", "svc", "ns", "abc")

    assert isinstance(not_running, PortForwardError)
    assert isinstance(malformed, KargoError)
    assert (not_running.service, not_running.namespace) == ("svc", "ns")
    assert str(malformed) == "Malformed PID file /tmp/x.pid: 'abc' is not a process id"
