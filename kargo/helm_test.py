"""Tests for helm operations."""

from unittest.mock import patch

import pytest

from kargo.helm import (
    ensure_helm_repo,
    install_helm_chart,
    release_exists,
    uninstall_helm_chart,
    upgrade_helm_chart,
)


class TestReleaseExists:
    @pytest.mark.asyncio
    @patch("kargo.helm.run_command")
    async def test_release_exists_true(self, mock_run_command):
        mock_run_command.return_value = (0, "STATUS: deployed", "")

        assert await release_exists("cert-manager", "cert-manager") is True
        mock_run_command.assert_called_once_with(["helm", "status", "cert-manager", "--namespace", "cert-manager"])

    @pytest.mark.asyncio
    @patch("kargo.helm.run_command")
    async def test_release_exists_not_found(self, mock_run_command):
        mock_run_command.return_value = (1, "", "Error: release: not found")
        assert await release_exists("cert-manager", "cert-manager") is False

    @pytest.mark.asyncio
    @patch("kargo.helm.run_command")
    async def test_release_exists_access_denied_reads_as_absent(self, mock_run_command):
        # an RBAC failure is indistinguishable from a missing release
        mock_run_command.return_value = (1, "", 'Error: secrets is forbidden: User "dev" cannot list resource')
        assert await release_exists("argo-cd", "argocd") is False

    @pytest.mark.asyncio
    @patch("kargo.helm.run_command")
    async def test_release_exists_helm_missing(self, mock_run_command):
        mock_run_command.side_effect = RuntimeError("Command not found: helm")
        assert await release_exists("argo-cd", "argocd") is False


class TestCharts:
    @pytest.mark.asyncio
    @patch("kargo.helm.check_command")
    async def test_install_helm_chart(self, mock_check_command):
        await install_helm_chart(
            "cert-manager",
            "oci://quay.io/jetstack/charts/cert-manager",
            "cert-manager",
            "v1.18.2",
            ["crds.enabled=true"],
            "helm",
        )

        mock_check_command.assert_called_once_with(
            [
                "helm",
                "install",
                "cert-manager",
                "oci://quay.io/jetstack/charts/cert-manager",
                "--namespace",
                "cert-manager",
                "--version",
                "v1.18.2",
                "--set",
                "crds.enabled=true",
            ],
            "install helm release 'cert-manager'",
        )

    @pytest.mark.asyncio
    @patch("kargo.helm.check_command")
    async def test_upgrade_helm_chart_without_version(self, mock_check_command):
        await upgrade_helm_chart("argo-cd", "argo/argo-cd", "argocd")

        mock_check_command.assert_called_once_with(
            ["helm", "upgrade", "argo-cd", "argo/argo-cd", "--namespace", "argocd"],
            "upgrade helm release 'argo-cd'",
        )

    @pytest.mark.asyncio
    @patch("kargo.helm.check_command")
    async def test_uninstall_helm_chart(self, mock_check_command):
        await uninstall_helm_chart("argo-cd", "argocd", "/usr/bin/helm")

        mock_check_command.assert_called_once_with(
            ["/usr/bin/helm", "uninstall", "argo-cd", "--namespace", "argocd"], "uninstall helm release 'argo-cd'"
        )

    @pytest.mark.asyncio
    @patch("kargo.helm.check_command")
    async def test_ensure_helm_repo(self, mock_check_command):
        await ensure_helm_repo("argo", "https://argoproj.github.io/argo-helm")

        mock_check_command.assert_called_once_with(
            ["helm", "repo", "add", "argo", "https://argoproj.github.io/argo-helm"], "add helm repository 'argo'"
        )
