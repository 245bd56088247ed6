"""Tests for Kind cluster management operations."""

from unittest.mock import patch

import pytest

from kargo.exceptions import CommandError
from kargo.kind import (
    create_kind_cluster,
    delete_kind_cluster,
    export_kubeconfig,
    kind_cluster_exists,
    kind_installed,
    list_kind_clusters,
)


class TestKindInstalled:
    @patch("kargo.common.shutil.which")
    def test_kind_installed_true(self, mock_which):
        mock_which.return_value = "/usr/local/bin/kind"
        assert kind_installed("kind") is True
        mock_which.assert_called_once_with("kind")

    @patch("kargo.common.shutil.which")
    def test_kind_installed_false(self, mock_which):
        mock_which.return_value = None
        assert kind_installed("custom-kind") is False
        mock_which.assert_called_once_with("custom-kind")


class TestKindClusterExists:
    """Test Kind cluster existence checking."""

    @pytest.mark.asyncio
    @patch("kargo.kind.check_output")
    async def test_list_kind_clusters(self, mock_check_output):
        mock_check_output.return_value = "kargo\n  other \n\n"

        assert await list_kind_clusters("kind") == ["kargo", "other"]
        mock_check_output.assert_called_once_with(["kind", "get", "clusters"], "get clusters")

    @pytest.mark.asyncio
    @patch("kargo.kind.check_output")
    async def test_kind_cluster_exists_true(self, mock_check_output):
        mock_check_output.return_value = "kargo\nother"
        assert await kind_cluster_exists("kind", "kargo") is True

    @pytest.mark.asyncio
    @patch("kargo.kind.check_output")
    async def test_kind_cluster_exists_matches_whole_lines(self, mock_check_output):
        mock_check_output.return_value = "kargo-2"
        assert await kind_cluster_exists("kind", "kargo") is False

    @pytest.mark.asyncio
    @patch("kargo.kind.check_output")
    async def test_kind_cluster_exists_no_clusters(self, mock_check_output):
        mock_check_output.return_value = ""
        assert await kind_cluster_exists("kind", "kargo") is False

    @pytest.mark.asyncio
    @patch("kargo.kind.check_output")
    async def test_kind_cluster_exists_failure_propagates(self, mock_check_output):
        mock_check_output.side_effect = CommandError("get clusters", ["kind", "get", "clusters"], 1, "boom")

        with pytest.raises(CommandError):
            await kind_cluster_exists("kind", "kargo")


class TestKindClusterLifecycle:
    @pytest.mark.asyncio
    @patch("kargo.kind.check_command")
    async def test_create_kind_cluster(self, mock_check_command):
        await create_kind_cluster("kind", "kargo")

        mock_check_command.assert_called_once_with(
            ["kind", "create", "cluster", "--name", "kargo", "--wait", "60s"], "create cluster"
        )

    @pytest.mark.asyncio
    @patch("kargo.kind.check_command")
    async def test_delete_kind_cluster(self, mock_check_command):
        await delete_kind_cluster("/opt/kind", "kargo")

        mock_check_command.assert_called_once_with(["/opt/kind", "delete", "cluster", "--name", "kargo"], "delete cluster")

    @pytest.mark.asyncio
    @patch("kargo.kind.check_command")
    async def test_export_kubeconfig(self, mock_check_command):
        await export_kubeconfig("kind", "kargo")

        mock_check_command.assert_called_once_with(
            ["kind", "export", "kubeconfig", "--name", "kargo"], "export kubeconfig"
        )
