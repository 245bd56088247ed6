import os
from os import getenv
from pathlib import Path
from typing import ClassVar, Literal, Optional, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from xdg_base_dirs import xdg_config_home, xdg_data_home

from .exceptions import KargoConfigurationError

KARGO_CONFIG = "KARGO_CONFIG"
KARGO_DATA_HOME = "KARGO_DATA_HOME"
KUBECONFIG = "KUBECONFIG"

CONFIG_PATH = xdg_config_home() / "kargo" / "config.yaml"


def data_path() -> Path:
    """Directory holding kargo's on-disk state (port-forward PID files)."""
    return Path(getenv(KARGO_DATA_HOME, xdg_data_home() / "kargo"))


def kubeconfig_path() -> Path:
    """Path of the kubeconfig kubectl will use."""
    value = getenv(KUBECONFIG)
    if value:
        return Path(value)
    return Path.home() / ".kube" / "config"


class _KebabModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ToolsConfig(_KebabModel):
    kind: str = "kind"
    kubectl: str = "kubectl"
    helm: str = "helm"


class CertManagerConfig(_KebabModel):
    release: str = "cert-manager"
    chart: str = "oci://quay.io/jetstack/charts/cert-manager"
    namespace: str = "cert-manager"
    version: str = "v1.18.2"
    values: list[str] = Field(default_factory=lambda: ["crds.enabled=true"])
    crds: list[str] = Field(
        default_factory=lambda: [
            "issuers.cert-manager.io",
            "clusterissuers.cert-manager.io",
            "certificates.cert-manager.io",
            "certificaterequests.cert-manager.io",
            "orders.acme.cert-manager.io",
            "challenges.acme.cert-manager.io",
        ]
    )
    api_services: list[str] = Field(alias="api-services", default_factory=lambda: ["v1beta1.webhook.cert-manager.io"])


class ArgoCDConfig(_KebabModel):
    release: str = "argo-cd"
    chart: str = "argo-cd"
    namespace: str = "argocd"
    version: str = "7.4.0"
    repo_name: str = Field(alias="repo-name", default="argo")
    repo_url: str = Field(alias="repo-url", default="https://argoproj.github.io/argo-helm")
    server_service: str = Field(alias="server-service", default="argo-cd-argocd-server")
    local_port: int = Field(alias="local-port", default=8080, gt=0, lt=65536)
    remote_port: int = Field(alias="remote-port", default=443, gt=0, lt=65536)

    @property
    def chart_ref(self) -> str:
        """Chart reference as understood by helm, e.g. ``argo/argo-cd``."""
        return f"{self.repo_name}/{self.chart}"


class RolloutsConfig(_KebabModel):
    namespace: str = "argo-rollouts"


class KargoConfig(_KebabModel):
    """Settings for one local development environment."""

    DEFAULT_CONFIG_PATH: ClassVar[Path] = CONFIG_PATH

    apiVersion: Literal["kargo.dev/v1alpha1"] = Field(default="kargo.dev/v1alpha1")
    kind: Literal["KargoConfig"] = Field(default="KargoConfig")
    cluster_name: str = Field(alias="cluster-name", default="kargo", min_length=1)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    cert_manager: CertManagerConfig = Field(alias="cert-manager", default_factory=CertManagerConfig)
    argocd: ArgoCDConfig = Field(default_factory=ArgoCDConfig)
    rollouts: RolloutsConfig = Field(default_factory=RolloutsConfig)

    @property
    def kind_context(self) -> str:
        return f"kind-{self.cluster_name}"

    @classmethod
    def from_str(cls, config: str) -> Self:
        try:
            data = yaml.safe_load(config) or {}
        except yaml.YAMLError as e:
            raise KargoConfigurationError(f"Invalid YAML in kargo config: {e}") from e
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise KargoConfigurationError(f"Invalid kargo config: {e}") from e

    @classmethod
    def load(cls, path: Optional[str | os.PathLike] = None) -> Self:
        """Load the config from ``path``, ``$KARGO_CONFIG`` or the default location.

        Only a missing default config falls back to the built-in defaults; a
        missing file that was asked for explicitly is an error.
        """
        explicit = path or getenv(KARGO_CONFIG)
        config_path = Path(explicit) if explicit else cls.DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if explicit:
                raise KargoConfigurationError(f"Config file not found at '{config_path}'", str(config_path))
            return cls()

        try:
            content = config_path.read_text()
        except OSError as e:
            raise KargoConfigurationError(f"Failed to read kargo config '{config_path}': {e}", str(config_path)) from e

        try:
            config = cls.from_str(content)
        except KargoConfigurationError as e:
            e.config_path = str(config_path)
            raise
        return config

    def dump_yaml(self) -> str:
        return yaml.safe_dump(self.model_dump(mode="json", by_alias=True), sort_keys=False)
