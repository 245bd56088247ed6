import pytest
from kargo.config import KargoConfig


@pytest.fixture(autouse=True)
def tmp_kargo_paths(tmp_path, monkeypatch):
    """Keep tests away from the real kargo config and data directories."""
    monkeypatch.setattr(KargoConfig, "DEFAULT_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setenv("KARGO_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("KARGO_CONFIG", raising=False)
