"""Orchestration verbs for the components of the local environment.

Every component module exposes ``up``, ``up_clean``, ``down`` and ``status``
coroutines taking a :class:`~kargo.config.KargoConfig` and an output callback.
Installing an add-on brings the cluster up first.
"""

from . import argocd, cert_manager, cluster, rollouts
from .recreate import SETTLE_DELAY, delete_then_recreate

__all__ = [
    "argocd",
    "cert_manager",
    "cluster",
    "rollouts",
    "SETTLE_DELAY",
    "delete_then_recreate",
]
