"""Interface definitions for kubecheck providers and checks."""

from kubecheck.interfaces.check import Check, CheckContext
from kubecheck.interfaces.kubernetes_provider import (
    KubernetesProvider,
    NodeCondition,
    NodeInfo,
    NodeListResult,
)

__all__ = [
    "Check",
    "CheckContext",
    "KubernetesProvider",
    "NodeCondition",
    "NodeInfo",
    "NodeListResult",
]
