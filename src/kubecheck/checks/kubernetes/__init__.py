"""Generic Kubernetes health checks."""

from kubecheck.checks.kubernetes.node_readiness import MinimalReadyNodesCheck

__all__ = [
    "MinimalReadyNodesCheck",
]
