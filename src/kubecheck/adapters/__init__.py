"""Adapter implementations for external services."""

from kubecheck.adapters.k8s_adapter import KubernetesAdapter

__all__ = [
    "KubernetesAdapter",
]
