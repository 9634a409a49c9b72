"""Kubernetes node readiness check (kubecheck).

Monitoring plugin that verifies a minimal number of cluster nodes report Ready.
"""

__version__ = "0.1.0"
__author__ = "Platform Engineering Team"
__license__ = "MIT"
