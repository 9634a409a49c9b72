"""Kubernetes adapter implementing KubernetesProvider."""

from kubernetes.client.models import V1Node

from kubecheck.clients.kubernetes_client import KubernetesClient
from kubecheck.core.config import ClusterConnectionConfig
from kubecheck.core.exceptions import CommunicationError
from kubecheck.interfaces.kubernetes_provider import (
    KubernetesProvider,
    NodeCondition,
    NodeInfo,
    NodeListResult,
)
from kubecheck.utils.logging import get_logger

logger = get_logger(__name__)

UNNAMED_NODE = "<unnamed>"


class KubernetesAdapter(KubernetesProvider):
    """Adapter wrapping KubernetesClient to implement KubernetesProvider interface.

    This adapter normalizes Kubernetes API responses into clean dataclasses,
    hiding kubernetes Python client implementation details.
    """

    def __init__(
        self,
        connection: ClusterConnectionConfig | None = None,
        client: KubernetesClient | None = None,
    ):
        """Initialize Kubernetes adapter.

        Args:
            connection: Cluster connection configuration (optional)
            client: Pre-built client, mainly for tests (optional)

        Raises:
            ConfigurationError: If the client cannot be configured
        """
        self.client = client or KubernetesClient(connection)
        logger.debug("k8s_adapter_initialized")

    def list_nodes(self, label_selector: str | None = None) -> NodeListResult:
        """List nodes in the cluster.

        Args:
            label_selector: Optional label selector

        Returns:
            NodeListResult with normalized nodes or the failure reason
        """
        try:
            nodes = self.client.get_nodes(label_selector=label_selector)
        except CommunicationError as e:
            logger.error("list_nodes_failed", selector=label_selector, error=str(e))
            return NodeListResult.failure(str(e))

        return NodeListResult.success([normalize_node(node) for node in nodes])


def normalize_node(node: V1Node) -> NodeInfo:
    """Convert a V1Node into NodeInfo, tolerating missing metadata or status."""
    name = node.metadata.name if node.metadata and node.metadata.name else UNNAMED_NODE

    conditions = []
    if node.status and node.status.conditions:
        conditions = [
            NodeCondition(type=cond.type, status=cond.status) for cond in node.status.conditions
        ]

    return NodeInfo(name=name, conditions=conditions)
