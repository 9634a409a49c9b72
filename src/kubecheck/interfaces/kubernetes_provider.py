"""Kubernetes provider interface for cluster operations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class NodeCondition:
    """A single node status condition."""

    type: str
    status: str | None


@dataclass
class NodeInfo:
    """Normalized node information."""

    name: str
    conditions: list[NodeCondition] = field(default_factory=list)

    def ready_condition(self) -> NodeCondition | None:
        """Get the first condition of type ``Ready``, if any."""
        return next((c for c in self.conditions if c.type == "Ready"), None)


@dataclass
class NodeListResult:
    """Outcome of fetching nodes: either a node list or a failure reason."""

    nodes: list[NodeInfo] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, nodes: list[NodeInfo]) -> "NodeListResult":
        return cls(nodes=list(nodes))

    @classmethod
    def failure(cls, reason: str) -> "NodeListResult":
        return cls(error=reason)


class KubernetesProvider(ABC):
    """Abstract interface for Kubernetes operations.

    Implementations return normalized dataclasses rather than native K8s API
    objects, and report fetch failures through ``NodeListResult`` instead of
    raising.
    """

    @abstractmethod
    def list_nodes(self, label_selector: str | None = None) -> NodeListResult:
        """List nodes in the cluster.

        Args:
            label_selector: Optional label selector restricting the nodes

        Returns:
            Successful result with normalized nodes, or a failed result
            carrying the reason
        """
