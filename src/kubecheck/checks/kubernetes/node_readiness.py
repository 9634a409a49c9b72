"""Minimal ready nodes health check."""

from dataclasses import dataclass, field

from kubecheck.core.models import CheckResult, Severity
from kubecheck.interfaces.check import Check, CheckContext
from kubecheck.interfaces.kubernetes_provider import NodeInfo
from kubecheck.utils.logging import get_logger

logger = get_logger(__name__)

CHECK_NAME = "node_readiness"
MSG_NO_READY_NODES = "No ready nodes found"
MSG_ALL_READY = "All nodes are reporting as ready"


@dataclass
class NodeClassification:
    """Outcome of the per-node readiness scan."""

    ready: list[str] = field(default_factory=list)
    unready: dict[str, str | None] = field(default_factory=dict)
    advisories: list[str] = field(default_factory=list)


def classify_nodes(nodes: list[NodeInfo]) -> NodeClassification:
    """Split nodes into ready and not ready using their Ready condition.

    Nodes without a Ready condition, or with a status other than "True",
    produce an advisory and are left out of the ready set.

    Args:
        nodes: Normalized nodes

    Returns:
        NodeClassification with ready names, unready statuses and advisories
    """
    classification = NodeClassification()

    for node in nodes:
        condition = node.ready_condition()

        if condition is None:
            classification.unready[node.name] = None
            classification.advisories.append(f"{node.name} does not have a status")
            logger.warning("node_missing_ready_condition", node=node.name)
        elif condition.status == "True":
            classification.ready.append(node.name)
        else:
            classification.unready[node.name] = condition.status
            classification.advisories.append(f"{node.name} status is {condition.status}")
            logger.warning("node_not_ready", node=node.name, status=condition.status)

    return classification


def evaluate_threshold(ready_count: int, minimal: int) -> tuple[Severity, str]:
    """Compare the ready node count with the minimal threshold.

    Zero ready nodes is critical whatever the threshold.

    Args:
        ready_count: Number of ready nodes
        minimal: Minimal number of ready nodes allowed

    Returns:
        Tuple of (severity, message)
    """
    if ready_count == 0:
        return Severity.CRITICAL, MSG_NO_READY_NODES
    if ready_count < minimal:
        return (
            Severity.WARNING,
            f"There are less ready nodes ({ready_count}) than the minimal threshold ({minimal})",
        )
    return Severity.OK, MSG_ALL_READY


class MinimalReadyNodesCheck(Check):
    """Check that at least a minimal number of nodes are in Ready state."""

    def __init__(self, minimal: int = 1, node_filter: str | None = None):
        """Initialize the check.

        Args:
            minimal: Threshold for minimal nodes ready allowed
            node_filter: Label selector restricting the nodes checked
        """
        self.minimal = minimal
        self.node_filter = node_filter

    @property
    def name(self) -> str:
        """Get check name."""
        return CHECK_NAME

    @property
    def description(self) -> str:
        """Get check description."""
        return "Validates a minimal number of cluster nodes are in Ready state"

    def execute(self, context: CheckContext) -> CheckResult:
        """Execute the minimal ready nodes check.

        Args:
            context: Check context with the Kubernetes provider

        Returns:
            CheckResult with ok, warning or critical severity
        """
        logger.info("checking_node_readiness", minimal=self.minimal, selector=self.node_filter)

        fetched = context.kubernetes_provider.list_nodes(label_selector=self.node_filter)
        if not fetched.ok:
            return CheckResult(
                check_name=self.name,
                severity=Severity.CRITICAL,
                message=f"API error: {fetched.error}",
            )

        classification = classify_nodes(fetched.nodes)
        severity, message = evaluate_threshold(len(classification.ready), self.minimal)

        logger.info(
            "node_readiness_evaluated",
            severity=severity.label,
            ready_count=len(classification.ready),
            total_count=len(fetched.nodes),
            minimal=self.minimal,
        )

        return CheckResult(
            check_name=self.name,
            severity=severity,
            message=message,
            advisories=classification.advisories,
            metrics={
                "ready_count": len(classification.ready),
                "total_count": len(fetched.nodes),
                "minimal": self.minimal,
                "ready_nodes": classification.ready,
                "unready_nodes": classification.unready,
            },
        )
