"""Health check interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from kubecheck.core.models import CheckResult
from kubecheck.interfaces.kubernetes_provider import KubernetesProvider


@dataclass
class CheckContext:
    """Context passed to health checks containing dependencies."""

    kubernetes_provider: KubernetesProvider


class Check(ABC):
    """Abstract interface for health checks.

    A check receives its providers through the context and turns what it
    observes into a single CheckResult.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the check name for logging/reporting.

        Returns:
            Human-readable check name
        """

    @property
    @abstractmethod
    def description(self) -> str:
        """Get a description of what this check validates.

        Returns:
            Description of the check's purpose
        """

    @abstractmethod
    def execute(self, context: CheckContext) -> CheckResult:
        """Execute the health check.

        Args:
            context: Check context with provider dependencies

        Returns:
            CheckResult carrying severity and message
        """
