"""Core data models for kubecheck."""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field


class Severity(IntEnum):
    """Check outcome severity.

    Values double as process exit codes following the monitoring plugin
    convention (0 ok, 1 warning, 2 critical, 3 unknown).
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def label(self) -> str:
        """Get the upper-case label used in status lines."""
        return self.name


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CheckResult(BaseModel):
    """Result of a health check."""

    check_name: str
    severity: Severity
    message: str
    advisories: list[str] = Field(default_factory=list)
    metrics: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=_utcnow)

    @property
    def passed(self) -> bool:
        """Whether the check ended in the OK state."""
        return self.severity == Severity.OK

    @property
    def exit_code(self) -> int:
        """Get the process exit code for this result."""
        return int(self.severity)

    def status_line(self) -> str:
        """Render the one-line summary consumed by monitoring harnesses.

        Returns:
            Line of the form ``<check_name> <SEVERITY>: <message>``
        """
        return f"{self.check_name} {self.severity.label}: {self.message}"
