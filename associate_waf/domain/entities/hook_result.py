"""HookResult entity representing the outcome of a lifecycle hook."""
from dataclasses import dataclass
from enum import Enum


class HookOutcome(str, Enum):
    """What a lifecycle hook ended up doing."""

    ASSOCIATED = "ASSOCIATED"
    DISASSOCIATED = "DISASSOCIATED"
    UNCHANGED = "UNCHANGED"
    SKIPPED = "SKIPPED"
    OUTPUT_WRITTEN = "OUTPUT_WRITTEN"
    FAILED = "FAILED"


@dataclass
class HookResult:
    """
    Result returned by every lifecycle hook entry point.

    Hooks never raise. Failures are reported as a FAILED outcome carrying the
    error message, and everything else counts as success for the deployment.
    """

    outcome: HookOutcome
    message: str | None = None
    resource_arn: str | None = None

    @classmethod
    def failed(cls, reason: str, resource_arn: str | None = None) -> "HookResult":
        """Build a FAILED result."""
        return cls(outcome=HookOutcome.FAILED, message=reason, resource_arn=resource_arn)

    @classmethod
    def skipped(cls, reason: str, resource_arn: str | None = None) -> "HookResult":
        """Build a SKIPPED result."""
        return cls(outcome=HookOutcome.SKIPPED, message=reason, resource_arn=resource_arn)

    @property
    def ok(self) -> bool:
        """Check if the hook did not fail."""
        return self.outcome != HookOutcome.FAILED

    @property
    def changed(self) -> bool:
        """Check if the hook changed remote or template state."""
        return self.outcome in (
            HookOutcome.ASSOCIATED,
            HookOutcome.DISASSOCIATED,
            HookOutcome.OUTPUT_WRITTEN,
        )

    def __str__(self) -> str:
        if self.message:
            return f"HookResult({self.outcome.value}: {self.message})"
        return f"HookResult({self.outcome.value})"
