"""Domain layer for WAF association."""
from associate_waf.domain.entities import (
    Deployment,
    HookOutcome,
    HookResult,
    StackOutput,
    StackResourceSummary,
    WafConfig,
    WebACL,
)
from associate_waf.domain.value_objects import WafVersion

__all__ = [
    "Deployment",
    "HookOutcome",
    "HookResult",
    "StackOutput",
    "StackResourceSummary",
    "WafConfig",
    "WafVersion",
    "WebACL",
]
