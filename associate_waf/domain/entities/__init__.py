"""Domain entities for WAF association."""
from associate_waf.domain.entities.deployment import Deployment
from associate_waf.domain.entities.hook_result import HookOutcome, HookResult
from associate_waf.domain.entities.stack import StackOutput, StackResourceSummary
from associate_waf.domain.entities.waf_config import WAF_SCOPE, WafConfig
from associate_waf.domain.entities.web_acl import WebACL

__all__ = [
    "Deployment",
    "HookOutcome",
    "HookResult",
    "StackOutput",
    "StackResourceSummary",
    "WAF_SCOPE",
    "WafConfig",
    "WebACL",
]
