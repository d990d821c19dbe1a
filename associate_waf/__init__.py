"""Serverless Associate WAF - WAF association hooks for API Gateway stages.

Associates a WAF Web ACL with the API Gateway stage of a Serverless
deployment, and removes the association when it is no longer wanted.
"""

__version__ = "0.1.0"

# Domain layer
# Application layer
from associate_waf.application import (
    AssociateWafPlugin,
    ResourceResolver,
    WafReconciler,
    create_plugin,
)
from associate_waf.domain import (
    Deployment,
    HookOutcome,
    HookResult,
    WafConfig,
    WafVersion,
    WebACL,
)

# Re-export for convenience
__all__ = [
    "__version__",
    # Domain
    "Deployment",
    "HookOutcome",
    "HookResult",
    "WafConfig",
    "WafVersion",
    "WebACL",
    # Application
    "AssociateWafPlugin",
    "ResourceResolver",
    "WafReconciler",
    "create_plugin",
]
