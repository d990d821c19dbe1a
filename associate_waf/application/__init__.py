"""Application layer - Use cases and business logic."""
from associate_waf.application.plugin import (
    AFTER_DEPLOY,
    BEFORE_PACKAGE_FINALIZE,
    BEFORE_REMOVE,
    LIFECYCLE_EVENTS,
    AssociateWafPlugin,
    create_plugin,
)
from associate_waf.application.resource_resolver import (
    REST_API_LOGICAL_ID,
    REST_API_OUTPUT_KEY,
    ResourceResolver,
)
from associate_waf.application.waf_reconciler import WEB_ACL_PAGE_LIMIT, WafReconciler

__all__ = [
    "AFTER_DEPLOY",
    "BEFORE_PACKAGE_FINALIZE",
    "BEFORE_REMOVE",
    "LIFECYCLE_EVENTS",
    "AssociateWafPlugin",
    "create_plugin",
    "REST_API_LOGICAL_ID",
    "REST_API_OUTPUT_KEY",
    "ResourceResolver",
    "WEB_ACL_PAGE_LIMIT",
    "WafReconciler",
]
