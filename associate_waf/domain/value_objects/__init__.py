"""Value objects for the WAF association domain."""
from associate_waf.domain.value_objects.waf_version import WafVersion

__all__ = ["WafVersion"]
