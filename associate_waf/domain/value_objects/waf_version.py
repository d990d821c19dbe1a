"""WAF API version enumeration."""
from enum import Enum


class WafVersion(str, Enum):
    """Generations of the WAF association API that can bind an API Gateway stage."""

    REGIONAL = "REGIONAL"
    V2 = "V2"

    @property
    def aws_service(self) -> str:
        """Return the boto3 service name for this API version."""
        mapping = {
            WafVersion.REGIONAL: "waf-regional",
            WafVersion.V2: "wafv2",
        }
        return mapping[self]

    @property
    def binds_by_arn(self) -> bool:
        """V2 binds a Web ACL by its ARN, WAF Regional by its id."""
        return self == WafVersion.V2
