"""WAF Client Port - Interface for Web ACL association operations."""
from typing import Protocol

from associate_waf.domain.entities import WebACL
from associate_waf.domain.value_objects import WafVersion


class WafClientPort(Protocol):
    """
    Port interface for WAF operations.

    Every call takes the API version so one client serves both WAF Regional
    and WAFv2. Implementations must let service errors propagate.
    """

    def list_web_acls(self, version: WafVersion, limit: int) -> list[WebACL]:
        """
        List the regional Web ACLs visible to the account.

        Args:
            version: WAF API version to query
            limit: Maximum number of Web ACLs to return

        Returns:
            List of WebACL summaries
        """
        ...

    def get_web_acl_for_resource(self, version: WafVersion, resource_arn: str) -> WebACL | None:
        """
        Get the Web ACL currently bound to a resource.

        Returns:
            WebACL if associated, None otherwise
        """
        ...

    def associate_web_acl(self, version: WafVersion, resource_arn: str, binding_key: str) -> None:
        """
        Bind a Web ACL to a resource.

        Args:
            version: WAF API version to use
            resource_arn: ARN of the protected resource
            binding_key: Web ACL id (REGIONAL) or ARN (V2)
        """
        ...

    def disassociate_web_acl(self, version: WafVersion, resource_arn: str) -> None:
        """Remove whatever Web ACL is bound to a resource."""
        ...
