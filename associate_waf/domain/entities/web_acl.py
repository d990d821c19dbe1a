"""WebACL entity representing a WAF Web ACL summary."""
from dataclasses import dataclass

from associate_waf.domain.value_objects.waf_version import WafVersion


@dataclass
class WebACL:
    """Represents a Web ACL as returned by a list or lookup call."""

    name: str
    id: str
    arn: str | None = None  # WAF Regional summaries carry no ARN

    def binding_key(self, version: WafVersion) -> str:
        """
        Return the identifier used to bind this ACL to a resource.

        WAF Regional associates by Web ACL id, WAFv2 by Web ACL ARN.
        """
        if version.binds_by_arn:
            if not self.arn:
                raise ValueError(f"Web ACL '{self.name}' has no ARN to bind with")
            return self.arn
        return self.id

    def __str__(self) -> str:
        return f"WebACL({self.name}, {self.id})"
