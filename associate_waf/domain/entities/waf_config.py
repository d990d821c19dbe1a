"""WafConfig entity built from the `custom.associateWaf` service section."""
from dataclasses import dataclass
from typing import Any

from associate_waf.domain.value_objects.waf_version import WafVersion

# Only regional Web ACLs can protect an API Gateway stage
WAF_SCOPE = "REGIONAL"


@dataclass(frozen=True)
class WafConfig:
    """
    Desired WAF association for the deployed stage.

    A missing or blank name means no association is wanted, so any existing
    one is removed. The version falls back to REGIONAL for anything other
    than the exact string "V2".
    """

    name: str | None = None
    version: WafVersion = WafVersion.REGIONAL

    # Raw version value that was rejected while parsing, if any
    invalid_version: Any = None

    @classmethod
    def from_mapping(cls, raw: Any) -> "WafConfig":
        """
        Build a config from the raw `custom.associateWaf` value.

        Args:
            raw: The section as loaded from the service file. May be None,
                 an empty mapping or something that is not a mapping at all.

        Returns:
            WafConfig with defaults applied
        """
        if not isinstance(raw, dict):
            return cls()

        name = raw.get("name")
        name = name.strip() if isinstance(name, str) else None

        raw_version = raw.get("version")
        version = WafVersion.REGIONAL
        invalid_version = None
        if raw_version == WafVersion.V2.value:
            version = WafVersion.V2
        elif raw_version not in (None, "", WafVersion.REGIONAL.value):
            invalid_version = raw_version

        return cls(name=name or None, version=version, invalid_version=invalid_version)

    @property
    def wants_association(self) -> bool:
        """Check if a Web ACL should be associated with the stage."""
        return bool(self.name)

    def has_invalid_version(self) -> bool:
        """Check if the configured version was not recognized."""
        return self.invalid_version is not None

    def __str__(self) -> str:
        return f"WafConfig({self.name or '-'}, {self.version.value})"
