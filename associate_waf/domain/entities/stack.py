"""CloudFormation stack entities used to locate the REST API."""
from dataclasses import dataclass


@dataclass(frozen=True)
class StackResourceSummary:
    """One entry of a stack's resource listing."""

    logical_id: str
    physical_id: str | None = None
    resource_type: str | None = None


@dataclass(frozen=True)
class StackOutput:
    """One output published by a stack."""

    key: str
    value: str
