"""Template Port - Interface for editing the compiled deployment template."""
from typing import Any, Protocol


class TemplatePort(Protocol):
    """
    Port interface for the compiled CloudFormation template.

    Implementations could write to:
    - The template file produced by `serverless package`
    - An in-memory template held by the host
    """

    def write_template_output(self, key: str, descriptor: dict[str, Any]) -> None:
        """
        Add or replace an entry in the template's Outputs section.

        Args:
            key: Logical name of the output
            descriptor: Output body, e.g. {"Value": "abc123"}
        """
        ...
