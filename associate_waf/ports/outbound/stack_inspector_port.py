"""Stack Inspector Port - Interface for reading a deployed stack."""
from typing import Protocol

from associate_waf.domain.entities import StackOutput, StackResourceSummary


class StackInspectorPort(Protocol):
    """
    Port interface for CloudFormation stack inspection.

    Used to locate the REST API created by the deployment.
    """

    def list_stack_resources(self, stack_name: str) -> list[StackResourceSummary]:
        """
        List the resources of a stack.

        Args:
            stack_name: Name of the deployed stack

        Returns:
            List of StackResourceSummary objects
        """
        ...

    def describe_stack_outputs(self, stack_name: str) -> list[StackOutput]:
        """
        List the outputs published by a stack.

        Args:
            stack_name: Name of the deployed stack

        Returns:
            List of StackOutput objects (empty if the stack has none)
        """
        ...
