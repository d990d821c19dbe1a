"""Resource Resolver - Locates the REST API of the current deployment."""

from associate_waf.domain.entities import Deployment
from associate_waf.ports.outbound import LoggerPort, StackInspectorPort, TemplatePort

# Logical id the Serverless Framework gives the REST API it creates
REST_API_LOGICAL_ID = "ApiGatewayRestApi"

# Output published at package time so split stacks can find the REST API
REST_API_OUTPUT_KEY = "ApiGatewayRestApiWaf"


class ResourceResolver:
    """
    Resolves the REST API id and stage ARN of a deployment.

    Lookup order is fixed: the id declared in provider configuration, then
    the stack's resource list, then the stack's outputs.
    """

    def __init__(
        self,
        deployment: Deployment,
        stack_inspector: StackInspectorPort,
        logger: LoggerPort,
        template: TemplatePort | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            deployment: Identity of the current deployment
            stack_inspector: Stack inspection client
            logger: Logger for operation logging
            template: Compiled template, only needed to publish outputs
        """
        self._deployment = deployment
        self._stack_inspector = stack_inspector
        self._logger = logger
        self._template = template

    def resolve_rest_api_id(self) -> str | None:
        """
        Determine the REST API id of the deployment.

        Returns:
            The REST API id, or None if no source knows it
        """
        if self._deployment.has_static_rest_api_id():
            return self._deployment.rest_api_id

        stack_name = self._deployment.effective_stack_name
        self._logger.debug(f"Looking up {REST_API_LOGICAL_ID} in stack {stack_name}")

        for summary in self._stack_inspector.list_stack_resources(stack_name):
            if summary.logical_id == REST_API_LOGICAL_ID and summary.physical_id:
                return summary.physical_id

        # Split stacks keep the REST API in a nested stack, published as an output
        self._logger.debug(f"Looking up output {REST_API_OUTPUT_KEY} of stack {stack_name}")
        for output in self._stack_inspector.describe_stack_outputs(stack_name):
            if output.key == REST_API_OUTPUT_KEY and output.value:
                return output.value

        return None

    def build_stage_arn(self, rest_api_id: str) -> str:
        """Build the stage ARN for a REST API id."""
        return self._deployment.stage_arn(rest_api_id)

    def resolve_stage_arn(self) -> str | None:
        """
        Determine the ARN of the deployed API Gateway stage.

        Returns:
            The stage ARN, or None if the REST API id cannot be resolved
        """
        rest_api_id = self.resolve_rest_api_id()
        if not rest_api_id:
            return None
        return self.build_stage_arn(rest_api_id)

    def output_rest_api_id(self) -> bool:
        """
        Publish a statically known REST API id as a template output.

        Only ids declared in configuration are known before the stack exists.
        Otherwise nothing is written and the stack resource list is used once
        the stack is deployed.

        Returns:
            True if an output was written
        """
        if not self._deployment.has_static_rest_api_id():
            return False

        if self._template is None:
            raise RuntimeError("No compiled template available to write outputs to")

        self._template.write_template_output(
            REST_API_OUTPUT_KEY,
            {
                "Description": "REST API id used for WAF association",
                "Value": self._deployment.rest_api_id,
            },
        )
        self._logger.debug(
            f"Added output {REST_API_OUTPUT_KEY}",
            rest_api_id=self._deployment.rest_api_id,
        )
        return True
