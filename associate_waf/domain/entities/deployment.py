"""Deployment entity describing the service being deployed."""
from dataclasses import dataclass


@dataclass
class Deployment:
    """Identity of the current deployment as known to the deployment tool."""

    service_name: str
    stage: str
    region: str

    # Overrides from provider configuration
    stack_name: str | None = None
    rest_api_id: str | None = None

    @property
    def default_stack_name(self) -> str:
        """Stack name the Serverless Framework uses when none is configured."""
        return f"{self.service_name}-{self.stage}"

    @property
    def effective_stack_name(self) -> str:
        """Configured stack name, or the default one."""
        return self.stack_name or self.default_stack_name

    def has_static_rest_api_id(self) -> bool:
        """Check if the REST API id is declared in configuration."""
        return bool(self.rest_api_id)

    def stage_arn(self, rest_api_id: str) -> str:
        """Build the ARN of this deployment's API Gateway stage."""
        return f"arn:aws:apigateway:{self.region}::/restapis/{rest_api_id}/stages/{self.stage}"

    def __str__(self) -> str:
        return f"Deployment({self.service_name}, {self.stage}, {self.region})"
