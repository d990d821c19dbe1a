"""Serverless Config Adapter - Reads the service definition from serverless.yml."""
import os
from dataclasses import dataclass
from typing import Any

import yaml

from associate_waf.domain.entities import Deployment

DEFAULT_CONFIG_PATH = "serverless.yml"

# Serverless Framework provider defaults
DEFAULT_STAGE = "dev"
DEFAULT_REGION = "us-east-1"


class ServiceConfigError(ValueError):
    """Raised when the service definition cannot be used."""


class ServerlessLoader(yaml.SafeLoader):
    """SafeLoader that reads CloudFormation intrinsic tags (!Ref, !GetAtt, ...) as None."""


ServerlessLoader.add_multi_constructor("!", lambda loader, suffix, node: None)


@dataclass
class ServiceConfig:
    """The parts of a serverless.yml the WAF hooks care about."""

    service_name: str | None = None
    stage: str | None = None
    region: str | None = None
    stack_name: str | None = None
    rest_api_id: str | None = None
    associate_waf: Any = None

    def to_deployment(
        self,
        stage: str | None = None,
        region: str | None = None,
        stack_name: str | None = None,
        rest_api_id: str | None = None,
    ) -> Deployment:
        """
        Build a Deployment, letting explicit values override the file.

        Raises:
            ServiceConfigError: If no service name is known
        """
        if not self.service_name:
            raise ServiceConfigError("Service name is not set")

        return Deployment(
            service_name=self.service_name,
            stage=stage or self.stage or DEFAULT_STAGE,
            region=region or self.region or DEFAULT_REGION,
            stack_name=stack_name or self.stack_name,
            rest_api_id=rest_api_id or self.rest_api_id,
        )


def load_service_config(path: str = DEFAULT_CONFIG_PATH) -> ServiceConfig:
    """
    Load the service definition from a serverless.yml file.

    Values that still hold unresolved variables such as `${opt:stage}` are
    treated as unset, so command-line values or defaults apply instead.

    Args:
        path: Path of the service file

    Returns:
        ServiceConfig with the values found

    Raises:
        ServiceConfigError: If the file is missing or is not a YAML mapping
    """
    if not os.path.exists(path):
        raise ServiceConfigError(f"Service file not found: {path}")

    try:
        with open(path, encoding="utf-8") as service_file:
            document = yaml.load(service_file, Loader=ServerlessLoader)
    except yaml.YAMLError as e:
        raise ServiceConfigError(f"Could not parse {path}: {e}") from e

    if not isinstance(document, dict):
        raise ServiceConfigError(f"Service file {path} is not a mapping")

    service = document.get("service")
    if isinstance(service, dict):
        service = service.get("name")

    provider = _mapping(document.get("provider"))
    api_gateway = _mapping(provider.get("apiGateway"))
    custom = _mapping(document.get("custom"))

    return ServiceConfig(
        service_name=_resolved(service),
        stage=_resolved(provider.get("stage")),
        region=_resolved(provider.get("region")),
        stack_name=_resolved(provider.get("stackName")),
        rest_api_id=_resolved(api_gateway.get("restApiId")),
        associate_waf=custom.get("associateWaf"),
    )


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _resolved(value: Any) -> str | None:
    """Return a plain string value, or None if unset or still a variable."""
    if not isinstance(value, str) or not value.strip():
        return None
    if "${" in value:
        return None
    return value.strip()
