"""Boto3 AWS Client Adapter - Implementation of the stack and WAF ports using boto3."""
from typing import Any

import boto3
from botocore.exceptions import ClientError

from associate_waf.domain.entities import WAF_SCOPE, StackOutput, StackResourceSummary, WebACL
from associate_waf.domain.value_objects import WafVersion
from associate_waf.ports.outbound import LoggerPort


class Boto3AWSClient:
    """
    Implementation of StackInspectorPort and WafClientPort using boto3.

    All calls go to the deployment's region. Service errors are not caught
    here, the reconciler decides what a failure means.
    """

    def __init__(
        self,
        logger: LoggerPort,
        region: str,
        session: boto3.Session | None = None,
    ):
        """
        Initialize the AWS client.

        Args:
            logger: Logger for operation logging
            region: AWS region of the deployment
            session: Optional boto3 session (uses default if not provided)
        """
        self._logger = logger
        self._region = region
        self._session = session or boto3.Session()
        self._client_cache: dict[str, Any] = {}

    def _get_client(self, service: str) -> Any:
        """Get or create a boto3 client for a service in the deployment region."""
        if service not in self._client_cache:
            self._client_cache[service] = self._session.client(service, region_name=self._region)
        return self._client_cache[service]

    # Stack inspection

    def list_stack_resources(self, stack_name: str) -> list[StackResourceSummary]:
        """List the resources of a stack."""
        cloudformation = self._get_client("cloudformation")
        summaries = []

        paginator = cloudformation.get_paginator("list_stack_resources")
        for page in paginator.paginate(StackName=stack_name):
            for summary in page.get("StackResourceSummaries", []):
                summaries.append(StackResourceSummary(
                    logical_id=summary["LogicalResourceId"],
                    physical_id=summary.get("PhysicalResourceId"),
                    resource_type=summary.get("ResourceType"),
                ))

        self._logger.debug(f"Found {len(summaries)} resources in stack {stack_name}")
        return summaries

    def describe_stack_outputs(self, stack_name: str) -> list[StackOutput]:
        """List the outputs of a stack."""
        cloudformation = self._get_client("cloudformation")
        response = cloudformation.describe_stacks(StackName=stack_name)

        outputs = []
        for stack in response.get("Stacks", []):
            for output in stack.get("Outputs", []):
                if "OutputKey" not in output:
                    continue
                outputs.append(StackOutput(
                    key=output["OutputKey"],
                    value=output.get("OutputValue", ""),
                ))
        return outputs

    # WAF operations

    def list_web_acls(self, version: WafVersion, limit: int) -> list[WebACL]:
        """List the regional Web ACLs, first page only."""
        waf = self._get_client(version.aws_service)

        if version == WafVersion.V2:
            response = waf.list_web_acls(Scope=WAF_SCOPE, Limit=limit)
        else:
            response = waf.list_web_acls(Limit=limit)

        if response.get("NextMarker"):
            self._logger.warning(
                f"More than {limit} Web ACLs found, only the first {limit} are searched",
                version=version.value,
            )

        return [self._to_web_acl(acl) for acl in response.get("WebACLs", [])]

    def get_web_acl_for_resource(self, version: WafVersion, resource_arn: str) -> WebACL | None:
        """Get the Web ACL bound to a resource."""
        waf = self._get_client(version.aws_service)

        try:
            response = waf.get_web_acl_for_resource(ResourceArn=resource_arn)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            if error_code == "WAFNonexistentItemException":
                # Nothing associated - this is expected
                return None
            raise

        # WAF Regional answers with a summary, WAFv2 with the full Web ACL
        web_acl_data = response.get("WebACLSummary") or response.get("WebACL")
        if not web_acl_data:
            return None
        return self._to_web_acl(web_acl_data)

    def associate_web_acl(self, version: WafVersion, resource_arn: str, binding_key: str) -> None:
        """Bind a Web ACL to a resource."""
        waf = self._get_client(version.aws_service)
        self._logger.debug(f"Associating {binding_key} with {resource_arn}", version=version.value)

        if version == WafVersion.V2:
            waf.associate_web_acl(WebACLArn=binding_key, ResourceArn=resource_arn)
        else:
            waf.associate_web_acl(WebACLId=binding_key, ResourceArn=resource_arn)

    def disassociate_web_acl(self, version: WafVersion, resource_arn: str) -> None:
        """Remove the Web ACL bound to a resource."""
        waf = self._get_client(version.aws_service)
        self._logger.debug(f"Disassociating Web ACL from {resource_arn}", version=version.value)
        waf.disassociate_web_acl(ResourceArn=resource_arn)

    def _to_web_acl(self, data: dict) -> WebACL:
        """Convert a WAF Regional or WAFv2 Web ACL payload to a WebACL."""
        return WebACL(
            name=data["Name"],
            id=data.get("WebACLId") or data["Id"],
            arn=data.get("ARN") or data.get("WebACLArn"),
        )
