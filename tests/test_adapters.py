"""Tests for the outbound adapters."""
import json
from datetime import datetime

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from associate_waf.adapters.outbound import (
    Boto3AWSClient,
    ConsoleLogger,
    JsonLogger,
    JsonTemplateWriter,
)
from associate_waf.domain.entities import StackOutput, StackResourceSummary, WebACL
from associate_waf.domain.value_objects import WafVersion

STAGE_ARN = "arn:aws:apigateway:us-east-1::/restapis/theRestApiId/stages/dev"
WEB_ACL_ARN = "arn:aws:wafv2:us-east-1:123456789012:regional/webacl/some-waf-name/some-waf-id"


@pytest.fixture
def aws_client(logger) -> Boto3AWSClient:
    session = boto3.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="us-east-1",
    )
    return Boto3AWSClient(logger=logger, region="us-east-1", session=session)


def stub(aws_client: Boto3AWSClient, service: str) -> Stubber:
    """Activate a stubber on the adapter's cached client for a service."""
    stubber = Stubber(aws_client._get_client(service))
    stubber.activate()
    return stubber


class TestBoto3StackInspection:
    """Test CloudFormation calls of the boto3 adapter."""

    def test_list_stack_resources(self, aws_client):
        """Resource summaries are converted."""
        stubber = stub(aws_client, "cloudformation")
        stubber.add_response(
            "list_stack_resources",
            {
                "StackResourceSummaries": [
                    {
                        "LogicalResourceId": "ApiGatewayRestApi",
                        "PhysicalResourceId": "theRestApiId",
                        "ResourceType": "AWS::ApiGateway::RestApi",
                        "LastUpdatedTimestamp": datetime(2024, 1, 1),
                        "ResourceStatus": "CREATE_COMPLETE",
                    },
                ],
            },
            {"StackName": "my-service-dev"},
        )

        resources = aws_client.list_stack_resources("my-service-dev")

        assert resources == [
            StackResourceSummary(
                logical_id="ApiGatewayRestApi",
                physical_id="theRestApiId",
                resource_type="AWS::ApiGateway::RestApi",
            )
        ]
        stubber.assert_no_pending_responses()

    def test_describe_stack_outputs(self, aws_client):
        """Stack outputs are converted."""
        stubber = stub(aws_client, "cloudformation")
        stubber.add_response(
            "describe_stacks",
            {
                "Stacks": [
                    {
                        "StackName": "my-service-dev",
                        "CreationTime": datetime(2024, 1, 1),
                        "StackStatus": "CREATE_COMPLETE",
                        "Outputs": [
                            {"OutputKey": "ApiGatewayRestApiWaf", "OutputValue": "theRestApiId"},
                        ],
                    },
                ],
            },
            {"StackName": "my-service-dev"},
        )

        outputs = aws_client.describe_stack_outputs("my-service-dev")

        assert outputs == [StackOutput(key="ApiGatewayRestApiWaf", value="theRestApiId")]

    def test_stack_errors_propagate(self, aws_client):
        """A missing stack is not swallowed."""
        stubber = stub(aws_client, "cloudformation")
        stubber.add_client_error(
            "list_stack_resources",
            service_error_code="ValidationError",
            service_message="Stack with id my-service-dev does not exist",
        )

        with pytest.raises(ClientError, match="does not exist"):
            aws_client.list_stack_resources("my-service-dev")


class TestBoto3Waf:
    """Test WAF calls of the boto3 adapter."""

    def test_list_web_acls_regional(self, aws_client):
        """WAF Regional summaries carry an id only."""
        stubber = stub(aws_client, "waf-regional")
        stubber.add_response(
            "list_web_acls",
            {"WebACLs": [{"WebACLId": "some-waf-id", "Name": "some-waf-name"}]},
            {"Limit": 100},
        )

        web_acls = aws_client.list_web_acls(WafVersion.REGIONAL, 100)

        assert web_acls == [WebACL(name="some-waf-name", id="some-waf-id", arn=None)]

    def test_list_web_acls_v2(self, aws_client):
        """WAFv2 is queried with the REGIONAL scope."""
        stubber = stub(aws_client, "wafv2")
        stubber.add_response(
            "list_web_acls",
            {"WebACLs": [{"Name": "some-waf-name", "Id": "some-waf-id", "ARN": WEB_ACL_ARN}]},
            {"Scope": "REGIONAL", "Limit": 100},
        )

        web_acls = aws_client.list_web_acls(WafVersion.V2, 100)

        assert web_acls == [WebACL(name="some-waf-name", id="some-waf-id", arn=WEB_ACL_ARN)]

    def test_list_web_acls_more_pages(self, aws_client):
        """Further pages are not read but are reported."""
        stubber = stub(aws_client, "waf-regional")
        stubber.add_response(
            "list_web_acls",
            {"NextMarker": "next-page", "WebACLs": [{"WebACLId": "some-waf-id", "Name": "some-waf-name"}]},
            {"Limit": 1},
        )

        web_acls = aws_client.list_web_acls(WafVersion.REGIONAL, 1)

        assert len(web_acls) == 1
        assert aws_client._logger.messages("WARNING")

    def test_get_web_acl_for_resource_regional(self, aws_client):
        """WAF Regional answers with a summary."""
        stubber = stub(aws_client, "waf-regional")
        stubber.add_response(
            "get_web_acl_for_resource",
            {"WebACLSummary": {"WebACLId": "some-waf-id", "Name": "some-waf-name"}},
            {"ResourceArn": STAGE_ARN},
        )

        web_acl = aws_client.get_web_acl_for_resource(WafVersion.REGIONAL, STAGE_ARN)

        assert web_acl == WebACL(name="some-waf-name", id="some-waf-id")

    def test_get_web_acl_for_resource_unbound(self, aws_client):
        """An empty WAFv2 answer means nothing is bound."""
        stubber = stub(aws_client, "wafv2")
        stubber.add_response("get_web_acl_for_resource", {}, {"ResourceArn": STAGE_ARN})

        assert aws_client.get_web_acl_for_resource(WafVersion.V2, STAGE_ARN) is None

    def test_get_web_acl_for_resource_nonexistent(self, aws_client):
        """WAFNonexistentItemException means nothing is bound."""
        stubber = stub(aws_client, "waf-regional")
        stubber.add_client_error(
            "get_web_acl_for_resource",
            service_error_code="WAFNonexistentItemException",
            service_message="The referenced item does not exist.",
        )

        assert aws_client.get_web_acl_for_resource(WafVersion.REGIONAL, STAGE_ARN) is None

    def test_get_web_acl_for_resource_other_errors(self, aws_client):
        """Other WAF errors propagate."""
        stubber = stub(aws_client, "waf-regional")
        stubber.add_client_error(
            "get_web_acl_for_resource",
            service_error_code="WAFInternalErrorException",
            service_message="Internal error",
        )

        with pytest.raises(ClientError):
            aws_client.get_web_acl_for_resource(WafVersion.REGIONAL, STAGE_ARN)

    def test_associate_regional(self, aws_client):
        """WAF Regional associates by Web ACL id."""
        stubber = stub(aws_client, "waf-regional")
        stubber.add_response(
            "associate_web_acl",
            {},
            {"WebACLId": "some-waf-id", "ResourceArn": STAGE_ARN},
        )

        aws_client.associate_web_acl(WafVersion.REGIONAL, STAGE_ARN, "some-waf-id")

        stubber.assert_no_pending_responses()

    def test_associate_v2(self, aws_client):
        """WAFv2 associates by Web ACL ARN."""
        stubber = stub(aws_client, "wafv2")
        stubber.add_response(
            "associate_web_acl",
            {},
            {"WebACLArn": WEB_ACL_ARN, "ResourceArn": STAGE_ARN},
        )

        aws_client.associate_web_acl(WafVersion.V2, STAGE_ARN, WEB_ACL_ARN)

        stubber.assert_no_pending_responses()

    def test_disassociate(self, aws_client):
        """Disassociation only needs the resource ARN."""
        stubber = stub(aws_client, "wafv2")
        stubber.add_response("disassociate_web_acl", {}, {"ResourceArn": STAGE_ARN})

        aws_client.disassociate_web_acl(WafVersion.V2, STAGE_ARN)

        stubber.assert_no_pending_responses()


class TestJsonTemplateWriter:
    """Test the compiled template writer."""

    def test_adds_output(self, tmp_path):
        """Outputs are added and other sections kept."""
        template_path = tmp_path / "cloudformation-template-update-stack.json"
        template_path.write_text(json.dumps({
            "AWSTemplateFormatVersion": "2010-09-09",
            "Resources": {"ServerlessDeploymentBucket": {"Type": "AWS::S3::Bucket"}},
        }))

        writer = JsonTemplateWriter(str(template_path))
        writer.write_template_output("ApiGatewayRestApiWaf", {"Value": "abc123"})

        template = json.loads(template_path.read_text())
        assert template["Outputs"]["ApiGatewayRestApiWaf"] == {"Value": "abc123"}
        assert "ServerlessDeploymentBucket" in template["Resources"]

    def test_replaces_output(self, tmp_path):
        """An existing output with the same key is replaced."""
        template_path = tmp_path / "template.json"
        template_path.write_text(json.dumps({
            "Outputs": {
                "ApiGatewayRestApiWaf": {"Value": "old"},
                "ServiceEndpoint": {"Value": "https://example.com"},
            },
        }))

        JsonTemplateWriter(str(template_path)).write_template_output("ApiGatewayRestApiWaf", {"Value": "new"})

        outputs = json.loads(template_path.read_text())["Outputs"]
        assert outputs["ApiGatewayRestApiWaf"] == {"Value": "new"}
        assert outputs["ServiceEndpoint"] == {"Value": "https://example.com"}

    def test_missing_template(self, tmp_path):
        """A template that was never compiled cannot be written."""
        writer = JsonTemplateWriter(str(tmp_path / "missing.json"))

        with pytest.raises(FileNotFoundError):
            writer.write_template_output("ApiGatewayRestApiWaf", {"Value": "abc123"})

    def test_not_an_object(self, tmp_path):
        """Templates must be JSON objects."""
        template_path = tmp_path / "template.json"
        template_path.write_text("[]")

        with pytest.raises(ValueError):
            JsonTemplateWriter(str(template_path)).read_template()


class TestLoggers:
    """Test the logger adapters."""

    def test_console_info_to_stdout(self, capsys):
        """Info goes to stdout with its details."""
        logger = ConsoleLogger(level="INFO")
        logger.info("Associating WAF...", resource_arn=STAGE_ARN)

        out = capsys.readouterr().out
        assert "AssociateWaf: Associating WAF..." in out
        assert f"resource_arn={STAGE_ARN}" in out

    def test_console_error_to_stderr(self, capsys):
        """Errors go to stderr."""
        logger = ConsoleLogger(level="INFO")
        logger.error("Serverless Plugin Error: boom", exception=RuntimeError("boom"))

        captured = capsys.readouterr()
        assert "Serverless Plugin Error: boom" in captured.err
        assert "error_type=RuntimeError" in captured.err
        assert captured.out == ""

    def test_console_level_filter(self, capsys):
        """Messages below the level are dropped."""
        logger = ConsoleLogger(level="ERROR")
        logger.info("hidden")
        logger.set_level("DEBUG")
        logger.debug("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_console_labels_non_info_levels(self, capsys):
        """Levels other than INFO are named in the label."""
        logger = ConsoleLogger(level="INFO")
        logger.warning("Invalid WAF Version Configuration, defaulting to REGIONAL", version="v2")

        out = capsys.readouterr().out
        assert "AssociateWaf WARNING: Invalid WAF Version Configuration" in out
        assert "version=v2" in out

    def test_json_logger(self, capsys):
        """JSON lines carry context and details."""
        logger = JsonLogger(level="INFO")
        logger.set_context(service="my-service", stage="dev")
        logger.info("Hook finished", outcome="ASSOCIATED")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["message"] == "Hook finished"
        assert entry["level"] == "INFO"
        assert entry["service"] == "my-service"
        assert entry["outcome"] == "ASSOCIATED"

    def test_json_logger_error(self, capsys):
        """Errors record the exception message."""
        logger = JsonLogger(level="INFO")
        logger.error("Serverless Plugin Error", exception=RuntimeError("Some AWS provider error"))

        entry = json.loads(capsys.readouterr().err.strip())
        assert entry["error"] == "Some AWS provider error"
        assert entry["error_type"] == "RuntimeError"
