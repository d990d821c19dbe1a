"""Test configuration, shared fixtures and stand-ins for the ports."""
from typing import Any

import pytest

from associate_waf.domain.entities import Deployment, StackOutput, StackResourceSummary, WebACL
from associate_waf.domain.value_objects import WafVersion


class RecordingLogger:
    """LoggerPort stand-in that keeps every record."""

    def __init__(self):
        self.records: list[tuple[str, str, dict]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("DEBUG", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("INFO", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("WARNING", message, kwargs))

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        self.records.append(("ERROR", message, kwargs))

    def set_level(self, level: str) -> None:
        pass

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


class FakeStackInspector:
    """StackInspectorPort stand-in serving canned resources and outputs."""

    def __init__(
        self,
        resources: list[StackResourceSummary] | None = None,
        outputs: list[StackOutput] | None = None,
        error: Exception | None = None,
    ):
        self.resources = resources or []
        self.outputs = outputs or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def list_stack_resources(self, stack_name: str) -> list[StackResourceSummary]:
        self.calls.append(("list_stack_resources", stack_name))
        if self.error:
            raise self.error
        return self.resources

    def describe_stack_outputs(self, stack_name: str) -> list[StackOutput]:
        self.calls.append(("describe_stack_outputs", stack_name))
        return self.outputs


class FakeWafClient:
    """WafClientPort stand-in recording every call.

    When `error_on` names a method, that method records its call and then
    raises `error`.
    """

    def __init__(
        self,
        web_acls: list[WebACL] | None = None,
        bound: WebACL | None = None,
        error: Exception | None = None,
        error_on: str | None = None,
    ):
        self.web_acls = web_acls or []
        self.bound = bound
        self.error = error
        self.error_on = error_on
        self.calls: list[tuple] = []

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if self.error and call[0] == self.error_on:
            raise self.error

    def list_web_acls(self, version: WafVersion, limit: int) -> list[WebACL]:
        self._record("list_web_acls", version, limit)
        return self.web_acls

    def get_web_acl_for_resource(self, version: WafVersion, resource_arn: str) -> WebACL | None:
        self._record("get_web_acl_for_resource", version, resource_arn)
        return self.bound

    def associate_web_acl(self, version: WafVersion, resource_arn: str, binding_key: str) -> None:
        self._record("associate_web_acl", version, resource_arn, binding_key)

    def disassociate_web_acl(self, version: WafVersion, resource_arn: str) -> None:
        self._record("disassociate_web_acl", version, resource_arn)

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


class MemoryTemplate:
    """TemplatePort stand-in holding outputs in a dict."""

    def __init__(self):
        self.outputs: dict[str, dict] = {}

    def write_template_output(self, key: str, descriptor: dict[str, Any]) -> None:
        self.outputs[key] = descriptor


@pytest.fixture
def sample_region() -> str:
    """Sample AWS region for testing."""
    return "us-east-1"


@pytest.fixture
def deployment(sample_region) -> Deployment:
    """Deployment of my-service to the dev stage."""
    return Deployment(service_name="my-service", stage="dev", region=sample_region)


@pytest.fixture
def stage_arn() -> str:
    """Stage ARN of theRestApiId in the dev stage."""
    return "arn:aws:apigateway:us-east-1::/restapis/theRestApiId/stages/dev"


@pytest.fixture
def stack_resources() -> list[StackResourceSummary]:
    """Stack resources including the REST API."""
    return [
        StackResourceSummary(logical_id="some", physical_id="thing"),
        StackResourceSummary(logical_id="ApiGatewayRestApi", physical_id="theRestApiId"),
    ]


@pytest.fixture
def web_acls() -> list[WebACL]:
    """Two Web ACLs, the second one being the configured one."""
    return [
        WebACL(
            name="skip-waf-name",
            id="skip-waf-id",
            arn="arn:aws:wafv2:us-east-1:123456789012:regional/webacl/skip-waf-name/skip-waf-id",
        ),
        WebACL(
            name="some-waf-name",
            id="some-waf-id",
            arn="arn:aws:wafv2:us-east-1:123456789012:regional/webacl/some-waf-name/some-waf-id",
        ),
    ]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def stack_inspector(stack_resources) -> FakeStackInspector:
    return FakeStackInspector(resources=stack_resources)


@pytest.fixture
def waf_client(web_acls) -> FakeWafClient:
    return FakeWafClient(web_acls=web_acls)


@pytest.fixture
def template() -> MemoryTemplate:
    return MemoryTemplate()


@pytest.fixture
def make_stack_inspector():
    """Build stack inspector stand-ins with custom resources, outputs or errors."""
    return FakeStackInspector


@pytest.fixture
def make_waf_client():
    """Build WAF client stand-ins with custom Web ACLs, bindings or errors."""
    return FakeWafClient
