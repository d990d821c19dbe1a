"""Associate WAF Plugin - Binds the WAF use cases to deployment lifecycle events."""
from collections.abc import Callable
from typing import Any

from associate_waf.application.resource_resolver import ResourceResolver
from associate_waf.application.waf_reconciler import WafReconciler
from associate_waf.domain.entities import Deployment, HookOutcome, HookResult, WafConfig
from associate_waf.ports.outbound import (
    LoggerPort,
    StackInspectorPort,
    TemplatePort,
    WafClientPort,
)

AFTER_DEPLOY = "after:deploy:deploy"
BEFORE_REMOVE = "before:remove:remove"
BEFORE_PACKAGE_FINALIZE = "before:package:finalize"

# Lifecycle events the plugin listens to, in the order the host fires them
LIFECYCLE_EVENTS = [BEFORE_PACKAGE_FINALIZE, AFTER_DEPLOY, BEFORE_REMOVE]


class AssociateWafPlugin:
    """
    Application service exposing the WAF association hooks.

    The host looks up a callable in `hooks` by lifecycle event name and
    invokes it without arguments. Each hook returns a HookResult.
    """

    def __init__(
        self,
        deployment: Deployment,
        raw_config: Any,
        stack_inspector: StackInspectorPort,
        waf_client: WafClientPort,
        logger: LoggerPort,
        template: TemplatePort | None = None,
    ):
        """
        Initialize the plugin.

        Args:
            deployment: Identity of the current deployment
            raw_config: The `custom.associateWaf` section as loaded, may be None
            stack_inspector: Stack inspection client
            waf_client: WAF client for association calls
            logger: Logger for operation logging
            template: Compiled template, needed for the package hook only
        """
        self._logger = logger
        self.config = WafConfig.from_mapping(raw_config)

        if self.config.has_invalid_version():
            self._logger.warning(
                "Invalid WAF Version Configuration, defaulting to REGIONAL",
                version=self.config.invalid_version,
            )

        self.resolver = ResourceResolver(
            deployment=deployment,
            stack_inspector=stack_inspector,
            logger=logger,
            template=template,
        )
        self.reconciler = WafReconciler(
            config=self.config,
            resolver=self.resolver,
            waf_client=waf_client,
            logger=logger,
        )

        self.hooks: dict[str, Callable[[], HookResult]] = {
            AFTER_DEPLOY: self.update_waf_association,
            BEFORE_REMOVE: self.disassociate_waf,
            BEFORE_PACKAGE_FINALIZE: self.output_rest_api_id,
        }

    def update_waf_association(self) -> HookResult:
        """Bring the stage's WAF association in line with configuration."""
        return self.reconciler.reconcile()

    def disassociate_waf(self) -> HookResult:
        return self.reconciler.teardown()

    def output_rest_api_id(self) -> HookResult:
        """Publish the configured REST API id as a template output."""
        try:
            if self.resolver.output_rest_api_id():
                return HookResult(outcome=HookOutcome.OUTPUT_WRITTEN)
            return HookResult(outcome=HookOutcome.UNCHANGED)
        except Exception as e:
            self._logger.error(f"Serverless Plugin Error: {e}", exception=e)
            return HookResult.failed(str(e))

    def run_hook(self, event: str) -> HookResult:
        """
        Run the hook bound to a lifecycle event.

        Raises:
            KeyError: If the plugin does not listen to the event
        """
        if event not in self.hooks:
            raise KeyError(f"No hook registered for lifecycle event '{event}'")

        self._logger.debug(f"Running hook {event}", config=str(self.config))
        return self.hooks[event]()


def create_plugin(
    deployment: Deployment,
    raw_config: Any,
    logger: LoggerPort,
    template_path: str | None = None,
    profile: str | None = None,
) -> AssociateWafPlugin:
    """
    Factory function to create a plugin wired to AWS.

    Args:
        deployment: Identity of the current deployment
        raw_config: The `custom.associateWaf` section
        logger: Logger instance to use
        template_path: Path of the compiled template, for the package hook
        profile: Optional AWS profile name

    Returns:
        Configured AssociateWafPlugin instance
    """
    import boto3

    from associate_waf.adapters.outbound import Boto3AWSClient, JsonTemplateWriter

    session = boto3.Session(profile_name=profile) if profile else boto3.Session()
    aws_client = Boto3AWSClient(
        logger=logger,
        region=deployment.region,
        session=session,
    )

    template = JsonTemplateWriter(template_path) if template_path else None

    return AssociateWafPlugin(
        deployment=deployment,
        raw_config=raw_config,
        stack_inspector=aws_client,
        waf_client=aws_client,
        logger=logger,
        template=template,
    )
