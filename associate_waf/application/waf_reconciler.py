"""WAF Reconciler - Drives the stage's Web ACL binding to the desired state."""

from associate_waf.application.resource_resolver import ResourceResolver
from associate_waf.domain.entities import HookOutcome, HookResult, WafConfig, WebACL
from associate_waf.ports.outbound import LoggerPort, WafClientPort

# Only the first page is read when looking up a Web ACL by name
WEB_ACL_PAGE_LIMIT = 100


class WafReconciler:
    """
    Associates or disassociates a Web ACL with the deployed stage.

    Every public method returns a HookResult and never raises, so a WAF
    problem is reported without failing the surrounding deployment.
    """

    def __init__(
        self,
        config: WafConfig,
        resolver: ResourceResolver,
        waf_client: WafClientPort,
        logger: LoggerPort,
    ):
        self._config = config
        self._resolver = resolver
        self._waf_client = waf_client
        self._logger = logger

    def reconcile(self) -> HookResult:
        """Associate when a Web ACL name is configured, disassociate otherwise."""
        if self._config.wants_association:
            return self.associate()
        return self.disassociate()

    def teardown(self) -> HookResult:
        """Remove any association before the stack is removed."""
        return self.disassociate()

    def associate(self) -> HookResult:
        """Associate the configured Web ACL with the stage."""
        try:
            return self._associate()
        except Exception as e:
            return self._failed(e)

    def disassociate(self) -> HookResult:
        """Remove the Web ACL bound to the stage, if there is one."""
        try:
            return self._disassociate()
        except Exception as e:
            return self._failed(e)

    def find_web_acl_by_name(self, name: str) -> WebACL | None:
        """
        Find a Web ACL by exact name.

        Args:
            name: Name of the Web ACL

        Returns:
            The matching WebACL, or None
        """
        web_acls = self._waf_client.list_web_acls(self._config.version, WEB_ACL_PAGE_LIMIT)
        self._logger.debug(
            f"Found {len(web_acls)} Web ACLs",
            version=self._config.version.value,
        )
        for web_acl in web_acls:
            if web_acl.name == name:
                return web_acl
        return None

    def _associate(self) -> HookResult:
        stage_arn = self._resolver.resolve_stage_arn()
        if not stage_arn:
            return self._unresolved()

        name = self._config.name or ""
        web_acl = self.find_web_acl_by_name(name)
        if not web_acl:
            message = f"Unable to find WAF named '{name}'"
            self._logger.info(message)
            return HookResult.skipped(message, resource_arn=stage_arn)

        binding_key = web_acl.binding_key(self._config.version)

        self._logger.info("Associating WAF...")
        self._waf_client.associate_web_acl(self._config.version, stage_arn, binding_key)

        return HookResult(
            outcome=HookOutcome.ASSOCIATED,
            message=f"Associated WAF '{name}'",
            resource_arn=stage_arn,
        )

    def _disassociate(self) -> HookResult:
        stage_arn = self._resolver.resolve_stage_arn()
        if not stage_arn:
            return self._unresolved()

        web_acl = self._waf_client.get_web_acl_for_resource(self._config.version, stage_arn)
        if not web_acl:
            self._logger.debug(f"No WAF associated with {stage_arn}")
            return HookResult(outcome=HookOutcome.UNCHANGED, resource_arn=stage_arn)

        self._logger.info("Disassociating WAF...")
        self._waf_client.disassociate_web_acl(self._config.version, stage_arn)

        return HookResult(
            outcome=HookOutcome.DISASSOCIATED,
            message=f"Disassociated WAF '{web_acl.name}'",
            resource_arn=stage_arn,
        )

    def _unresolved(self) -> HookResult:
        message = "Unable to determine REST API ID"
        self._logger.info(message)
        return HookResult.skipped(message)

    def _failed(self, e: Exception) -> HookResult:
        self._logger.error(f"Serverless Plugin Error: {e}", exception=e)
        return HookResult.failed(str(e))
