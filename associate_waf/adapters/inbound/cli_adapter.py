"""CLI Adapter - Command-line interface for the WAF association hooks."""
import sys
from collections.abc import Callable
from typing import Any

import click
from botocore.exceptions import BotoCoreError

from associate_waf import __version__
from associate_waf.adapters.inbound.serverless_config import (
    DEFAULT_CONFIG_PATH,
    ServiceConfigError,
    load_service_config,
)
from associate_waf.adapters.outbound import DEFAULT_TEMPLATE_PATH, ConsoleLogger, JsonLogger
from associate_waf.application.plugin import (
    AFTER_DEPLOY,
    BEFORE_PACKAGE_FINALIZE,
    BEFORE_REMOVE,
    LIFECYCLE_EVENTS,
    create_plugin,
)
from associate_waf.domain.entities import HookResult

HOOK_DESCRIPTIONS = {
    BEFORE_PACKAGE_FINALIZE: "Add the REST API id output to an already packaged template",
    AFTER_DEPLOY: "Associate the configured WAF, or disassociate when none is configured",
    BEFORE_REMOVE: "Disassociate any WAF from the stage",
}


@click.group()
@click.version_option(version=__version__, prog_name="serverless-associate-waf")
def cli() -> None:
    """
    Serverless Associate WAF - Keep a WAF bound to an API Gateway stage.

    Each command runs one Serverless lifecycle hook. Hook failures are
    logged and never change the exit status.
    """
    pass


def hook_options(func: Callable) -> Callable:
    """Options shared by every hook command."""
    options = [
        click.option(
            "--config", "-c", "config_path",
            default=DEFAULT_CONFIG_PATH,
            show_default=True,
            type=click.Path(dir_okay=False),
            help="Path of the serverless.yml service file.",
        ),
        click.option(
            "--stage", "-s",
            default=None,
            envvar="SLS_STAGE",
            help="Deployment stage. Overrides provider.stage.",
        ),
        click.option(
            "--region", "-r",
            default=None,
            envvar=["AWS_REGION", "AWS_DEFAULT_REGION"],
            help="AWS region. Overrides provider.region.",
        ),
        click.option(
            "--stack-name",
            default=None,
            help="CloudFormation stack name. Overrides provider.stackName.",
        ),
        click.option(
            "--rest-api-id",
            default=None,
            help="REST API id. Overrides provider.apiGateway.restApiId.",
        ),
        click.option(
            "--waf-name",
            default=None,
            help="Web ACL name. Overrides custom.associateWaf.name.",
        ),
        click.option(
            "--waf-version",
            default=None,
            help="WAF API version (V2 or REGIONAL). Overrides custom.associateWaf.version.",
        ),
        click.option(
            "--profile",
            default=None,
            help="AWS profile to use.",
        ),
        click.option(
            "--verbose", "-v",
            is_flag=True,
            help="Enable verbose output (DEBUG level logging).",
        ),
        click.option(
            "--quiet", "-q",
            is_flag=True,
            help="Suppress all output except errors.",
        ),
        click.option(
            "--json-logs",
            is_flag=True,
            help="Write logs as JSON lines.",
        ),
    ]

    for option in reversed(options):
        func = option(func)
    return func


@cli.command()
@hook_options
def deploy(**options: Any) -> None:
    """
    Run the after:deploy:deploy hook.

    Associates the Web ACL named in custom.associateWaf.name with the
    deployed stage, or removes any association when no name is set.

    Examples:

        serverless-associate-waf deploy --stage prod

        serverless-associate-waf deploy --waf-name my-acl --waf-version V2
    """
    _run_hook(AFTER_DEPLOY, **options)


@cli.command()
@hook_options
def remove(**options: Any) -> None:
    """
    Run the before:remove:remove hook.

    Removes any Web ACL association from the stage before the stack goes.
    """
    _run_hook(BEFORE_REMOVE, **options)


@cli.command()
@hook_options
@click.option(
    "--template", "-t", "template_path",
    default=DEFAULT_TEMPLATE_PATH,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Compiled CloudFormation template to add the output to.",
)
def package(**options: Any) -> None:
    """
    Run the before:package:finalize hook on an already packaged service.

    Writes the ApiGatewayRestApiWaf output into the compiled template when
    the REST API id is set in configuration, so split stacks can find it.
    Run it after `serverless package` and before `serverless deploy
    --package`, since packaging rewrites the template.
    """
    _run_hook(BEFORE_PACKAGE_FINALIZE, **options)


@cli.command()
def hooks() -> None:
    """
    List the lifecycle hooks and the command that runs each.
    """
    commands = {
        BEFORE_PACKAGE_FINALIZE: "package",
        AFTER_DEPLOY: "deploy",
        BEFORE_REMOVE: "remove",
    }
    click.echo("Lifecycle hooks:\n")
    for event in LIFECYCLE_EVENTS:
        click.echo(f"  {event}")
        click.echo(f"    Command: {commands[event]}")
        click.echo(f"    Action: {HOOK_DESCRIPTIONS[event]}")
        click.echo()


def _run_hook(
    event: str,
    config_path: str,
    stage: str | None,
    region: str | None,
    stack_name: str | None,
    rest_api_id: str | None,
    waf_name: str | None,
    waf_version: str | None,
    profile: str | None,
    verbose: bool,
    quiet: bool,
    json_logs: bool,
    template_path: str | None = None,
) -> None:
    """Load configuration, run one hook and report its result."""
    log_level = "DEBUG" if verbose else ("ERROR" if quiet else "INFO")
    logger = JsonLogger(level=log_level) if json_logs else ConsoleLogger(level=log_level)

    try:
        service_config = load_service_config(config_path)
        deployment = service_config.to_deployment(
            stage=stage,
            region=region,
            stack_name=stack_name,
            rest_api_id=rest_api_id,
        )
    except ServiceConfigError as e:
        logger.error(f"Invalid configuration: {e}", exception=e)
        sys.exit(1)

    if isinstance(logger, JsonLogger):
        logger.set_context(
            service=deployment.service_name,
            stage=deployment.stage,
            region=deployment.region,
        )

    raw_config = _merge_waf_options(service_config.associate_waf, waf_name, waf_version)

    try:
        plugin = create_plugin(
            deployment=deployment,
            raw_config=raw_config,
            logger=logger,
            template_path=template_path,
            profile=profile,
        )
    except BotoCoreError as e:
        logger.error(f"Invalid configuration: {e}", exception=e)
        sys.exit(1)
    result = plugin.run_hook(event)

    _print_result(logger, event, result)


def _merge_waf_options(raw_config: Any, waf_name: str | None, waf_version: str | None) -> Any:
    """Apply command-line WAF options on top of custom.associateWaf."""
    if waf_name is None and waf_version is None:
        return raw_config

    merged = dict(raw_config) if isinstance(raw_config, dict) else {}
    if waf_name is not None:
        merged["name"] = waf_name
    if waf_version is not None:
        merged["version"] = waf_version
    return merged


def _print_result(logger: Any, event: str, result: HookResult) -> None:
    """Log the outcome of a hook."""
    details = {"outcome": result.outcome.value, "changed": result.changed}
    if result.resource_arn:
        details["resource_arn"] = result.resource_arn

    if result.ok:
        logger.info(f"Hook {event} finished", **details)
    else:
        logger.warning(f"Hook {event} failed, deployment continues", **details)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
