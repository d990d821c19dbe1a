"""Outbound adapters - External services (AWS, template file, logging)."""
from associate_waf.adapters.outbound.boto3_aws_client import Boto3AWSClient
from associate_waf.adapters.outbound.console_logger import ConsoleLogger
from associate_waf.adapters.outbound.json_logger import JsonLogger
from associate_waf.adapters.outbound.template_writer import (
    DEFAULT_TEMPLATE_PATH,
    JsonTemplateWriter,
)

__all__ = [
    "Boto3AWSClient",
    "ConsoleLogger",
    "DEFAULT_TEMPLATE_PATH",
    "JsonLogger",
    "JsonTemplateWriter",
]
