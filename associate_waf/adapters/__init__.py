"""Adapters - Concrete implementations of ports."""
from associate_waf.adapters.outbound import (
    Boto3AWSClient,
    ConsoleLogger,
    JsonLogger,
    JsonTemplateWriter,
)

__all__ = [
    "Boto3AWSClient",
    "ConsoleLogger",
    "JsonLogger",
    "JsonTemplateWriter",
]
