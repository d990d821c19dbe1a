"""Ports - Abstract interfaces for external dependencies."""
from associate_waf.ports.outbound import (
    LoggerPort,
    StackInspectorPort,
    TemplatePort,
    WafClientPort,
)

__all__ = ["LoggerPort", "StackInspectorPort", "TemplatePort", "WafClientPort"]
