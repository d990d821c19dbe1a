"""Outbound ports - Interfaces for driven adapters."""
from associate_waf.ports.outbound.logger_port import LoggerPort
from associate_waf.ports.outbound.stack_inspector_port import StackInspectorPort
from associate_waf.ports.outbound.template_port import TemplatePort
from associate_waf.ports.outbound.waf_client_port import WafClientPort

__all__ = ["LoggerPort", "StackInspectorPort", "TemplatePort", "WafClientPort"]
