"""Serverless Associate WAF - Main entry point.

Run WAF association lifecycle hooks for a Serverless service.
"""
from associate_waf.adapters.inbound.cli_adapter import main as cli_main


def main() -> None:
    """Main entry point - delegates to CLI adapter."""
    cli_main()


if __name__ == "__main__":
    main()
