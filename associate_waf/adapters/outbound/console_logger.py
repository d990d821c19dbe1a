"""Console Logger Adapter - Prints hook progress next to the deployment tool's output."""
import sys
from datetime import datetime
from typing import Any

from associate_waf.adapters.outbound.base_logger import LevelFilteredLogger

COLORS = {
    "DEBUG": "\033[36m",    # Cyan
    "INFO": "\033[32m",     # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",    # Red
}
RESET = "\033[0m"


class ConsoleLogger(LevelFilteredLogger):
    """
    Implementation of LoggerPort for interactive deploys.

    Lines are labelled like the Serverless CLI's own plugin output. Errors
    go to stderr.
    """

    def __init__(self, level: str = "INFO", use_colors: bool = True, prefix: str = "AssociateWaf"):
        """
        Initialize the console logger.

        Args:
            level: Minimum log level to output (DEBUG, INFO, WARNING, ERROR)
            use_colors: Whether to use ANSI colors on a terminal
            prefix: Label printed before every message
        """
        super().__init__(level)
        self._use_colors = use_colors and sys.stdout.isatty()
        self._prefix = prefix

    def _exception_details(self, exception: Exception) -> dict[str, Any]:
        # The message already carries the error text
        return {"error_type": type(exception).__name__}

    def _emit(self, level: str, message: str, details: dict[str, Any]) -> None:
        timestamp = datetime.utcnow().strftime("%H:%M:%S")
        label = f"{self._prefix} {level}" if level != "INFO" else self._prefix
        if self._use_colors:
            label = f"{COLORS.get(level, '')}{label}{RESET}"

        output = f"[{timestamp}] {label}: {message}"
        if details:
            output += " (" + " | ".join(f"{k}={v}" for k, v in details.items()) + ")"

        print(output, file=sys.stderr if level == "ERROR" else sys.stdout)
