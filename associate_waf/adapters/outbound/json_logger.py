"""JSON Logger Adapter - Structured log lines for CI log collectors."""
import json
import sys
from datetime import datetime
from typing import Any

from associate_waf.adapters.outbound.base_logger import LevelFilteredLogger


class JsonLogger(LevelFilteredLogger):
    """
    Implementation of LoggerPort that writes one JSON object per line.

    Bound context (service, stage, region) is merged into every entry.
    """

    def __init__(self, level: str = "INFO", context: dict | None = None):
        super().__init__(level)
        self._context = context or {}

    def set_context(self, **kwargs: Any) -> None:
        """Bind fields to include in all later entries."""
        self._context.update(kwargs)

    def _emit(self, level: str, message: str, details: dict[str, Any]) -> None:
        entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": level,
            "message": message,
            **self._context,
            **details,
        }
        print(json.dumps(entry, default=str), file=sys.stderr if level == "ERROR" else sys.stdout)
