"""Level handling shared by the logger adapters."""
from typing import Any


class LevelFilteredLogger:
    """
    Partial LoggerPort implementation that filters by level.

    Subclasses decide how a record is written by implementing `_emit`.
    """

    LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

    def __init__(self, level: str = "INFO"):
        self._level = self.LEVELS.get(level.upper(), 20)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        """Log an error message, optionally with exception details."""
        if exception:
            kwargs.update(self._exception_details(exception))
        self._log("ERROR", message, **kwargs)

    def set_level(self, level: str) -> None:
        """Set the logging level."""
        self._level = self.LEVELS.get(level.upper(), 20)

    def is_enabled_for(self, level: str) -> bool:
        return self.LEVELS.get(level, 20) >= self._level

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if self.is_enabled_for(level):
            self._emit(level, message, kwargs)

    def _exception_details(self, exception: Exception) -> dict[str, Any]:
        return {
            "error": str(exception),
            "error_type": type(exception).__name__,
        }

    def _emit(self, level: str, message: str, details: dict[str, Any]) -> None:
        raise NotImplementedError
