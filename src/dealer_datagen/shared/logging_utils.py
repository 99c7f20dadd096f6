"""Structured logging utilities for dataset assembly."""
import json
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any, Optional


class StructuredLogger:
    """
    JSON-line logger for generation runs.

    Each entry carries the run's correlation id plus any fields bound for
    the run (seed, reference time), so every line of one dataset build can
    be grepped out of a shared log.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._correlation_id: Optional[str] = None
        self._bound: dict[str, Any] = {}

    @property
    def correlation_id(self) -> Optional[str]:
        return self._correlation_id

    def set_correlation_id(self, correlation_id: str):
        self._correlation_id = correlation_id

    def clear_correlation_id(self):
        self._correlation_id = None

    def generate_correlation_id(self) -> str:
        """Generate a run id: GEN_ followed by 12 hex characters."""
        return f"GEN_{uuid.uuid4().hex[:12]}"

    def bind(self, **fields: Any) -> None:
        """Attach fields to every entry until ``unbind`` is called."""
        self._bound.update(fields)

    def unbind(self) -> None:
        self._bound.clear()

    @contextmanager
    def run(self, **fields: Any) -> Iterator[str]:
        """
        Scope a generation run: new correlation id plus bound fields.

        Yields:
            The run's correlation id
        """
        correlation_id = self.generate_correlation_id()
        self.set_correlation_id(correlation_id)
        self.bind(**fields)
        try:
            yield correlation_id
        finally:
            self.unbind()
            self.clear_correlation_id()

    def _format_message(self, level: str, message: str, **fields: Any) -> dict:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": level,
            "message": message,
            "correlation_id": self._correlation_id or "none",
        }

        context = {**self._bound, **fields}
        if context:
            log_entry["context"] = context

        return log_entry

    def log(self, level: int, message: str, **fields: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return
        entry = self._format_message(logging.getLevelName(level), message, **fields)
        self.logger.log(level, json.dumps(entry, default=str))

    def info(self, message: str, **fields: Any):
        self.log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any):
        self.log(logging.WARNING, message, **fields)

    def error(self, message: str, **fields: Any):
        self.log(logging.ERROR, message, **fields)

    def debug(self, message: str, **fields: Any):
        self.log(logging.DEBUG, message, **fields)


def get_structured_logger(name: str) -> StructuredLogger:
    return StructuredLogger(name)
