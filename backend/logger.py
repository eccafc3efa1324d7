"""Structured logging configuration for the Reasoning Chat service."""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes passed via ``extra=`` that are copied into the JSON record
EXTRA_FIELDS = ("path", "turn_count", "error_code", "model", "latency_ms")


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure the root logger once.

    Args:
        log_level: Level name such as "INFO" or "DEBUG"
        json_format: Emit JSON records instead of plain text
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if any(getattr(h, "_reasoning_chat", False) for h in root_logger.handlers):
        return

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    handler._reasoning_chat = True
    root_logger.addHandler(handler)
