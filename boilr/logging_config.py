# boilr/logging_config.py
"""
Stderr-only logging configuration.

stdout is reserved for the interactive conversation, so all log output
goes to stderr.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

HUMAN_FORMAT = "%(asctime)s  %(levelname)-7s  %(message)s"


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line."""
        log_data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            log_data["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(level: int = logging.WARNING, json_format: bool = False) -> None:
    """
    Install a single stderr handler on the root logger.

    Args:
        level: Root log level (WARNING keeps interactive output clean)
        json_format: Emit one JSON object per line instead of plain text
    """
    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(HUMAN_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # SDK transport loggers are noisy at INFO
    for logger_name in ["httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(max(level, logging.WARNING))
