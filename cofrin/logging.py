"""Logging setup for cofrin scripts.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed by ``setup_logging`` from the command line entry
points. Ledger events pass the entity they touch through ``extra`` (see
``LEDGER_FIELDS``) so JSON output can be filtered per owner, goal or card.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from cofrin.exceptions import ConfigurationError

# Record attributes set by ledger events via ``extra``
LEDGER_FIELDS = ("owner_id", "goal_id", "card")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, ledger fields lifted to the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in LEDGER_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    if format_type == "standard":
        return logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {format_type!r}")


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Send cofrin logs to stdout.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` or ``"json"``.

    Raises
    ------
    ConfigurationError
        If ``format_type`` is not one of the two formats.
    """
    formatter = _build_formatter(format_type)
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("cofrin").setLevel(log_level)
    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)
