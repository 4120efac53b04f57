"""Logging setup for propfolio: console or JSON output, optional report log file."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

# Record attributes passed through ``extra=`` that JSON output keeps
CONTEXT_FIELDS = ("action", "actor", "property_id", "lease_id", "count")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    log_file: str | Path | None = None,
) -> None:
    """Configure the root logger and the ``propfolio`` namespace.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        "standard" for human-readable lines, "json" for one object per line.
    log_file : str | Path | None
        Also append to this file, e.g. next to an exported report.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger("propfolio").setLevel(log_level)

    # Faker logs locale and provider lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with portfolio context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``propfolio`` namespace.

    ``get_logger("report")`` and ``get_logger("propfolio.report")`` return
    the same logger, so levels set by ``setup_logging`` apply to both.
    """
    if name != "propfolio" and not name.startswith("propfolio."):
        name = f"propfolio.{name}"
    return logging.getLogger(name)
