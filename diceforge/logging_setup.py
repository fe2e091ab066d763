"""Package logger configuration."""

import json
import logging
import sys
from datetime import datetime, timezone

_LOGGER_NAME = "diceforge"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for piping CLI logs into other tools."""

    def format(self, record):
        payload = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        return json.dumps(payload, ensure_ascii=True)


def get_logger(name=None):
    """Return the package logger, or a child of it for a module name."""
    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure_logging(verbose=False, json_format=False, stream=None):
    """Attach a stream handler to the package logger.

    Library code only emits records; the command line calls this once.
    Repeated calls leave the existing handler in place.
    """
    logger = get_logger()
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger
