"""Shared logger writing pretty-printed JSON records to standard output."""

import functools
import json
import logging
import sys
import time

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}

_TIME_FORMAT = "%H:%I:%M"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "file": f"{record.pathname}:{record.lineno}",
            "func": record.funcName,
            "level": _LEVEL_NAMES.get(record.levelno, record.levelname.lower()),
            "msg": record.getMessage(),
            "time": time.strftime(_TIME_FORMAT, time.localtime(record.created)),
        }
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, indent=2, ensure_ascii=False)


class _StdoutHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stdout``."""

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


@functools.cache
def get_logger() -> logging.Logger:
    """Return the package logger, configured once at debug level."""
    logger = logging.getLogger("wutils")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = _StdoutHandler()
    handler.setFormatter(_JsonFormatter())
    logger.addHandler(handler)
    return logger