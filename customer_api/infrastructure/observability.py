"""Request Logging — JSON log lines for the customer service.

Invariants:
    - Every line carries the record's own time (UTC), level, logger, service and message
    - Customer and error fields appear only when a caller passed them via extra=
    - setup_logging() replaces its own previous handler, so repeated app
      startups in one process never duplicate log lines
"""

import logging
import json
from datetime import datetime, timezone

SERVICE_NAME = "customer-api"

# keys callers pass through extra= (routes, error handlers, the store)
CONTEXT_FIELDS = (
    "customer_id", "error_code", "operation", "path", "page", "limit",
)

_HANDLER_NAME = "customer_api"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in CONTEXT_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler, replacing one installed earlier."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
