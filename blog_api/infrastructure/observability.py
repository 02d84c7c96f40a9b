"""Structured Logging: one JSON object per line, keyed to the Blog API error taxonomy.

Invariants:
    - Every line carries timestamp, level, logger and message
    - timestamp is the record's creation time, in the same UTC millisecond
      format as a post's creationDate
    - Request/entity extras (error_code, path, method, ...) appear only when set
    - A BlogError in exc_info contributes its code and category
    - setup_logging is idempotent: one handler installed per process
"""

import json
import logging
from datetime import datetime, timezone

from blog_api.core.errors import BlogError
from blog_api.core.timestamps import format_creation_date

EXTRA_FIELDS = (
    "error_code", "path", "method", "status_code", "entity", "operation",
)

_HANDLER_NAME = "blog_api"


def _exception_fields(exc_info) -> dict:
    exc_type, exc, _ = exc_info
    fields = {"exception_type": exc_type.__name__ if exc_type else None}
    if isinstance(exc, BlogError):
        fields["error_code"] = exc.code
        fields["category"] = exc.category.value
    return fields


class JSONFormatter(logging.Formatter):
    """Render a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        log = {
            "timestamp": format_creation_date(created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log.update(_exception_fields(record.exc_info))
            log["exception"] = self.formatException(record.exc_info)
        # explicit extras win over values derived from the exception
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the blog_api root handler, replacing any earlier one."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
