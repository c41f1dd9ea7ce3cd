"""Structured JSON logging for the Lambdas

Every handler package calls `initialize_logging()` in its `__init__.py`, so
logging is configured before any module of the handler logs.

One JSON object is written per record. Fields passed through `extra=` are
merged into it, which is how use cases attach the short link key, the owner
and the `Event` name:

    >>> logger.info('Short link created.', extra={'key': 'abc123', 'event': Event.SHORT_LINK_CREATED})
    {"timestamp": "2025-12-26T12:00:00.000Z", "level": "INFO",
     "logger": "shortlinks.usecases.create_short_link", "message": "Short link created.",
     "key": "abc123", "event": "SHORT_LINK_CREATED"}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlinks.constants import ENV


# Attributes every LogRecord has, anything else came from `extra`
RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', logging.INFO, '', 0, '', (), None))) | {'message', 'asctime'}

# AWS SDK and HTTP client loggers are too chatty below WARNING
QUIET_LOGGERS = ('boto3', 'botocore', 'urllib3')


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': _isoformat(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in vars(record).items() if key not in RESERVED_ATTRS)

        if record.exc_info:
            log['exc_info'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def _isoformat(created: float) -> str:
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def initialize_logging() -> None:
    """Send JSON records to stdout (CloudWatch) at LOG_LEVEL (default INFO)"""
    # fmt: off
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'json': {'()': JsonFormatter}},
        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'formatter': 'json',
                'stream': 'ext://sys.stdout',
            },
        },
        'loggers': {name: {'level': 'WARNING'} for name in QUIET_LOGGERS},
        'root': {
            'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(),
            'handlers': ['stdout'],
        },
    })
    # fmt: on
