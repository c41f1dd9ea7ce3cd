"""Helper utilities for AWS lambda functions.

Functions:
    base_url() -> str
        Return the configured public origin of the short link service
    get_short_url() -> str
        Get string representation of short URL for a given key
    utcnow() -> datetime
        Current timezone-aware UTC datetime
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(func) -> Callable
        Decorator: Turn unexpected exceptions into HTTP 500 responses

Example:
    >>> from shortlinks.utils.helpers import get_short_url
    >>> os.environ['BASE_URL'] = 'https://sho.rt/'
    >>> get_short_url('abc123')
    'https://sho.rt/abc123'
"""

import os
import json
import logging
import functools
from datetime import datetime, UTC
from collections.abc import Callable

from shortlinks.constants import ENV, Defaults, UNKNOWN_INTERNAL_SERVER_ERROR
from shortlinks.exceptions import MissingEnvironmentVariableError
from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def base_url() -> str:
    """Return the public base URL of the service

    Read from the BASE_URL environment variable, falling back to the local
    development origin.

    Returns:
        str: Base URL without a trailing slash, e.g.:
             - "https://sho.rt"
             - "http://localhost:3000"
    """
    return (os.environ.get(ENV.App.BASE_URL) or Defaults.BASE_URL).rstrip('/')


def get_short_url(key: str, origin: str | None = None) -> str:
    """Get string representation of shortened URL

    Args:
        key (str): short link key
        origin (str | None): public base URL. Defaults to base_url().

    Returns:
        str: short url string representation
    """
    origin = base_url() if origin is None else origin
    return f'{origin.rstrip("/")}/{key}'


def utcnow() -> datetime:
    return datetime.now(UTC)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('JWT_SECRET')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'JWT_SECRET'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(func: Callable[[LambdaEvent, LambdaContext], LambdaResponse]) -> Callable:
    """Decorator: respond with HTTP 500 instead of crashing the Lambda

    When running locally the original exception is re-raised to keep the
    traceback visible in SAM.
    """

    @functools.wraps(func)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return func(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.')
            return {
                'statusCode': 500,
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
