"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if lambda is running in local SAM, False otherwise.

    get_authorization_header(event) -> str | None:
        Extract the Authorization header from an API Gateway event.

Example:
    >>> from shortlinks.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from shortlinks.constants import ENV
from shortlinks.types import LambdaEvent


def running_locally() -> bool:
    """Return True if running in SAM local invoke/api, False otherwise."""
    env = os.getenv(ENV.App.APP_ENV, '').lower()
    return env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'


def get_authorization_header(event: LambdaEvent) -> str | None:
    # API Gateway preserves the client's header casing
    headers = event.get('headers') or {}
    for name, value in headers.items():
        if name.lower() == 'authorization':
            return value
    return None
