"""Authorization policy for incoming requests

Two modes are supported:
    OPTIONAL: a valid bearer token attaches the caller's identity, no header
              means anonymous.
    REQUIRED: the operation fails with UNAUTHORIZED unless a valid bearer
              token is presented.

In both modes a token which fails verification is rejected.
"""

import logging
from enum import StrEnum

from shortlinks.auth.providers import TokenProvider
from shortlinks.exceptions import InvalidTokenError
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem


logger = logging.getLogger(__name__)

CONTEXT = 'Auth'


class AuthMode(StrEnum):
    OPTIONAL = 'OPTIONAL'
    REQUIRED = 'REQUIRED'


class AuthorizationPolicy:
    """Resolve the caller's user id from an Authorization header

    Example:
        >>> policy = AuthorizationPolicy(JWTTokenProvider(secret=...))
        >>> policy.authenticate(None, AuthMode.OPTIONAL) is None
        True
        >>> policy.authenticate('Bearer <valid token>', AuthMode.REQUIRED)
        'user-123'
    """

    def __init__(self, token_provider: TokenProvider):
        self.token_provider = token_provider

    def authenticate(self, authorization: str | None, mode: AuthMode = AuthMode.REQUIRED) -> str | None:
        """Return the authenticated user id, or None for anonymous callers

        Args:
            authorization (str | None):
                Raw Authorization header value, e.g. 'Bearer <token>'.
            mode (AuthMode):
                Whether an identity is required.

        Raises:
            NotificationError:
                UNAUTHORIZED 'Token not provided' when mode is REQUIRED and no
                bearer token is present, UNAUTHORIZED 'Invalid token' when the
                token fails verification.
        """
        token = _parse_bearer_token(authorization)
        if token is None:
            if mode == AuthMode.OPTIONAL:
                logger.debug('No bearer token provided. Proceeding anonymously.')
                return None
            logger.debug('No bearer token provided.')
            raise _unauthorized('Token not provided')

        try:
            user_id = self.token_provider.verify(token)
        except InvalidTokenError as e:
            logger.warning('Invalid bearer token provided.', extra={'reason': str(e)})
            raise _unauthorized('Invalid token') from e

        logger.debug('Bearer token verified.', extra={'user_id': user_id})
        return user_id


def _parse_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != 'bearer':
        return None
    return parts[1]


def _unauthorized(message: str) -> NotificationError:
    return NotificationError([NotificationErrorItem(message=message, code=ErrorCode.UNAUTHORIZED, context=CONTEXT)])
