import logging

from shortlinks.auth import PasswordHasher, TokenProvider
from shortlinks.constants import Event
from shortlinks.dao.base import UserBaseDAO
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem
from shortlinks.usecases.dto import AccessToken
from shortlinks.utils.validators import is_valid_email


logger = logging.getLogger(__name__)

CONTEXT = 'Login'


class Login:
    """Exchange email and password for an access token

    An unknown email and a wrong password produce the same UNAUTHORIZED
    error, so the response doesn't reveal which emails are registered.
    """

    def __init__(self, user_dao: UserBaseDAO, password_hasher: PasswordHasher, token_provider: TokenProvider):
        self.user_dao = user_dao
        self.password_hasher = password_hasher
        self.token_provider = token_provider

    def execute(self, email: str, password: str) -> AccessToken:
        self._validate(email, password)

        user = self.user_dao.find_by_email(email.lower())
        if user is None or not self.password_hasher.compare(password, user.password):
            logger.info('Login failed.', extra={'event': Event.LOGIN_FAILED})
            raise NotificationError(
                [NotificationErrorItem(message='Invalid email or password', code=ErrorCode.UNAUTHORIZED, context=CONTEXT)]
            )

        token = self.token_provider.generate({'sub': user.id, 'name': user.name, 'email': user.email})
        logger.info('Login succeeded.', extra={'user_id': user.id, 'event': Event.LOGIN_SUCCEEDED})
        return AccessToken(access_token=token)

    @staticmethod
    def _validate(email: str | None, password: str | None) -> None:
        notification = NotificationError()

        if not email or not isinstance(email, str):
            notification.add_error(_bad_request('Email is required', 'email'))
        elif not is_valid_email(email):
            notification.add_error(_bad_request('Email must be a valid email', 'email'))

        if not password or not isinstance(password, str):
            notification.add_error(_bad_request('Password is required', 'password'))

        if notification.has_errors():
            raise notification


def _bad_request(message: str, field_name: str) -> NotificationErrorItem:
    return NotificationErrorItem(message=message, code=ErrorCode.BAD_REQUEST, context=CONTEXT, field=field_name)
