import logging

from shortlinks.auth import PasswordHasher
from shortlinks.constants import Event
from shortlinks.dao.base import UserBaseDAO
from shortlinks.dao.exceptions import UserAlreadyExistsError
from shortlinks.models import UserModel, PasswordStrengthSpecification
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem
from shortlinks.usecases.dto import CreatedUser


logger = logging.getLogger(__name__)

CONTEXT = 'CreateUser'


class CreateUser:
    """Register a new user

    Procedure:
        - Step 1: Reject an email which is already registered (case-insensitive)
        - Step 2: Check password strength
        - Step 3: Hash the password and build the UserModel (validates fields)
        - Step 4: Persist the user
    """

    def __init__(
        self,
        user_dao: UserBaseDAO,
        password_hasher: PasswordHasher,
        password_strength: PasswordStrengthSpecification | None = None,
    ):
        self.user_dao = user_dao
        self.password_hasher = password_hasher
        self.password_strength = password_strength or PasswordStrengthSpecification()

    def execute(self, name: str, email: str, password: str) -> CreatedUser:
        if isinstance(email, str) and email:
            logger.debug('Checking that the email is not registered yet.')
            if self.user_dao.find_by_email(email.lower()) is not None:
                raise _user_already_exists()

        self.password_strength.validate(password)

        user = UserModel(name=name, email=email, password=self.password_hasher.hash(password))
        try:
            self.user_dao.create(user)
        except UserAlreadyExistsError as e:
            raise _user_already_exists() from e

        logger.info('User created.', extra={'user_id': user.id, 'event': Event.USER_CREATED})
        return CreatedUser.from_model(user)


def _user_already_exists() -> NotificationError:
    return NotificationError(
        [NotificationErrorItem(message='User already exists', code=ErrorCode.BAD_REQUEST, context=CONTEXT, field='email')]
    )
