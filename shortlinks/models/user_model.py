from dataclasses import dataclass, field, FrozenInstanceError
from datetime import datetime
from uuid import uuid4

from shortlinks.constants import Limits
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem
from shortlinks.utils.helpers import utcnow
from shortlinks.utils.validators import is_valid_email


CONTEXT = 'User'


@dataclass(kw_only=True, eq=False)
class UserModel:
    """Represent a registered user.

    The password is expected to be hashed before construction. The email is
    normalized to lowercase. All fields are read-only once constructed.

    Attributes:
        name (str): Display name.
        email (str): Lowercase email address, unique per user.
        password (str): Password hash.
        id (str): Opaque unique identifier.
        created_at (datetime): Creation timestamp (UTC).
        updated_at (datetime): Last update timestamp (UTC).

    Raises:
        NotificationError:
            On construction, with one BAD_REQUEST entry per violated rule.

    Example:
        >>> user = UserModel(name='Ada', email='Ada@Example.COM', password='$2b$12$...')
        >>> user.email
        'ada@example.com'
    """

    name: str
    email: str
    password: str = field(repr=False)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self):
        self._validate()

        object.__setattr__(self, 'email', self.email.lower())
        if self.created_at is None:
            object.__setattr__(self, 'created_at', utcnow())
        if self.updated_at is None:
            object.__setattr__(self, 'updated_at', self.created_at)

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise FrozenInstanceError(f'cannot assign to field {name!r}')
        super().__setattr__(name, value)

    def __eq__(self, other):
        if not isinstance(other, UserModel):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def _validate(self) -> None:
        notification = NotificationError()

        # fmt: off
        rules = (
            ('name', self.name, 'Name', Limits.NAME_MAX_LENGTH),
            ('email', self.email, 'Email', Limits.EMAIL_MAX_LENGTH),
            ('password', self.password, 'Password', Limits.PASSWORD_MAX_LENGTH),
        )
        # fmt: on
        for field_name, value, label, max_length in rules:
            if not value:
                notification.add_error(_bad_request(f'{label} is required', field_name))
            elif not isinstance(value, str):
                notification.add_error(_bad_request(f'{label} must be a string', field_name))
            elif len(value) > max_length:
                notification.add_error(_bad_request(f'{label} must be at most {max_length} characters', field_name))

        if isinstance(self.email, str) and self.email and not is_valid_email(self.email):
            notification.add_error(_bad_request('Email must be a valid email', 'email'))

        if notification.has_errors():
            raise notification


def _bad_request(message: str, field_name: str) -> NotificationErrorItem:
    return NotificationErrorItem(message=message, code=ErrorCode.BAD_REQUEST, context=CONTEXT, field=field_name)
