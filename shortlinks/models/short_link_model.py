"""Short link domain model

Classes:
    ShortLinkModel:
        Maps a short key to a destination URL and tracks usage. Owns key
        generation, URL validation, click counting, destination replacement
        and soft deletion.

Example:
    >>> link = ShortLinkModel(destination_url='https://example.com/a', base_url='https://sho.rt')
    >>> len(link.key)
    6
    >>> link.short_url == f'https://sho.rt/{link.key}'
    True
    >>> link.increment_click_count()
    >>> link.click_count
    1
    >>> link.change_destination('https://example.com/b')
    >>> link.click_count
    0
"""

from dataclasses import dataclass, field, FrozenInstanceError
from datetime import datetime
from uuid import uuid4

from shortlinks.constants import Limits
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem
from shortlinks.utils.helpers import base_url as configured_base_url, get_short_url, utcnow
from shortlinks.utils.shortener import generate_key
from shortlinks.utils.validators import is_valid_key, is_valid_url


CONTEXT = 'ShortLink'


@dataclass(kw_only=True, eq=False)
class ShortLinkModel:
    """Represent a shortened URL mapping.

    Attributes:
        destination_url (str):
            Absolute URL the short link redirects to.
        key (str):
            Short lookup token. Generated (6 random Base62 characters) when
            not supplied. Cannot be reassigned after construction.
        owner_id (str | None):
            Id of the owning user, None for anonymous links.
        click_count (int):
            Number of successful resolutions since the last destination change.
        id (str):
            Opaque unique identifier. Cannot be reassigned after construction.
        created_at (datetime):
            Creation timestamp (UTC).
        updated_at (datetime):
            Timestamp of the last mutation (UTC). Defaults to created_at.
        deleted_at (datetime | None):
            Soft deletion timestamp, None while the link is active.
        base_url (str | None):
            Public origin used to build short_url. Defaults to BASE_URL.

    Raises:
        NotificationError:
            On construction, with one BAD_REQUEST entry per violated rule.
    """

    destination_url: str
    key: str | None = None
    owner_id: str | None = None
    click_count: int = 0
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    base_url: str | None = field(default=None, repr=False)

    _IMMUTABLE_FIELDS = frozenset({'id', 'key'})

    def __post_init__(self):
        self._validate()

        # Bypass the immutability guard for generated defaults
        if self.key is None:
            object.__setattr__(self, 'key', generate_key())
        if self.base_url is None:
            self.base_url = configured_base_url()
        if self.created_at is None:
            self.created_at = utcnow()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def __setattr__(self, name, value):
        if name in self._IMMUTABLE_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f'cannot assign to field {name!r}')
        super().__setattr__(name, value)

    def __eq__(self, other):
        if not isinstance(other, ShortLinkModel):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    @property
    def short_url(self) -> str:
        return get_short_url(self.key, self.base_url)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def change_destination(self, destination_url: str) -> None:
        """Replace the destination URL and reset the click counter

        Raises:
            NotificationError:
                If the link is soft-deleted, or the new URL is missing or malformed.
        """
        self._ensure_not_deleted()

        notification = NotificationError()
        self._validate_destination_url(destination_url, notification)
        if notification.has_errors():
            raise notification

        self.destination_url = destination_url
        self.click_count = 0
        self.updated_at = utcnow()

    def increment_click_count(self) -> None:
        """Count one successful resolution

        NOTE: updated_at is deliberately left untouched. Persisting the new
              count is up to the caller.

        Raises:
            NotificationError: If the link is soft-deleted.
        """
        self._ensure_not_deleted()
        self.click_count += 1

    def soft_delete(self) -> None:
        """Mark the link as deleted

        Sets deleted_at and updated_at to the same instant. Deleting an
        already deleted link is a no-op and keeps the original timestamps.
        """
        if self.is_deleted:
            return
        now = utcnow()
        self.deleted_at = now
        self.updated_at = now

    def _ensure_not_deleted(self) -> None:
        if self.is_deleted:
            raise NotificationError(
                [
                    NotificationErrorItem(
                        message='This short link has been deleted',
                        code=ErrorCode.BAD_REQUEST,
                        context=CONTEXT,
                        field='destination_url',
                    )
                ]
            )

    def _validate(self) -> None:
        notification = NotificationError()

        self._validate_destination_url(self.destination_url, notification)

        if self.key is not None and not is_valid_key(self.key):
            notification.add_error(
                NotificationErrorItem(
                    message=f'Key must be 1 to {Limits.KEY_MAX_LENGTH} letters, digits, hyphens or underscores',
                    code=ErrorCode.BAD_REQUEST,
                    context=CONTEXT,
                    field='key',
                )
            )

        if not isinstance(self.click_count, int) or isinstance(self.click_count, bool) or self.click_count < 0:
            notification.add_error(
                NotificationErrorItem(
                    message='Click count must be a non-negative integer',
                    code=ErrorCode.BAD_REQUEST,
                    context=CONTEXT,
                    field='click_count',
                )
            )

        if notification.has_errors():
            raise notification

    @staticmethod
    def _validate_destination_url(destination_url: str | None, notification: NotificationError) -> None:
        # A missing URL and a malformed URL are mutually exclusive failures
        if not destination_url:
            notification.add_error(
                NotificationErrorItem(
                    message='Destination URL is required',
                    code=ErrorCode.BAD_REQUEST,
                    context=CONTEXT,
                    field='destination_url',
                )
            )
        elif not is_valid_url(destination_url):
            notification.add_error(
                NotificationErrorItem(
                    message='Destination URL must be a valid URL',
                    code=ErrorCode.BAD_REQUEST,
                    context=CONTEXT,
                    field='destination_url',
                )
            )
