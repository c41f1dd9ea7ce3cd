"""Aggregated validation errors ("notifications")

A validator collects every violated rule into a single NotificationError and
raises it once at the end of the validation pass, so callers can report all
field-level failures in one response instead of only the first.

Classes:
    ErrorCode:
        Fixed enumeration of error kinds carried by notification entries.

    NotificationErrorItem:
        A single violated rule: message, code, and optional context and field.

    NotificationError:
        Mutable collector of NotificationErrorItem entries, raised as one error.

Example:
    >>> notification = NotificationError()
    >>> notification.add_error(
    ...     NotificationErrorItem(
    ...         message='Destination URL is required',
    ...         code=ErrorCode.BAD_REQUEST,
    ...         context='ShortLink',
    ...         field='destination_url',
    ...     )
    ... )
    >>> notification.has_errors()
    True
    >>> raise notification
    Traceback (most recent call last):
        ...
    shortlinks.notification.NotificationError: Destination URL is required
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from shortlinks.exceptions import ShortLinksError


__all__ = ['ErrorCode', 'NotificationErrorItem', 'NotificationError']


class ErrorCode(StrEnum):
    BAD_REQUEST = 'BAD_REQUEST'
    NOT_FOUND = 'NOT_FOUND'
    UNAUTHORIZED = 'UNAUTHORIZED'
    FORBIDDEN = 'FORBIDDEN'
    TOO_MANY_REQUESTS = 'TOO_MANY_REQUESTS'


# fmt: off
@dataclass(frozen=True)
class NotificationErrorItem:
    message: str                # Human readable description of the violated rule
    code: ErrorCode             # Error kind, used by transports to pick a status code
    context: str | None = None  # Entity or operation which reported the error
    field: str | None = None    # Offending input field, if any

    def to_dict(self) -> dict[str, Any]:
        return {
            'message': self.message,
            'code': str(self.code),
            'context': self.context,
            'field': self.field,
        }
# fmt: on


class NotificationError(ShortLinksError):
    """Collector of validation failures raised as a single error

    Entries are kept in insertion order and never deduplicated.

    Methods:
        add_error(error: NotificationErrorItem) -> None:
            Append an entry.

        has_errors() -> bool:
            True if at least one entry was added.

        get_errors() -> list[NotificationErrorItem]:
            Return the entries in insertion order.

        get_errors_by_context() -> dict[str, list[NotificationErrorItem]]:
            Group entries by context. Entries without a context are grouped
            under DEFAULT_CONTEXT.

        to_dict() -> dict:
            JSON-serializable representation {'errors': [...]}.
    """

    error_code = 'app:notification_error'
    DEFAULT_CONTEXT = 'default'

    def __init__(self, errors: Iterable[NotificationErrorItem] | None = None):
        super().__init__('Validation failed')
        self._errors: list[NotificationErrorItem] = list(errors or [])

    def add_error(self, error: NotificationErrorItem) -> None:
        self._errors.append(error)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_errors(self) -> list[NotificationErrorItem]:
        return list(self._errors)

    def get_errors_by_context(self) -> dict[str, list[NotificationErrorItem]]:
        grouped: dict[str, list[NotificationErrorItem]] = {}
        for error in self._errors:
            grouped.setdefault(error.context or self.DEFAULT_CONTEXT, []).append(error)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        return {'errors': [error.to_dict() for error in self._errors]}

    def __str__(self) -> str:
        if not self._errors:
            return 'Validation failed'
        return '; '.join(error.message for error in self._errors)
