import re

from shortlinks.constants import Limits
from shortlinks.notification import ErrorCode, NotificationError, NotificationErrorItem


class PasswordStrengthSpecification:
    """Password strength rule applied to plaintext passwords before hashing

    A password satisfies the rule when it is between min_length and max_length
    characters long and contains an uppercase letter, a lowercase letter, a
    digit and a symbol.

    Example:
        >>> PasswordStrengthSpecification().is_satisfied_by('Str0ng!pass')
        True
        >>> PasswordStrengthSpecification().is_satisfied_by('weak')
        False
    """

    def __init__(
        self,
        min_length: int = Limits.PASSWORD_STRENGTH_MIN_LENGTH,
        max_length: int = Limits.PASSWORD_STRENGTH_MAX_LENGTH,
    ):
        self.min_length = min_length
        self.max_length = max_length

    def is_satisfied_by(self, candidate: str | None) -> bool:
        if not isinstance(candidate, str):
            return False
        return (
            self.min_length <= len(candidate) <= self.max_length
            and re.search(r'[A-Z]', candidate) is not None
            and re.search(r'[a-z]', candidate) is not None
            and re.search(r'[0-9]', candidate) is not None
            and re.search(r'[\W_]', candidate) is not None
        )

    def validate(self, candidate: str | None) -> None:
        """Raise a NotificationError if the candidate is too weak"""
        if not self.is_satisfied_by(candidate):
            raise NotificationError(
                [
                    NotificationErrorItem(
                        message=(
                            f'Password must be between {self.min_length} and {self.max_length} chars, '
                            'contain uppercase, lowercase, digits and symbols'
                        ),
                        code=ErrorCode.BAD_REQUEST,
                        context='User',
                        field='password',
                    )
                ]
            )
