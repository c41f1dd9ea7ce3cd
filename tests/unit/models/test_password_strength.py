"""Unit tests for PasswordStrengthSpecification."""

import pytest

from shortlinks.models import PasswordStrengthSpecification
from shortlinks.notification import ErrorCode, NotificationError


@pytest.mark.parametrize('password', ['Str0ng!pass', 'Aa1!aaaa', 'Aa1_' + 'a' * 26])
def test_strong_passwords(password):
    specification = PasswordStrengthSpecification()

    assert specification.is_satisfied_by(password)
    specification.validate(password)


@pytest.mark.parametrize(
    'password',
    [
        'Aa1!aaa',  # too short
        'Aa1!' + 'a' * 27,  # too long
        'str0ng!pass',  # no uppercase
        'STR0NG!PASS',  # no lowercase
        'Strong!pass',  # no digit
        'Str0ngpass',  # no symbol
        None,
        12345678,
    ],
)
def test_weak_passwords(password):
    specification = PasswordStrengthSpecification()

    assert not specification.is_satisfied_by(password)
    with pytest.raises(NotificationError) as exc_info:
        specification.validate(password)

    [error] = exc_info.value.get_errors()
    assert error.code == ErrorCode.BAD_REQUEST
    assert error.field == 'password'
    assert error.message == 'Password must be between 8 and 30 chars, contain uppercase, lowercase, digits and symbols'


def test_custom_bounds():
    specification = PasswordStrengthSpecification(min_length=4, max_length=6)

    assert specification.is_satisfied_by('Aa1!')
    assert not specification.is_satisfied_by('Aa1!aaa')
