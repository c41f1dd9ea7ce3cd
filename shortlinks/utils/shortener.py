"""Short link key generation utility

This module provides a helper function for generating short, random,
URL-safe keys used as the path segment of public short links.

Functions:
    generate_key(length=6):
        Generate a random Base62 key suitable for use as a URL slug.

Example:
    >>> from shortlinks.utils import generate_key
    >>> generate_key()
    'Xr4QsJ'
"""

import secrets
import string

from shortlinks.constants import Defaults


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_key(length: int = Defaults.KEY_LENGTH) -> str:
    """Generate a random short link key.

    Characters are drawn from the Base62 alphabet with the `secrets` CSPRNG,
    so keys are not predictable from previously issued keys.

    Args:
        length (int, optional):
            Number of characters in the resulting key.
            Defaults to 6 (62**6, roughly 5.7e10 possible keys).

    Returns:
        str: A random alphanumeric key.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is not positive.

    NOTE:
        - Uniqueness is not guaranteed here. The data store rejects
          duplicates on insert.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))
