"""Credential providers: password hashing and access tokens

Classes:
    PasswordHasher:
        Interface: hash(plaintext) -> hash, compare(plaintext, hash) -> bool.
    BcryptPasswordHasher:
        PasswordHasher backed by bcrypt.
    TokenProvider:
        Interface: generate(claims) -> token, verify(token) -> subject id.
    JWTTokenProvider:
        TokenProvider issuing HS256 JSON Web Tokens via PyJWT.

Example:
    >>> hasher = BcryptPasswordHasher()
    >>> hashed = hasher.hash('Str0ng!pass')
    >>> hasher.compare('Str0ng!pass', hashed)
    True

    >>> tokens = JWTTokenProvider(secret='0123456789abcdef0123456789abcdef')
    >>> token = tokens.generate({'sub': 'user-123', 'name': 'Ada', 'email': 'ada@example.com'})
    >>> tokens.verify(token)
    'user-123'
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any

import bcrypt
import jwt

from shortlinks.constants import Defaults
from shortlinks.exceptions import InvalidTokenError
from shortlinks.utils.helpers import utcnow


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def compare(self, password: str, hashed: str) -> bool:
        pass


class BcryptPasswordHasher(PasswordHasher):
    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    def compare(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


class TokenProvider(ABC):
    @abstractmethod
    def generate(self, claims: dict[str, Any]) -> str:
        """Issue a signed access token carrying the given claims"""
        pass

    @abstractmethod
    def verify(self, token: str) -> str:
        """Return the token's subject id

        Raises:
            InvalidTokenError: If the token is malformed, expired or badly signed.
        """
        pass


class JWTTokenProvider(TokenProvider):
    """HS256 JSON Web Tokens

    Attributes:
        secret (str): HMAC signing key.
        expires_in (int): Token lifetime in seconds.
        algorithm (str): JWT signing algorithm.
    """

    ALGORITHM = 'HS256'

    def __init__(self, secret: str, expires_in: int = Defaults.TOKEN_TTL, algorithm: str = ALGORITHM):
        self.secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    def generate(self, claims: dict[str, Any]) -> str:
        now = utcnow()
        payload = {
            **claims,
            'iat': now,
            'exp': now + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['sub', 'exp']},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError('Access token has expired.') from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f'Access token is invalid: {e}') from e
        return payload['sub']
