from shortlinks.auth.providers import PasswordHasher, BcryptPasswordHasher, TokenProvider, JWTTokenProvider
from shortlinks.auth.policy import AuthMode, AuthorizationPolicy


__all__ = [
    'PasswordHasher',
    'BcryptPasswordHasher',
    'TokenProvider',
    'JWTTokenProvider',
    'AuthMode',
    'AuthorizationPolicy',
]
