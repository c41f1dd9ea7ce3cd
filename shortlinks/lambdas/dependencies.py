"""Shared wiring of Lambda dependencies

Handlers build their use cases once per cold start (memoized with
functools.cache in each handler module) from the pieces below, then pass
them down explicitly.
"""

from typing import Any

from shortlinks.auth import AuthorizationPolicy, BcryptPasswordHasher, JWTTokenProvider
from shortlinks.types import LambdaConfiguration
from shortlinks.utils import jwt_secret, jwt_expires_in


def redis_kwargs(app_config: LambdaConfiguration) -> dict[str, Any]:
    """Turn the lambda's 'redis' config section into RedisClientMixin kwargs

    Example:
        >>> redis_kwargs({'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}})
        {'redis_host': 'redis.test', 'redis_port': 6379, 'redis_db': 0}
    """
    return {f'redis_{k}': v for k, v in app_config['redis'].items()}


def token_provider() -> JWTTokenProvider:
    return JWTTokenProvider(secret=jwt_secret(), expires_in=jwt_expires_in())


def authorization_policy() -> AuthorizationPolicy:
    return AuthorizationPolicy(token_provider())


def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()
