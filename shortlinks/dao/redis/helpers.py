"""Connection error handling shared by the Redis DAOs

Functions:
    redis_location(client) -> str
        Describe where a client points to, as "<host>:<port>/<db>".
    handle_redis_connection_error(method) -> Callable
        Decorator: turn redis connection and timeout errors into DataStoreError.
"""

import functools
from collections.abc import Callable

import redis

from shortlinks.dao.exceptions import DataStoreError


__all__ = ['redis_location', 'handle_redis_connection_error']

CONNECTIVITY_ERRORS = (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)


def redis_location(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error(method: Callable) -> Callable:
    """Decorator for DAO methods which talk to Redis

    Only connectivity failures are translated. Command errors (e.g. WRONGTYPE)
    and DAO exceptions propagate unchanged.

    Example:
        >>> @handle_redis_connection_error
        ... def find_by_key(self, key):
        ...     return self.redis.hgetall(self.keys.link_key(key))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except CONNECTIVITY_ERRORS as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e

    return wrapper
