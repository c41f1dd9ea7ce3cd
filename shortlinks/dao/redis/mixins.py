"""Redis client setup shared by ShortLinkRedisDAO and UserRedisDAO

Each Lambda builds its DAOs from the 'redis' section of its AppConfig
document (see shortlinks.lambdas.dependencies.redis_kwargs), e.g.:

    {"redis": {"host": "redis.internal", "port": 6379, "db": 0}}

becomes RedisClientMixin(redis_host='redis.internal', redis_port=6379,
redis_db=0, prefix='shortlinks:dev'). Tests pass a mocked client instead.

Example:
    >>> dao = ShortLinkRedisDAO(redis_host='localhost', prefix='shortlinks:local')
    >>> dao.keys.link_key('abc123')
    'shortlinks:local:links:abc123'
"""

import redis

from shortlinks.dao.exceptions import DataStoreError
from shortlinks.dao.redis.helpers import CONNECTIVITY_ERRORS, redis_location
from shortlinks.dao.redis.redis_key_schema import RedisKeySchema


class RedisClientMixin:
    """Own the Redis client and key schema of a DAO

    The client is created from the redis_* arguments unless redis_client is
    given. Construction PINGs Redis, so a misconfigured Lambda fails on its
    first request instead of on its first write.

    Attributes:
        redis (redis.Redis):
            Client used by the DAO. Responses must be decoded to str.
        keys (RedisKeySchema):
            Key names under the app prefix ('<APP_NAME>:<APP_ENV>').

    Args:
        redis_host, redis_port, redis_db:
            Connection target. Port and db may be strings (AppConfig values).
        redis_username, redis_password:
            ACL credentials, if the server requires them.
        redis_decode_responses (bool):
            Kept configurable for parity with redis.Redis. The DAOs expect True.
        redis_client (redis.Redis | None):
            Pre-built client. Overrides every redis_* argument.
        prefix (str | None):
            Namespace for all keys written by the DAO.

    Raises:
        DataStoreError: If Redis doesn't answer the PING.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis; return False or raise DataStoreError when it's unreachable"""
        try:
            self.redis.ping()
        except CONNECTIVITY_ERRORS as e:
            if not raise_error:
                return False
            raise DataStoreError(
                f"Can't connect to Redis at {redis_location(self.redis)}. Check the provided configuration parameters."
            ) from e
        return True
