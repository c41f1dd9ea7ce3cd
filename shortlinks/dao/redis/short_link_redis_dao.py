"""Data Access Object (DAO) implementation for managing short links in Redis

This module provides a Redis-based implementation of ShortLinkBaseDAO for CRUD-like
operations with ShortLinkModel instances.

Responsibilities:
    - Insert, update and soft-delete short links stored as Redis hashes;
    - Count clicks with atomic increments;
    - Maintain a per-owner index of link keys ordered by creation time;
    - Hide soft-deleted links from every read;
    - Raise appropriate DAO exceptions.

Classes:
    ShortLinkRedisDAO:
        DAO for storing and retrieving ShortLinkModel in a Redis datastore.

Example:
    >>> from shortlinks.models import ShortLinkModel
    >>> from shortlinks.dao.redis import ShortLinkRedisDAO

    >>> dao = ShortLinkRedisDAO(prefix="shortlinks:dev", base_url="https://sho.rt")

    >>> short_link = ShortLinkModel(
    ...     destination_url="https://example.com/page",
    ...     key="abc123",
    ... )
    >>> dao.create(short_link, owner_id="user-123")
    <ShortLinkRedisDAO>

    >>> retrieved = dao.find_by_key("abc123")
    >>> retrieved.destination_url
    'https://example.com/page'
    >>> retrieved.short_url
    'https://sho.rt/abc123'
"""

from datetime import datetime
from typing import Any

import redis
from beartype import beartype

from shortlinks.models import ShortLinkModel
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.redis.mixins import RedisClientMixin
from shortlinks.dao.redis.helpers import handle_redis_connection_error
from shortlinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short links

    This class implements the ShortLinkBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
        base_url (str | None):
            Public origin given to every ShortLinkModel read from Redis.

    NOTE: Optional fields are stored as empty strings, since Redis hashes can't
          hold null values.
    """

    def __init__(self, *args, base_url: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.base_url = base_url

    @handle_redis_connection_error
    @beartype
    def find_by_key(self, key: str, **kwargs) -> ShortLinkModel | None:
        """Retrieve an active short link by key

        Example:
            >>> dao.find_by_key('abc123')
            ShortLinkModel(destination_url='https://example.com', key='abc123', ...)
        """
        data = self.redis.hgetall(self.keys.link_key(key))
        link = self._deserialize(data)
        if link is None or link.is_deleted:
            return None
        return link

    @handle_redis_connection_error
    @beartype
    def find_by_key_and_owner(self, key: str, owner_id: str, **kwargs) -> ShortLinkModel | None:
        link = self.find_by_key(key)
        if link is None or link.owner_id != owner_id:
            return None
        return link

    @handle_redis_connection_error
    @beartype
    def find_by_owner(self, owner_id: str, **kwargs) -> list[ShortLinkModel]:
        """Retrieve the active links of an owner, newest first

        The owner index is read first, then all link hashes are fetched in a
        single pipeline round trip.
        """
        keys = self.redis.zrevrange(self.keys.owner_links_key(owner_id), 0, -1)
        if not keys:
            return []

        with self.redis.pipeline(transaction=False) as pipe:
            for key in keys:
                pipe.hgetall(self.keys.link_key(key))
            results = pipe.execute()

        links = []
        for data in results:
            link = self._deserialize(data)
            # A link might have been deleted between the two reads
            if link is not None and not link.is_deleted and link.owner_id == owner_id:
                links.append(link)
        return links

    @handle_redis_connection_error
    @beartype
    def create(self, short_link: ShortLinkModel, owner_id: str | None = None, **kwargs) -> 'ShortLinkRedisDAO':
        """Insert a short link into Redis

        The key is WATCHed while its existence is checked, and the link hash
        and owner index entry are written in one MULTI/EXEC transaction. Two
        concurrent creates of the same key can't both succeed, and a link is
        never listed without its data.

        Raises:
            ShortLinkAlreadyExistsError:
                If any link (active or soft-deleted) already uses the key.
            DataStoreError:
                If a Redis connection issue occurs during the transaction.
        """
        if owner_id is not None:
            short_link.owner_id = owner_id

        link_key = self.keys.link_key(short_link.key)
        already_exists = f"Short link with key '{short_link.key}' already exists."

        with self.redis.pipeline(transaction=True) as pipe:
            # EXEC is aborted if another client writes the key after WATCH
            pipe.watch(link_key)
            if pipe.exists(link_key):
                raise ShortLinkAlreadyExistsError(already_exists)

            pipe.multi()
            pipe.hset(link_key, mapping=self._serialize(short_link))
            if short_link.owner_id is not None:
                owner_links_key = self.keys.owner_links_key(short_link.owner_id)
                pipe.zadd(owner_links_key, {short_link.key: short_link.created_at.timestamp()})
            try:
                pipe.execute()
            except redis.exceptions.WatchError as e:
                raise ShortLinkAlreadyExistsError(already_exists) from e
        return self

    @handle_redis_connection_error
    @beartype
    def update(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Persist destination_url, click_count and updated_at of a short link

        Raises:
            ShortLinkNotFoundError:
                If the short link doesn't exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        link_key = self.keys.link_key(short_link.key)
        if not self.redis.exists(link_key):
            raise ShortLinkNotFoundError(f"Short link with key '{short_link.key}' not found.")

        # fmt: off
        self.redis.hset(link_key, mapping={
            'destination_url': short_link.destination_url,
            'click_count': short_link.click_count,
            'updated_at': _encode_datetime(short_link.updated_at),
        })
        # fmt: on
        return self

    @handle_redis_connection_error
    @beartype
    def record_click(self, short_link: ShortLinkModel, **kwargs) -> int:
        """Add one click to a stored short link

        Only click_count is written (HINCRBY), so a destination change
        committed since the link was read is never overwritten.

        Returns:
            int: The stored click count after the increment.

        Raises:
            ShortLinkNotFoundError:
                If the short link doesn't exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.record_click(dao.find_by_key('abc123'))
            4
        """
        link_key = self.keys.link_key(short_link.key)
        if not self.redis.exists(link_key):
            raise ShortLinkNotFoundError(f"Short link with key '{short_link.key}' not found.")
        return self.redis.hincrby(link_key, 'click_count', 1)

    @handle_redis_connection_error
    @beartype
    def delete(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Persist the soft deletion of a short link

        The hash is kept (so the key can't be reused) and the link is removed
        from its owner's index.

        Raises:
            ShortLinkNotFoundError:
                If the short link doesn't exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        link_key = self.keys.link_key(short_link.key)
        if not self.redis.exists(link_key):
            raise ShortLinkNotFoundError(f"Short link with key '{short_link.key}' not found.")

        with self.redis.pipeline(transaction=True) as pipe:
            # fmt: off
            pipe.hset(link_key, mapping={
                'deleted_at': _encode_datetime(short_link.deleted_at),
                'updated_at': _encode_datetime(short_link.updated_at),
            })
            # fmt: on
            if short_link.owner_id is not None:
                pipe.zrem(self.keys.owner_links_key(short_link.owner_id), short_link.key)
            pipe.execute()
        return self

    @staticmethod
    def _serialize(short_link: ShortLinkModel) -> dict[str, Any]:
        return {
            'id': short_link.id,
            'key': short_link.key,
            'destination_url': short_link.destination_url,
            'owner_id': short_link.owner_id or '',
            'click_count': short_link.click_count,
            'created_at': _encode_datetime(short_link.created_at),
            'updated_at': _encode_datetime(short_link.updated_at),
            'deleted_at': _encode_datetime(short_link.deleted_at),
        }

    def _deserialize(self, data: dict[str, str] | None) -> ShortLinkModel | None:
        if not data:
            return None
        return ShortLinkModel(
            id=data['id'],
            key=data['key'],
            destination_url=data['destination_url'],
            owner_id=data.get('owner_id') or None,
            click_count=int(data.get('click_count') or 0),
            created_at=_decode_datetime(data.get('created_at')),
            updated_at=_decode_datetime(data.get('updated_at')),
            deleted_at=_decode_datetime(data.get('deleted_at')),
            base_url=self.base_url,
        )


def _encode_datetime(value: datetime | None) -> str:
    return value.isoformat() if value is not None else ''


def _decode_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
