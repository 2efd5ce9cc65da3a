"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO for
identifier allocation and create/read operations on ShortURLModel instances.

Responsibilities:
    - Allocate identifiers from the global counter (atomic INCR);
    - Insert and retrieve short URL records from Redis;
    - Refuse to overwrite an existing shortcode (SET NX);
    - Translate Redis failures into DAO exceptions.

Keyspace:
    <prefix>:counters:links       -> last allocated identifier
    <prefix>:links:<shortcode>    -> JSON {"id", "short_code", "original_url", "created_at"}

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from linkshortener.models import ShortURLModel
    >>> from linkshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="app:dev")

    >>> identifier = dao.allocate_identifier()
    >>> identifier
    12378

    >>> short_url = ShortURLModel(
    ...     target="https://example.com/page",
    ...     shortcode="3dE",
    ...     identifier=identifier,
    ... )
    >>> dao.insert(short_url)
    <ShortURLRedisDAO>

    >>> retrieved = dao.get("3dE")
    >>> retrieved.target
    'https://example.com/page'
    >>> retrieved.created_at
    <datetime>
"""

import json
import logging
import dataclasses
from datetime import datetime, UTC

from beartype import beartype

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.redis.mixins import RedisClientMixin
from linkshortener.dao.redis.helpers import handle_redis_connection_error
from linkshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError


logger = logging.getLogger(__name__)


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using Redis as a data store.
    Every operation is a single Redis command, so atomicity comes from Redis itself.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        allocate_identifier(**kwargs) -> int:
            INCR the global counter and return the new value.
            Raises DataStoreError on connectivity issues with Redis.

        insert(short_url: ShortURLModel, **kwargs) -> ShortURLRedisDAO:
            Store a short URL record unless the shortcode is already taken.
            Raises ShortURLAlreadyExistsError when a URL with the same shortcode exists.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> ShortURLModel | None:
            Retrieve a short URL record by shortcode, None if missing.
            Raises DataStoreError on connectivity issues with Redis.

        count(**kwargs) -> int:
            Retrieve the global counter without incrementing it.
            Raises DataStoreError on connectivity issues with Redis.

    Example:
        >>> dao = ShortURLRedisDAO(redis_host="localhost", prefix="shortener:test")
        >>> dao.insert(ShortURLModel(target="https://example.com", shortcode="1", identifier=1))
        <ShortURLRedisDAO>
        >>> dao.get("1").target
        'https://example.com'
    """

    @handle_redis_connection_error
    def allocate_identifier(self, **kwargs) -> int:
        """Allocate the next identifier from the global counter

        INCR is atomic in Redis, so concurrent callers always receive distinct
        values. A missing counter key is treated as 0, so the first identifier is 1.

        Returns:
            int:
                Newly allocated identifier.

        Example:
            >>> dao.allocate_identifier()
            124
            >>> dao.allocate_identifier()
            125
        """
        return int(self.redis.incr(self.keys.counter_key()))

    @handle_redis_connection_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLRedisDAO':
        """Insert a short URL record into Redis

        The record is written with SET NX, so the existence check and the write
        are one atomic command. An existing record is never overwritten.
        Records carry no TTL.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
                created_at is stamped with the current UTC time when missing.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
            DataStoreError:
                If a Redis connection issue occurs.

        Example:
            >>> short_url = ShortURLModel(
            ...     target='https://example.com',
            ...     shortcode='3dE',
            ...     identifier=12378,
            ... )
            >>> dao.insert(short_url)
            <ShortURLRedisDAO>
        """
        if short_url.created_at is None:
            short_url = dataclasses.replace(short_url, created_at=datetime.now(UTC))

        link_key = self.keys.link_key(short_url.shortcode)
        created = self.redis.set(link_key, json.dumps(short_url.to_dict()), nx=True)
        if not created:
            logger.error(
                'Refusing to overwrite existing short URL record.',
                extra={'shortcode': short_url.shortcode, 'identifier': short_url.identifier},
            )
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel | None:
        """Retrieve a stored short URL record by shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel | None:
                The retrieved ShortURLModel instance, None if no record exists.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur or the stored record is unreadable.

        Example:
            >>> dao.get('3dE')
            ShortURLModel(target='https://example.com', shortcode='3dE', identifier=12378, ...)
            >>> dao.get('nope') is None
            True
        """
        raw = self.redis.get(self.keys.link_key(shortcode))
        if raw is None:
            return None

        try:
            return ShortURLModel.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise DataStoreError(f"Corrupted short URL record for code '{shortcode}'.") from e

    @handle_redis_connection_error
    def count(self, **kwargs) -> int:
        """Retrieve global short URL counter without incrementing it

        Returns:
            int:
                The last allocated identifier, 0 if none was allocated yet.

        Example:
            >>> dao.count()
            123
        """
        value = self.redis.get(self.keys.counter_key())
        return 0 if value is None else int(value)
