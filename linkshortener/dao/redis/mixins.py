"""Shared Redis plumbing for Redis-backed DAOs

RedisClientMixin owns the client and the key schema of a DAO and refuses to
build a DAO whose Redis server does not answer PING, so handlers learn about
an unreachable store before they touch any link data.

Example:
    >>> class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    ...     pass
    ...
    >>> dao = ShortURLRedisDAO(redis_host='redis.internal', prefix='linkshortener:prod')
    >>> dao.keys.counter_key()
    'linkshortener:prod:counters:links'
"""

from typing import Optional

import redis

from linkshortener.dao.redis.redis_key_schema import RedisKeySchema
from linkshortener.dao.redis.helpers import describe_connection
from linkshortener.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Client setup and connectivity check for Redis-backed DAOs

    Attributes:
        redis (redis.Redis):
            Client used for every command issued by the DAO.
        keys (RedisKeySchema):
            Namespaced key builder for the DAO's prefix.
    """

    def __init__(
        self,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = 0,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        """Attach a Redis client to the DAO and PING it

        Connection parameters usually come straight from the AppConfig
        `redis` section, so port and db may arrive as strings.

        Args:
            redis_host, redis_port, redis_db, redis_username, redis_password:
                Connection parameters used when no client is injected.
            redis_decode_responses (Optional[bool]):
                Return str instead of bytes. Defaults to True.
            redis_client (Optional[redis.Redis]):
                Ready-made client; connection parameters are ignored when given.
            prefix (Optional[str]):
                Key namespace, e.g. 'linkshortener:dev'.

        Raises:
            DataStoreError:
                If Redis does not answer PING.
        """
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
        """PING Redis

        Every redis.exceptions.RedisError counts as an unhealthy store.

        Returns:
            bool: True when Redis answered, False on failure with raise_error=False.

        Raises:
            DataStoreError:
                On failure with raise_error=True.
        """
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            if not raise_error:
                return False
            raise DataStoreError(
                f"Can't connect to Redis at {describe_connection(self.redis)}. Check the provided configuration parameters."
            ) from e
        return True
