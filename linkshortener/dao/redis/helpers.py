import functools
import logging
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from linkshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def describe_connection(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_connection_error(method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis failures

    Connection and timeout errors mean Redis is unreachable. Any other
    redis.exceptions.RedisError is an unexpected driver failure; both are
    surfaced to the caller as DataStoreError.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on Redis failures.

    Example:
        >>> @handle_redis_connection_error
        ... def count(self):
        ...     return self.redis.get('count')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {describe_connection(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            logger.warning('Unexpected Redis error.', extra={'method': method.__name__, 'error': str(e)})
            raise DataStoreError(f'Redis error at {describe_connection(self.redis)}: {e}') from e

    return wrapper
