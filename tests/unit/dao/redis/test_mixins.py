"""Unit tests for Redis-based mixins.

Test coverage includes:
    1. Initialization and configuration
       - Ensures correct initialization with or without a Redis client.
       - Confirms unreachable Redis raises DataStoreError.
    2. Healthcheck behavior
       - Healthcheck pings Redis.
       - Missed pong from Redis raises error, or returns False when asked not to raise.
"""

from unittest.mock import MagicMock, patch

import pytest
import redis

from linkshortener.dao.exceptions import DataStoreError
from linkshortener.dao.redis.mixins import RedisClientMixin


# -------------------------------
# 1. Initialization and configuration
# -------------------------------


def test_initialize_without_redis_client():
    """Ensure DAO creates a Redis client when none is provided."""
    redis_config = {
        'redis_host': 'redis',
        'redis_port': '6379',
        'redis_db': '0',
        'redis_decode_responses': True,
        'redis_username': 'default',
        'redis_password': 'password',
    }

    with patch('linkshortener.dao.redis.mixins.redis.Redis', autospec=True) as redis_mock:
        redis_mock_instance = redis_mock.return_value
        mixin = RedisClientMixin(**redis_config, prefix='testapp:test')

        redis_mock.assert_called_once_with(host='redis', port=6379, db=0, decode_responses=True, username='default', password='password')
        assert mixin.redis is redis_mock_instance
        assert mixin.keys.prefix == 'testapp:test'


def test_initialize_with_redis_client(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
    assert mixin.redis is redis_client


def test_initialize_with_unreachable_redis(redis_client):
    """Ensure unreachable Redis raises DataStoreError during initialization."""
    redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection error')
    exception_message = "Can't connect to Redis at 203.0.113.1:18000/5. Check the provided configuration parameters."

    with pytest.raises(DataStoreError, match=exception_message):
        RedisClientMixin(redis_client=redis_client, prefix='testapp:test')


# -------------------------------
# 2. Healthcheck behavior
# -------------------------------


def test_healthcheck_passes(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
    redis_client.ping.assert_called_once()  # initialization performs a healthcheck

    assert mixin._healthcheck()
    assert redis_client.ping.call_count == 2


def test_healthcheck_without_raising(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
    redis_client.ping.side_effect = redis.exceptions.TimeoutError('Timeout')

    assert mixin._healthcheck(raise_error=False) is False


def test_healthcheck_fails():
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(connection_kwargs={'host': 'redis', 'port': 6379, 'db': 0})
    client.ping.side_effect = redis.exceptions.ConnectionError('Connection error')

    with pytest.raises(DataStoreError):
        RedisClientMixin(redis_client=client, prefix='testapp:test')


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.AuthenticationError('invalid username-password pair'),
        redis.exceptions.ResponseError('NOPERM this user has no permissions'),
    ],
)
def test_initialize_with_failing_ping(redis_client, error):
    """Ensure any Redis error raised by PING surfaces as DataStoreError."""
    redis_client.ping.side_effect = error

    with pytest.raises(DataStoreError, match="Can't connect to Redis at 203.0.113.1:18000/5.") as exc_info:
        RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
    assert exc_info.value.__cause__ is error


def test_healthcheck_without_raising_on_response_error(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
    redis_client.ping.side_effect = redis.exceptions.ResponseError('LOADING Redis is loading the dataset in memory')

    assert mixin._healthcheck(raise_error=False) is False
