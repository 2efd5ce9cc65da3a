"""Check that a Redis 8.2 is running on your local machine

Connection details:
- redis: 127.0.0.1:6379
- redisinsight: 127.0.0.1:5540

Expect to see the current link counter printed in your local console, e.g.
"Redis OK (linkshortener:local:counters:links = 0)".
"""

from linkshortener.dao.redis import ShortURLRedisDAO
from linkshortener.utils import app_prefix


def main():
    # Raises DataStoreError when Redis is unreachable
    dao = ShortURLRedisDAO(redis_host='localhost', redis_port=6379, redis_db=0, prefix=app_prefix())
    print(f'Redis OK ({dao.keys.counter_key()} = {dao.count()})')


if __name__ == '__main__':
    main()
