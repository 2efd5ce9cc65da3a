from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.redis import ShortURLRedisDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLRedisDAO',
]
