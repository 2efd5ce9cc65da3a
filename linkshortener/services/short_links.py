"""Short link operations shared by every transport

These functions hold the whole create/resolve flow and only talk to storage
through a ShortURLBaseDAO, so they can be called from Lambda handlers, scripts
or tests without any HTTP machinery.

Functions:
    validate_target_url(target_url) -> str
        Normalize and validate a URL before shortening it.

    create_short_link(dao, target_url, base_url) -> tuple[str, str]
        Allocate an identifier, encode it and persist the mapping.

    resolve_short_link(dao, shortcode) -> str | None
        Return the original URL for a shortcode.

    get_mapping(dao, shortcode) -> ShortURLModel | None
        Return the full stored mapping for a shortcode.

Example:
    >>> dao = ShortURLRedisDAO(prefix='linkshortener:local')
    >>> create_short_link(dao, 'https://example.com/a/b', 'https://sho.rt')
    ('3dE', 'https://sho.rt/3dE')
    >>> resolve_short_link(dao, '3dE')
    'https://example.com/a/b'
    >>> resolve_short_link(dao, 'missing') is None
    True
"""

import logging
import urllib.parse

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.exceptions import InvalidURLError
from linkshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({'http', 'https'})


def validate_target_url(target_url: object) -> str:
    """Return target_url stripped of surrounding whitespace

    Raises:
        InvalidURLError:
            If the URL is not a string, is empty, or is not an absolute http(s) URL.
    """
    if not isinstance(target_url, str):
        raise InvalidURLError('URL must be a string.')

    target_url = target_url.strip()
    if not target_url:
        raise InvalidURLError('URL is required.')

    components = urllib.parse.urlsplit(target_url)
    if components.scheme.lower() not in ALLOWED_SCHEMES or not components.netloc:
        raise InvalidURLError(f"URL must be an absolute http(s) URL (given value: '{target_url}').")
    return target_url


def create_short_link(dao: ShortURLBaseDAO, target_url: str, base_url: str) -> tuple[str, str]:
    """Shorten target_url and persist the mapping

    Validation happens before any identifier is allocated, so rejected input
    never consumes a counter value or leaves a record behind.

    Args:
        dao (ShortURLBaseDAO):
            Data access object for short URL records.
        target_url (str):
            Original URL to shorten.
        base_url (str):
            Public base URL the short link is served from.

    Returns:
        tuple[str, str]: (shortcode, fully qualified short URL)

    Raises:
        InvalidURLError:
            If target_url is empty or malformed.
        ShortURLAlreadyExistsError:
            If the generated shortcode is already stored (broken counter).
        DataStoreError:
            If the data store is unavailable.
    """
    target_url = validate_target_url(target_url)

    identifier = dao.allocate_identifier()
    shortcode = generate_shortcode(identifier)
    dao.insert(ShortURLModel(target=target_url, shortcode=shortcode, identifier=identifier))

    logger.debug('Stored short URL mapping.', extra={'shortcode': shortcode, 'identifier': identifier})
    return shortcode, f'{base_url.rstrip("/")}/{shortcode}'


def get_mapping(dao: ShortURLBaseDAO, shortcode: str) -> ShortURLModel | None:
    """Return the stored mapping for shortcode, None if it doesn't exist."""
    return dao.get(shortcode)


def resolve_short_link(dao: ShortURLBaseDAO, shortcode: str) -> str | None:
    """Return the original URL for shortcode, None if it doesn't exist."""
    short_url = get_mapping(dao, shortcode)
    return None if short_url is None else short_url.target
