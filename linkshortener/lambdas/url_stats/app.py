import logging
from typing import Any

from linkshortener.dao.redis import ShortURLRedisDAO
from linkshortener.dao.exceptions import DataStoreError
from linkshortener.exceptions import ConfigurationError
from linkshortener.services import get_mapping
from linkshortener.utils import load_config, app_prefix, json_response, guarantee_500_response, is_valid_shortcode
from linkshortener.lambdas.url_stats.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    STATS_SUCCESS,
    DATA_STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle API Gateway requests for the stored mapping of a short URL

    HTTP responses:
        200: Mapping found
            id, short_code, original_url, created_at
        400: Missing shortcode in path parameters
        404: No link for this shortcode
        500: Configuration or data store failure
    """
    try:
        app_config = load_config('url_stats')
    except (ConfigurationError, KeyError):
        logger.exception('Failed to load AppConfig for URL stats function. Responding with 500.')
        return json_response(500, {'message': 'Internal Server Error'})
    else:
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode is None:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return json_response(400, {'message': "Bad Request (missing 'shortcode' in path)", 'errorCode': MISSING_SHORTCODE})

    short_url = None
    if is_valid_shortcode(shortcode):
        try:
            short_url_dao = ShortURLRedisDAO(**redis_config, prefix=app_prefix())
            short_url = get_mapping(short_url_dao, shortcode)
        except DataStoreError:
            logger.exception('Data store unavailable. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
            return json_response(500, {'message': 'Database error'})

    if short_url is None:
        logger.info('Short URL record not found. Responding with 404.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return json_response(404, {'message': 'Short URL not found', 'errorCode': SHORT_URL_NOT_FOUND})

    logger.info('Returning short URL mapping. Responding with 200.', extra={'shortcode': shortcode, 'event': STATS_SUCCESS})
    return json_response(200, short_url.to_dict())
