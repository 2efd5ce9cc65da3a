import logging
from typing import Any

from linkshortener.dao.redis import ShortURLRedisDAO
from linkshortener.dao.exceptions import DataStoreError
from linkshortener.exceptions import ConfigurationError
from linkshortener.services import resolve_short_link
from linkshortener.utils import load_config, app_prefix, json_response, guarantee_500_response, is_valid_shortcode
from linkshortener.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
    DATA_STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


def response_500(message: str | None = None) -> dict:
    base = 'Internal Server Error'
    return json_response(500, {'message': base if not message else f'{base} ({message})'})


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return json_response(400, body)


def response_404() -> dict:
    return json_response(404, {'message': 'Short URL not found', 'errorCode': SHORT_URL_NOT_FOUND})


def response_301(*, location: str) -> dict:
    return json_response(301, {}, headers={'Location': location})


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve short URL record from database
    - Step 3: Redirect client to target URL

    HTTP responses:
        301: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: no link for this shortcode
        500: Internal server error
            message: server experienced an internal error

    Args:
        event (dict):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': '3dE'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        301
        >>> response['headers']['Location']
        'https://example.com/a/b'
    """
    # 0- Get application's config
    try:
        app_config = load_config('redirect_url')
    except (ConfigurationError, KeyError):
        logger.exception('Failed to load AppConfig for redirect URL function. Responding with 500.')
        return response_500()
    else:
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode is None:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    if not is_valid_shortcode(shortcode):
        # Nothing outside the Base62 alphabet was ever issued
        logger.info(
            'Malformed shortcode. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404()

    # 2- Resolve short URL record from database
    try:
        short_url_dao = ShortURLRedisDAO(**redis_config, prefix=app_prefix())
        target_url = resolve_short_link(short_url_dao, shortcode)
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_500('database error')

    if target_url is None:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404()

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 301.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_301(location=target_url)
