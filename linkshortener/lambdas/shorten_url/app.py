import json
import logging
from typing import Any

from linkshortener.dao.redis import ShortURLRedisDAO
from linkshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError
from linkshortener.exceptions import ConfigurationError, InvalidURLError
from linkshortener.services import create_short_link, validate_target_url
from linkshortener.utils import load_config, base_url, app_prefix, json_response, guarantee_500_response
from linkshortener.lambdas.shorten_url.constants import (
    INVALID_JSON_BODY,
    INVALID_URL,
    LINK_CREATED,
    DUPLICATE_SHORTCODE,
    DATA_STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


def response_400(message: str, error_code: str | None = None) -> dict:
    body = {'message': message}
    if error_code:
        body['errorCode'] = error_code
    return json_response(400, body)


def response_500(message: str | None = None) -> dict:
    return json_response(500, {'message': message or 'Internal Server Error'})


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body
    - Step 2: Allocate identifier, generate shortcode and store mapping
    - Step 3: Respond to user with 201 created

    HTTP responses:
        201: Successful URL shortening
            short_code: newly generated shortcode
            short_url: newly generated short url
        400: Bad client request
            message: invalid JSON body, missing or malformed url
        500: Internal server error
            message: configuration or data store failure

    Args:
        event (Dict[str, Any]):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            AWS Lambda context object containing runtime information.

    Returns:
        Dict[str, Any]:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'body': '{"url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['short_url']
        'http://localhost:3000/3dE'
    """
    # 0- Get application's config
    try:
        app_config = load_config('shorten_url')
    except (ConfigurationError, KeyError):
        logger.exception('Failed to load AppConfig for shorten URL function. Responding with 500.')
        return response_500()
    else:
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 1- Extract original URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400('Invalid request body', error_code=INVALID_JSON_BODY)
    if not isinstance(request_body, dict):
        logger.info('JSON body is not an object. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400('Invalid request body', error_code=INVALID_JSON_BODY)
    try:
        target_url = validate_target_url(request_body.get('url'))
    except InvalidURLError as e:
        logger.info('Rejected URL. Responding with 400.', extra={'event': INVALID_URL, 'reason': str(e)})
        return response_400(str(e), error_code=INVALID_URL)

    # 2- Allocate identifier, generate shortcode and store mapping
    try:
        short_url_dao = ShortURLRedisDAO(**redis_config, prefix=app_prefix())
        shortcode, short_url = create_short_link(short_url_dao, target_url, base_url(event))
    except ShortURLAlreadyExistsError:
        logger.exception('Generated shortcode already exists. Responding with 500.', extra={'event': DUPLICATE_SHORTCODE})
        return response_500('Failed to save URL')
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_500('Failed to save URL')

    # 3- Return successful response to user
    logger.info('Short URL created. Responding with 201.', extra={'shortcode': shortcode, 'event': LINK_CREATED})
    return json_response(201, {'short_code': shortcode, 'short_url': short_url})
