from linkshortener.utils.config import app_env, app_name, app_prefix, load_config
from linkshortener.utils.helpers import base_url, json_response, require_environment, guarantee_500_response
from linkshortener.utils.shortener import generate_shortcode, decode_shortcode, is_valid_shortcode
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'decode_shortcode',
    'is_valid_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'json_response',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
