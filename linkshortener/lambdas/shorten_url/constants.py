# Log event tags (also returned as errorCode where relevant)
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
INVALID_URL = 'INVALID_URL'
LINK_CREATED = 'LINK_CREATED'
DUPLICATE_SHORTCODE = 'DUPLICATE_SHORTCODE'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
