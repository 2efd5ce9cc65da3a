# Log event tags (also returned as errorCode where relevant)
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
