from linkshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from linkshortener.utils import json_response


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Liveness probe: responds 200 without touching the data store."""
    return json_response(200, {'status': 'ok'})
