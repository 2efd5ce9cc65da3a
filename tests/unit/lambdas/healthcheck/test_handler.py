import json

from linkshortener.lambdas.healthcheck import app


def test_lambda_handler() -> None:
    response = app.lambda_handler({}, None)

    assert response['statusCode'] == 200
    assert json.loads(response['body']) == {'status': 'ok'}
    assert response['headers']['Access-Control-Allow-Origin'] == '*'
