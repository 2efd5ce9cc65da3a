"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. base_url() correct extraction
   - Ensures URLs include the stage when invoked via the default AWS domain.
   - Ensures URLs do NOT include stage information for custom domains.
   - Confirms a localhost fallback and a BASE_URL override.

2. json_response() builds API Gateway proxy responses

3. require_environment() decorator behavior

4. guarantee_500_response() behavior
"""

import json

import pytest

from linkshortener.exceptions import MissingEnvironmentVariableError
from linkshortener.utils.constants import BASE_URL_ENV
from linkshortener.utils.helpers import (
    base_url,
    json_response,
    require_environment,
    guarantee_500_response,
)


@pytest.fixture(autouse=True)
def _no_base_url_override(monkeypatch):
    monkeypatch.delenv(BASE_URL_ENV, raising=False)


# -------------------------------
# 1. base_url()
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Dev', 'https://abc123.execute-api.us-east-1.amazonaws.com/Dev'),
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Prod', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'),
    ],
)
def test_base_url_with_aws_domain(domain, stage, expected):
    """Ensure base_url() appends stage for default AWS execute-api domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('sho.rt', 'Prod', 'https://sho.rt'),
        ('links.example.com', 'Dev', 'https://links.example.com'),
    ],
)
def test_base_url_with_custom_domain(domain, stage, expected):
    """Ensure base_url() excludes stage for custom domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


@pytest.mark.parametrize('event', [{}, {'requestContext': {}}, {'requestContext': {'stage': 'Prod'}}])
def test_base_url_local_fallback(event):
    assert base_url(event) == 'http://localhost:3000'


def test_base_url_env_override(monkeypatch):
    monkeypatch.setenv(BASE_URL_ENV, 'https://sho.rt/')
    event = {'requestContext': {'domainName': 'abc123.execute-api.us-east-1.amazonaws.com', 'stage': 'Prod'}}
    assert base_url(event) == 'https://sho.rt'


# -------------------------------
# 2. json_response()
# -------------------------------


def test_json_response():
    response = json_response(201, {'short_code': '3dE'})

    assert response['statusCode'] == 201
    assert json.loads(response['body']) == {'short_code': '3dE'}
    assert response['headers']['Content-Type'] == 'application/json'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'
    assert response['headers']['Access-Control-Allow-Methods'] == 'GET,POST'


def test_json_response_extra_headers():
    response = json_response(301, {}, headers={'Location': 'https://example.com'})
    assert response['headers']['Location'] == 'https://example.com'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'


# -------------------------------
# 3. require_environment()
# -------------------------------


def test_require_environment_passes(monkeypatch):
    monkeypatch.setenv('FOO', 'x')
    monkeypatch.setenv('BAR', 'y')

    @require_environment('FOO', 'BAR')
    def decorated():
        return 'ok'

    assert decorated() == 'ok'


@pytest.mark.parametrize('bar_value', [None, ''])
def test_require_environment_missing(monkeypatch, bar_value):
    monkeypatch.setenv('FOO', 'x')
    if bar_value is None:
        monkeypatch.delenv('BAR', raising=False)
    else:
        monkeypatch.setenv('BAR', bar_value)

    @require_environment('FOO', 'BAR')
    def decorated():
        return 'ok'  # pragma: no cover

    with pytest.raises(MissingEnvironmentVariableError, match="Missing required environment variables: 'BAR'"):
        decorated()


def test_missing_environment_variable_error_is_key_error():
    assert issubclass(MissingEnvironmentVariableError, KeyError)


# -------------------------------
# 4. guarantee_500_response()
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """Faulty lambda handler returns 500 response when not running locally."""
    monkeypatch.setattr('linkshortener.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['error_code'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    monkeypatch.setattr('linkshortener.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through_results():
    @guarantee_500_response
    def handler(event, context):
        return {'statusCode': 200}

    assert handler({}, None) == {'statusCode': 200}
