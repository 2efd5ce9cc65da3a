import json
from typing import cast
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from linkshortener.types import LambdaEvent, LambdaContext, LambdaConfiguration
from linkshortener.lambdas.redirect_url import app
from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.exceptions import DataStoreError


def _event(path_parameters: dict | None) -> LambdaEvent:
    return cast(LambdaEvent, {
        'resource': '/{shortcode}',
        'pathParameters': path_parameters,
        'httpMethod': 'GET',
        'path': '/3dE',
        'requestContext': {'domainName': 'testhost:1000', 'stage': 'test'},
    })


@pytest.fixture
def successful_event_301() -> LambdaEvent:
    return _event({'shortcode': '3dE'})


class TestRedirectUrlHandler:

    @pytest.fixture
    def context(self) -> LambdaContext:
        return cast(LambdaContext, {'function_name': 'redirect_url'})

    @pytest.fixture
    def config(self) -> LambdaConfiguration:
        return cast(LambdaConfiguration, {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}})

    @pytest.fixture
    def short_url_dao(self) -> ShortURLBaseDAO:
        dao = MagicMock(spec=ShortURLBaseDAO)
        dao.get.return_value = ShortURLModel(
            target='https://example.com/blog/chuck-norris-is-awesome',
            shortcode='3dE',
            identifier=12378,
        )
        return dao

    @pytest.fixture(autouse=True)
    def setup(
        self,
        monkeypatch: MonkeyPatch,
        context: LambdaContext,
        config: LambdaConfiguration,
        short_url_dao: ShortURLBaseDAO,
    ) -> None:
        # Patch Lambda dependencies
        monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)
        monkeypatch.setattr(app, 'ShortURLRedisDAO', lambda *a, **kw: short_url_dao)
        monkeypatch.setenv('APP_ENV', 'test')
        monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)

        self.context = context
        self.short_url_dao = short_url_dao

    def test_lambda_handler(self, successful_event_301: LambdaEvent) -> None:
        response = app.lambda_handler(successful_event_301, self.context)
        headers = response['headers']
        body = json.loads(response['body'])

        # Assert Lambda successfully redirects user to target URL
        assert response['statusCode'] == 301
        assert body == {}
        assert headers['Location'] == 'https://example.com/blog/chuck-norris-is-awesome'
        self.short_url_dao.get.assert_called_once_with('3dE')

    @pytest.mark.parametrize('path_parameters', [None, {}, {'invalid': 'path'}])
    def test_lambda_handler_with_invalid_path_parameters(self, path_parameters: dict | None) -> None:
        response = app.lambda_handler(_event(path_parameters), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['message'] == "Bad Request (missing 'shortcode' in path)"
        assert body['errorCode'] == 'MISSING_SHORTCODE'
        self.short_url_dao.get.assert_not_called()

    def test_lambda_handler_with_unknown_shortcode(self, successful_event_301: LambdaEvent) -> None:
        self.short_url_dao.get.return_value = None

        response = app.lambda_handler(successful_event_301, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 404
        assert body == {'message': 'Short URL not found', 'errorCode': 'SHORT_URL_NOT_FOUND'}
        assert 'Location' not in response['headers']

    @pytest.mark.parametrize('shortcode', ['', 'abc-123', 'a' * 21])
    def test_lambda_handler_with_malformed_shortcode(self, shortcode: str) -> None:
        response = app.lambda_handler(_event({'shortcode': shortcode}), self.context)

        assert response['statusCode'] == 404
        self.short_url_dao.get.assert_not_called()

    def test_lambda_handler_when_data_store_is_unavailable(self, successful_event_301: LambdaEvent) -> None:
        self.short_url_dao.get.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")

        response = app.lambda_handler(successful_event_301, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 500
        assert body['message'] == 'Internal Server Error (database error)'

    def test_lambda_handler_with_missing_configuration(self, monkeypatch: MonkeyPatch, successful_event_301: LambdaEvent) -> None:
        def missing(*args, **kwargs):
            raise KeyError('redirect_url')

        monkeypatch.setattr(app, 'load_config', missing)

        response = app.lambda_handler(successful_event_301, self.context)

        assert response['statusCode'] == 500
        assert json.loads(response['body']) == {'message': 'Internal Server Error'}
