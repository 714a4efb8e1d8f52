"""Unit tests for request composition and dispatch."""

import json
from datetime import date

import pytest

from harvest_api.api.authentication import HarvestAuthentication
from harvest_api.api.errors import (
    AuthenticationError,
    HarvestRuntimeError,
    NotFoundError,
    RateLimitExceededError
)
from harvest_api.api.pagination import PaginationState
from harvest_api.api.request_handler import RequestComposer, RequestHandler, RequestSpec
from harvest_api.config import ClientConfig


class TestRequestComposer:
    def test_get_appends_pagination_after_caller_params(self):
        composer = RequestComposer()
        pagination = PaginationState().set_page(3).set_per_page(25)

        spec = composer.build_get('/clients', {'is_active': True}, pagination=pagination)

        assert list(spec.query_params.items()) == [
            ('is_active', 'true'), ('page', '3'), ('per_page', '25')
        ]
        assert spec.url == '/clients?is_active=true&page=3&per_page=25'
        assert spec.json_payload is None

    def test_get_caller_page_wins(self):
        composer = RequestComposer()
        pagination = PaginationState().set_page(3).set_per_page(25)

        spec = composer.build_get('/clients', {'page': 7}, pagination=pagination)

        assert spec.query_params == {'page': '7', 'per_page': '25'}

    def test_get_without_pagination_has_no_query(self):
        spec = RequestComposer().build_get('/users/me')
        assert spec.url == '/users/me'

    def test_default_headers_from_config(self):
        config = ClientConfig(user_agent='my-app', default_headers={'X-Extra': '1'})
        spec = RequestComposer(config).build_get('/clients', headers={'Accept': 'application/json'})

        assert spec.headers == {'User-Agent': 'my-app', 'X-Extra': '1', 'Accept': 'application/json'}

    def test_head_keeps_query(self):
        spec = RequestComposer().build_head('/clients', {'is_active': 0})
        assert spec.method == 'HEAD'
        assert spec.url == '/clients?is_active=false'

    def test_write_sets_json_content_type(self):
        spec = RequestComposer().build_write('post', '/clients', {'name': 'ACME'})

        assert spec.method == 'POST'
        assert spec.headers['Content-Type'] == 'application/json'
        assert json.loads(spec.encode_body()) == {'name': 'ACME'}

    def test_write_caller_content_type_wins(self):
        spec = RequestComposer().build_write('PATCH', '/clients/1', {'name': 'x'},
                                             headers={'content-type': 'application/vnd+json'})

        assert 'Content-Type' not in spec.headers
        assert spec.headers['content-type'] == 'application/vnd+json'

    @pytest.mark.parametrize('params', [None, {}])
    def test_write_without_params_has_no_body(self, params):
        spec = RequestComposer().build_write('DELETE', '/clients/1', params)
        assert spec.json_payload is None
        assert spec.encode_body() is None

    def test_write_rejects_read_methods(self):
        with pytest.raises(ValueError):
            RequestComposer().build_write('GET', '/clients')

    def test_dates_in_body_are_encoded(self):
        spec = RequestComposer().build_write('POST', '/expenses', {'spent_date': date(2017, 6, 26)})
        assert json.loads(spec.encode_body()) == {'spent_date': '2017-06-26'}

    def test_unencodable_body_raises_runtime_error(self):
        spec = RequestSpec(method='POST', path='/clients', json_payload={'name': object()})
        with pytest.raises(HarvestRuntimeError, match='Unable to encode request body'):
            spec.encode_body()


class TestRequestHandler:
    def test_send_adds_correlation_id_and_credentials(self, transport):
        handler = RequestHandler(transport, HarvestAuthentication('42', 'tok'))

        handler.send(RequestComposer().build_get('/clients'))

        headers = transport.last_call['headers']
        assert headers['Harvest-Account-Id'] == '42'
        assert headers['Authorization'] == 'Bearer tok'
        assert headers['X-Correlation-ID']
        assert transport.last_call['method'] == 'GET'
        assert transport.last_call['path'] == '/clients'

    def test_authentication_called_once_per_request(self, transport):
        calls = []

        def authenticate(headers):
            calls.append(dict(headers))
            return dict(headers, Authorization='Bearer counted')

        handler = RequestHandler(transport, authenticate)
        handler.send(RequestComposer().build_get('/a'))
        handler.send(RequestComposer().build_get('/b'))

        assert len(calls) == 2
        assert calls[0]['X-Correlation-ID'] != calls[1]['X-Correlation-ID']

    def test_send_dispatches_encoded_body(self, transport):
        handler = RequestHandler(transport)
        handler.send(RequestComposer().build_write('PUT', '/roles/1', {'name': 'Dev'}))

        assert transport.last_call['method'] == 'PUT'
        assert transport.last_json() == {'name': 'Dev'}

    def test_execute_returns_response_and_content(self, transport):
        transport.queue(200, {'id': 1})
        response, content = RequestHandler(transport).execute(RequestComposer().build_get('/clients/1'))

        assert response.status_code == 200
        assert content == {'id': 1}

    def test_execute_returns_raw_text_for_non_json(self, transport):
        transport.queue(200, 'plain body', {'Content-Type': 'text/plain'})
        _, content = RequestHandler(transport).execute(RequestComposer().build_get('/x'))
        assert content == 'plain body'

    def test_execute_raises_classified_error(self, transport):
        transport.queue(401, {'error_description': 'expired token'})

        with pytest.raises(AuthenticationError) as exc_info:
            RequestHandler(transport).execute(RequestComposer().build_get('/clients'))

        assert exc_info.value.message == 'expired token'
        assert exc_info.value.status_code == 401

    def test_execute_rate_limit_exposes_retry_after(self, transport):
        transport.queue(429, {'message': 'ignored'}, {'Retry-After': '15'})

        with pytest.raises(RateLimitExceededError) as exc_info:
            RequestHandler(transport).execute(RequestComposer().build_get('/clients'))

        assert exc_info.value.retry_after == 15
        assert exc_info.value.is_retryable

    def test_execute_not_found(self, transport):
        transport.queue(404, 'Not Found', {'Content-Type': 'text/html'})
        with pytest.raises(NotFoundError):
            RequestHandler(transport).execute(RequestComposer().build_get('/clients/9'))
