"""Shared fixtures: a recording transport returning real ``requests`` responses."""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from harvest_api import HarvestClient


def make_response(status_code: int = 200, body: Any = None,
                  headers: Optional[Dict[str, str]] = None) -> requests.Response:
    """Build a ``requests.Response`` as the transport would return it."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = 'utf-8'
    response_headers = CaseInsensitiveDict(headers or {})

    if body is None:
        response._content = b''
    elif isinstance(body, (bytes, str)):
        response._content = body if isinstance(body, bytes) else body.encode('utf-8')
    else:
        response._content = json.dumps(body).encode('utf-8')
        response_headers.setdefault('Content-Type', 'application/json; charset=utf-8')

    response.headers = response_headers
    return response


class FakeTransport:
    """Transport recording every call and replaying queued responses."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.responses: List[requests.Response] = []

    def queue(self, status_code: int = 200, body: Any = None,
              headers: Optional[Dict[str, str]] = None) -> 'FakeTransport':
        self.responses.append(make_response(status_code, body, headers))
        return self

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]

    def last_json(self) -> Any:
        body = self.last_call['body']
        return None if body is None else json.loads(body.decode('utf-8'))

    def request(self, method, path, headers, body=None):
        self.calls.append({'method': method, 'path': path, 'headers': dict(headers), 'body': body})
        if self.responses:
            return self.responses.pop(0)
        return make_response(200, {})

    def get(self, path, headers):
        return self.request('GET', path, headers)

    def head(self, path, headers):
        return self.request('HEAD', path, headers)

    def post(self, path, headers, body=None):
        return self.request('POST', path, headers, body)

    def patch(self, path, headers, body=None):
        return self.request('PATCH', path, headers, body)

    def put(self, path, headers, body=None):
        return self.request('PUT', path, headers, body)

    def delete(self, path, headers, body=None):
        return self.request('DELETE', path, headers, body)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return HarvestClient(account_id='123456', access_token='secret-token', transport=transport)


@pytest.fixture
def harvest_env(monkeypatch):
    """Isolate the client from any HARVEST_* variables of the host."""
    for name in ('HARVEST_ACCOUNT_ID', 'HARVEST_ACCESS_TOKEN', 'HARVEST_API_URL',
                 'HARVEST_API_TIMEOUT', 'HARVEST_USER_AGENT', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr('harvest_api.config.load_dotenv', lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def response_factory():
    return make_response
