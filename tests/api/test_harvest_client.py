"""Tests for the Harvest client: registry, authentication and configuration."""

import pytest

from harvest_api import HarvestClient
from harvest_api.api import (
    ENDPOINTS,
    ClientsAPI,
    CurrentCompanyAPI,
    CurrentUserAPI,
    HarvestAuthentication,
    InvalidArgumentError,
    MissingArgumentError,
    TimeEntriesAPI,
    UnknownEndpointError
)
from harvest_api.api.transport import RequestsTransport
from harvest_api.config import ClientConfig


class TestEndpointRegistry:
    @pytest.mark.parametrize('name, expected', [
        ('clients', ClientsAPI),
        ('me', CurrentUserAPI),
        ('current_user', CurrentUserAPI),
        ('currentUser', CurrentUserAPI),
        ('company', CurrentCompanyAPI),
        ('currentCompany', CurrentCompanyAPI),
        ('timeEntries', TimeEntriesAPI),
        ('time_entries', TimeEntriesAPI),
    ])
    def test_known_names(self, client, name, expected):
        endpoint = client.api(name)
        assert isinstance(endpoint, expected)
        assert endpoint.client is client

    def test_unknown_name(self, client):
        with pytest.raises(UnknownEndpointError) as exc_info:
            client.api('widgets')

        assert isinstance(exc_info.value, InvalidArgumentError)
        assert exc_info.value.message == 'Undefined api instance called: "widgets"'

    def test_every_registered_name_builds(self, client):
        for name in ENDPOINTS:
            assert client.api(name).client is client

    def test_accessors_return_fresh_instances(self, client):
        first = client.clients().set_page(3)
        second = client.clients()

        assert first is not second
        assert second.get_page() is None


class TestAuthentication:
    def test_credentials_sent_with_every_request(self, client, transport):
        client.clients().show(1)

        headers = transport.last_call['headers']
        assert headers['Harvest-Account-Id'] == '123456'
        assert headers['Authorization'] == 'Bearer secret-token'
        assert headers['User-Agent'] == 'harvest-api-python-client'

    def test_authenticate_replaces_credentials(self, client, transport):
        client.authenticate('999', 'new-token')
        client.clients().show(1)

        headers = transport.last_call['headers']
        assert headers['Harvest-Account-Id'] == '999'
        assert headers['Authorization'] == 'Bearer new-token'
        assert client.authentication == HarvestAuthentication('999', 'new-token')

    def test_unauthenticated_client_sends_no_credentials(self, transport):
        HarvestClient(transport=transport).clients().show(1)

        assert 'Authorization' not in transport.last_call['headers']
        assert 'Harvest-Account-Id' not in transport.last_call['headers']


class TestConvenienceRequests:
    def test_get_returns_content(self, client, transport):
        transport.queue(200, {'id': 1})
        assert client.get('/clients/1', {'is_active': True}) == {'id': 1}
        assert transport.last_call['path'] == '/clients/1?is_active=true'

    def test_write_methods(self, client, transport):
        client.post('/clients', {'name': 'ACME'})
        assert transport.last_call['method'] == 'POST'
        client.put('/clients/1', {'name': 'ACME'})
        assert transport.last_call['method'] == 'PUT'
        client.patch('/clients/1', {'name': 'ACME'})
        assert transport.last_call['method'] == 'PATCH'
        client.delete('/clients/1')
        assert transport.last_call['method'] == 'DELETE'
        assert transport.last_call['body'] is None

    def test_head_returns_response(self, client, transport):
        transport.queue(200, None, {'X-Total-Count': '4'})
        response = client.head('/clients')
        assert response.headers['X-Total-Count'] == '4'


class TestConfiguration:
    def test_default_transport_uses_config(self):
        config = ClientConfig(base_url='https://example.test/v2/', timeout=5)
        client = HarvestClient('1', 'token', config=config)

        assert isinstance(client.transport, RequestsTransport)
        assert client.transport.base_url == 'https://example.test/v2'
        assert client.transport.timeout == 5

    def test_from_env(self, harvest_env, transport):
        harvest_env.setenv('HARVEST_ACCOUNT_ID', '42')
        harvest_env.setenv('HARVEST_ACCESS_TOKEN', 'env-token')
        harvest_env.setenv('HARVEST_USER_AGENT', 'env-agent')

        client = HarvestClient.from_env(transport=transport)
        client.current_user().show()

        headers = transport.last_call['headers']
        assert headers['Harvest-Account-Id'] == '42'
        assert headers['Authorization'] == 'Bearer env-token'
        assert headers['User-Agent'] == 'env-agent'

    def test_from_env_overrides(self, harvest_env, transport):
        harvest_env.setenv('HARVEST_ACCOUNT_ID', '42')
        harvest_env.setenv('HARVEST_ACCESS_TOKEN', 'env-token')

        client = HarvestClient.from_env(transport=transport, account_id='7', user_agent='override')

        assert client.authentication.account_id == '7'
        assert client.config.user_agent == 'override'

    def test_from_env_missing_account(self, harvest_env):
        harvest_env.setenv('HARVEST_ACCESS_TOKEN', 'env-token')

        with pytest.raises(MissingArgumentError) as exc_info:
            HarvestClient.from_env()
        assert exc_info.value.field == 'HARVEST_ACCOUNT_ID'

    def test_from_env_missing_token(self, harvest_env):
        harvest_env.setenv('HARVEST_ACCOUNT_ID', '42')

        with pytest.raises(MissingArgumentError) as exc_info:
            HarvestClient.from_env()
        assert exc_info.value.field == 'HARVEST_ACCESS_TOKEN'
