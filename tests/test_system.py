"""Liveness, CORS, security headers and JSON error handling."""

from iedc import create_app
from iedc.config import TestConfig


class CustomPingConfig(TestConfig):
    PING_MESSAGE = 'hello from iedc'
    CORS_ORIGINS = 'https://portal.kptciedc.edu'


class TestPing:

    def test_default_message(self, client):
        response = client.get('/api/ping')
        assert response.status_code == 200
        assert response.get_json() == {'message': 'ping'}

    def test_configured_message(self):
        client = create_app(CustomPingConfig).test_client()
        assert client.get('/api/ping').get_json() == {'message': 'hello from iedc'}


class TestHeaders:

    def test_cors_on_every_response(self, client):
        response = client.get('/api/users', headers={'Origin': 'http://localhost:8080'})
        assert response.headers['Access-Control-Allow-Origin'] == '*'

    def test_preflight(self, client):
        response = client.options('/api/events/1', headers={
            'Origin': 'http://localhost:8080',
            'Access-Control-Request-Method': 'DELETE',
        })
        assert response.status_code == 200
        assert response.headers['Access-Control-Allow-Origin'] == '*'
        assert 'DELETE' in response.headers['Access-Control-Allow-Methods']

    def test_preflight_reflects_requested_headers(self, client):
        """Custom request headers and PATCH pass the browser preflight."""
        response = client.options('/api/users', headers={
            'Origin': 'http://localhost:8080',
            'Access-Control-Request-Method': 'PATCH',
            'Access-Control-Request-Headers': 'Authorization, X-Requested-With',
        })
        assert response.status_code == 200
        allowed_headers = response.headers['Access-Control-Allow-Headers'].lower()
        assert 'x-requested-with' in allowed_headers
        assert 'authorization' in allowed_headers
        assert 'PATCH' in response.headers['Access-Control-Allow-Methods']

    def test_restricted_origins(self):
        client = create_app(CustomPingConfig).test_client()

        allowed = client.get('/api/ping', headers={'Origin': 'https://portal.kptciedc.edu'})
        assert allowed.headers['Access-Control-Allow-Origin'] == 'https://portal.kptciedc.edu'

        denied = client.get('/api/ping', headers={'Origin': 'https://elsewhere.kptciedc.edu'})
        assert 'Access-Control-Allow-Origin' not in denied.headers

    def test_security_headers(self, client):
        response = client.get('/api/ping')
        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert response.headers['X-Frame-Options'] == 'DENY'


class TestErrorHandlers:

    def test_unknown_route(self, client):
        response = client.get('/api/nothing-here', headers={'Origin': 'http://localhost:8080'})
        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'error': 'Not found'}
        assert response.headers['Access-Control-Allow-Origin'] == '*'

    def test_method_not_allowed(self, client):
        response = client.patch('/api/users/1', json={})
        assert response.status_code == 405
        assert response.get_json()['success'] is False

    def test_payload_too_large(self, client):
        body = '{"name": "' + 'x' * (1024 * 1024) + '"}'
        response = client.post('/api/users', data=body, content_type='application/json')
        assert response.status_code == 413
        assert response.get_json() == {'success': False, 'error': 'Payload too large'}
