"""Shared fixtures: every test gets its own app with a freshly seeded in-memory store."""

import base64

import pytest

from iedc import create_app
from iedc.config import TestConfig
from iedc.extensions import db
from iedc.services import content_store, directory_store


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def ctx(app):
    """Push an application context for tests that call the stores directly."""
    with app.app_context():
        yield
        db.session.remove()


@pytest.fixture
def directory(ctx):
    return directory_store()


@pytest.fixture
def content(ctx):
    return content_store()


@pytest.fixture
def auth_headers():
    """Build an Authorization header carrying a token for a user id."""

    def _headers(user_id):
        token = base64.b64encode(f"{user_id}:1700000000000".encode()).decode()
        return {'Authorization': f'Bearer {token}'}

    return _headers
