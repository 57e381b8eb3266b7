import pytest

from coffeebeans import create_app
from coffeebeans.config import TestConfig
from coffeebeans.services import get_entry_store, get_session_store


@pytest.fixture()
def app():
    # Fresh in-memory database for every test
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def entry_store(app):
    return get_entry_store()


@pytest.fixture()
def session_store(app):
    return get_session_store()


@pytest.fixture()
def admin_token(session_store):
    return session_store.create_admin_session()


@pytest.fixture()
def reader_token(session_store):
    return session_store.create_reader_session('Maria')


@pytest.fixture()
def admin_headers(admin_token):
    return {'X-Admin-Token': admin_token}
