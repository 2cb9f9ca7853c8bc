import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bookshelf_app import create_app, db
from bookshelf_app.core.config import Config
from bookshelf_app.modules.auth.services import AuthService


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    LOG_DIR = None
    LOG_LEVEL = 'DEBUG'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def reader(app):
    """A registered user with the four predefined shelves."""
    return AuthService.register_user(username='reader', password='password123', email='reader@example.com')


def login_client(client, user_id):
    with client.session_transaction() as session:
        session['_user_id'] = str(user_id)
        session['_fresh'] = True


@pytest.fixture
def logged_in_client(client, reader):
    login_client(client, reader.user_id)
    return client
