import os
import sys
import tempfile

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from scenelingo_app import create_app, db
from scenelingo_app.config import Config
from scenelingo_app.modules.scenes.catalog import get_scene

from fakes import TODAY, FakeProvider


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    GEMINI_API_KEY = 'test-key'
    ADVANCE_DELAY_SECONDS = 0
    LOG_DIR = os.path.join(tempfile.gettempdir(), 'scenelingo-test-logs')


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
def shell(app):
    shell = app.extensions['scenelingo.shell']
    shell.stats.clock = lambda: TODAY
    return shell


@pytest.fixture
def fake_provider(shell):
    provider = FakeProvider()
    shell.sessions.provider = provider
    return provider


@pytest.fixture
def coffee_shop():
    return get_scene('coffee-shop')
