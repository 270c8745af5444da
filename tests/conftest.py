"""
Shared fixtures: an app bound to a throwaway SQLite database.
"""
import pytest

from config import Config
from app import create_app
from app.models import db


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        DATABASE_URL = f"sqlite:///{tmp_path / 'test.db'}"
        BCRYPT_ROUNDS = 4
        LOG_FILE = None

    app = create_app(TestConfig)
    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    """SQLAlchemy session inside an application context"""
    with app.app_context():
        yield db.session


@pytest.fixture
def register(client):
    def _register(username="alice", password="pw1"):
        return client.post('/api/auth/register',
                           json={"username": username, "password": password})
    return _register
