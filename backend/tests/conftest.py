import os
import sys
import pytest

# Ensure the backend root (containing the `quakequiz` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from quakequiz import create_app, db


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Lowest cost bcrypt allows, keeps the suite fast
    BCRYPT_LOG_ROUNDS = 4
    CORS_ORIGINS = ['http://localhost:5173']


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import quakequiz.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def start_session(client):
    def _start(nickname, pin):
        return client.post('/api/start_session', json={'nickname': nickname, 'pin': pin})
    return _start


@pytest.fixture()
def post_score(client):
    def _post(nickname, score):
        return client.post('/api/scores', json={'nickname': nickname, 'score': score})
    return _post


@pytest.fixture()
def file_app(tmp_path):
    """App on a SQLite file so several threads can share one real database."""
    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'quakequiz.db'}"

    application = create_app(FileConfig)
    with application.app_context():
        import quakequiz.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()
        db.engine.dispose()
