import os
import sys
import pytest

# Ensure the backend root (containing the `oddeven` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from oddeven import create_app, db, socketio
from oddeven.services.game.errors import TransportWriteFailure
from oddeven.services.game.lifecycle import GameAuthority
from oddeven.services.game.transport import Transport


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BOARD_SIDE = 5
    SOCKETIO_NAMESPACE = '/ws'
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'
    HOST = '127.0.0.1'
    PORT = 8080
    DEBUG = False


class RecordingTransport(Transport):
    """In-memory transport: sids are open until closed, deliveries are recorded."""

    def __init__(self):
        self.open = set()
        self.failing = set()
        self.sent = []

    def connect(self, sid):
        self.open.add(sid)
        return sid

    def close(self, sid):
        self.open.discard(sid)

    def is_open(self, sid):
        return sid in self.open

    def deliver(self, sid, event):
        if sid in self.failing:
            raise TransportWriteFailure(sid, 'broken pipe')
        self.sent.append((sid, event))

    def events_for(self, sid):
        return [e for s, e in self.sent if s == sid]

    def types_for(self, sid):
        return [e['type'] for e in self.events_for(sid)]

    def clear(self):
        self.sent.clear()


class RecordingScores:
    def __init__(self):
        self.results = []

    def record_result(self, winner):
        self.results.append(winner)


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def scores():
    return RecordingScores()


@pytest.fixture()
def authority(transport, scores):
    return GameAuthority(transport, size=25, scores=scores)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
