import random

import pytest

from wordround.config import Config
from wordround.game.service import RoomStore
from wordround.server import create_app


WORDS = ["Obst", "Gemüse", "Käse", "Stadt"]


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SOCKETIO_ASYNC_MODE = "threading"
    TRUST_PROXY_HEADERS = False
    STATIC_DIR = ""
    DEFAULT_ROOM = "DEMO"
    ANSWER_MAX_LENGTH = 200
    MIN_PLAYERS = 2


@pytest.fixture()
def store():
    return RoomStore(words=WORDS, rng=random.Random(1234), default_room="DEMO")


@pytest.fixture()
def app_and_socketio(store):
    return create_app(TestConfig, store=store)


@pytest.fixture()
def flask_app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def connect(app_and_socketio):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    flask_app, socketio = app_and_socketio
    clients = []

    def _connect():
        sio_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(sio_client)
        return sio_client

    yield _connect

    for sio_client in clients:
        if sio_client.is_connected():
            sio_client.disconnect()


def state_syncs(sio_client):
    """Drain received packets and return the ``state:sync`` payloads in order."""
    return [pkt["args"][0] for pkt in sio_client.get_received() if pkt["name"] == "state:sync"]
