"""
Shared fixtures for engine, service and server tests.
"""

import os
import random
import tempfile

# Keep test logs out of the working tree; read by Config at import time
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-test-logs-'))

import pytest

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.services.game_engine import GameEngine
from wordle_game.services.game_service import initialize_game_service


def enter_word(engine, word, submit=True):
    for letter in word:
        engine.submit_key(letter)
    if submit:
        engine.submit_key("ENTER")


@pytest.fixture
def type_word():
    return enter_word


@pytest.fixture
def engine():
    """Engine whose secret word is always HELLO."""
    return GameEngine(["HELLO"], rng=random.Random(0))


@pytest.fixture
def game_service():
    service = initialize_game_service(TestingConfig, rng=random.Random(0))
    service.word_list = ["HELLO"]
    return service


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
