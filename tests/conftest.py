import os
import tempfile

# Keep test logs out of the working tree; must run before wordvibe is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordvibe-logs-'))

import pytest

from wordvibe import create_app
from wordvibe.config import TestingConfig
from wordvibe.models import Guess, MatchStatus
from wordvibe.services.round_service import initialize_round_service

C, P, A, U = MatchStatus.CORRECT, MatchStatus.PRESENT, MatchStatus.ABSENT, MatchStatus.UNSET


def make_guess(word, matches, is_complete=True):
    row = Guess(letters=list(word) if word else [''] * 5)
    if is_complete:
        row.finalize(matches)
    return row


@pytest.fixture
def app_and_socketio():
    initialize_round_service()
    return create_app(TestingConfig)


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    return socketio.test_client(app)
