import os
import tempfile

# Keep test logs out of the working tree; must run before jordle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='jordle-logs-'))

import pytest

from jordle import create_app
from jordle.config import TestingConfig
from jordle.services.game_service import initialize_game_service


@pytest.fixture
def game_service():
    return initialize_game_service(word_list=["speed", "crane", "zebra"])


@pytest.fixture
def client(game_service):
    app = create_app(TestingConfig)
    with app.test_client() as client:
        yield client


@pytest.fixture
def new_game(client):
    def _new_game(target="speed"):
        response = client.post("/api/new_game", json={"target": target})
        assert response.status_code == 200
        return response.get_json()["game_id"]
    return _new_game
