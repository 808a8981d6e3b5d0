import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from config import TestConfig
from impossible_games import create_app
from impossible_games.services.record_store import RecordStore

INDEX_HTML = """<html>
<body>
<div class="name-section active"><input id="playerName"></div>
<div class="game-selection"><h2>Welcome, <span id="displayName"></span></h2></div>
</body>
</html>
"""

SNAKE_HTML = """<html>
<body>
<canvas id="snake"></canvas>
</body>
</html>
"""


@pytest.fixture
def config_class(tmp_path):
    """TestConfig with every file and directory under tmp_path"""
    public_dir = tmp_path / 'public'
    games_dir = public_dir / 'games'
    games_dir.mkdir(parents=True)
    (public_dir / 'index.html').write_text(INDEX_HTML, encoding='utf-8')
    (games_dir / 'snake.html').write_text(SNAKE_HTML, encoding='utf-8')

    class TmpConfig(TestConfig):
        DATA_DIR = str(tmp_path)
        USERS_FILE = str(tmp_path / 'names.json')
        RESULTS_DIR = str(tmp_path / 'results')
        PUBLIC_DIR = str(public_dir)
        GAMES_DIR = str(games_dir)

    return TmpConfig


@pytest.fixture
def app(config_class):
    return create_app(config_class)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(tmp_path):
    return RecordStore.from_file(str(tmp_path / 'names.json'),
                                 str(tmp_path / 'results'))
