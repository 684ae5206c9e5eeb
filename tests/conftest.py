import os
import sys

import pytest

# Ajout du dossier racine au path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from patterns_engine.core.consts import DEFAULT_BUTTON_BINDINGS  # noqa: E402
from patterns_engine.players import DefaultPlayer  # noqa: E402
from patterns_engine.memento import DefaultScorePlayer  # noqa: E402


class MockConfig:
    """Simulation de la configuration pour les tests."""

    def __init__(self):
        self.debug_mode = False
        self.grid_min = -10
        self.grid_max = 10
        self.score_limit = 100.0
        self.max_increment = 10.0
        self.button_bindings = dict(DEFAULT_BUTTON_BINDINGS)
        self.resolution = (800, 600)
        self.fullscreen = False

    def save(self):
        pass


class Recorder:
    """Reporter qui mémorise tout ce qu'on lui transmet."""

    def __init__(self):
        self.items = []

    def __call__(self, item):
        self.items.append(item)


@pytest.fixture
def mock_config():
    return MockConfig()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def player(recorder):
    """Fixture STANDARD : joueur au coin (-10, -10), rapports capturés."""
    return DefaultPlayer(reporter=recorder)


@pytest.fixture
def scripted_increments():
    """Factory Helper : source d'incréments déterministe."""

    def _builder(*values):
        it = iter(values)
        return lambda: next(it)

    return _builder


@pytest.fixture
def score_player(scripted_increments, recorder):
    def _builder(*values, **kwargs):
        return DefaultScorePlayer(increment_source=scripted_increments(*values), reporter=recorder, **kwargs)

    return _builder
