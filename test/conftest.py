import pytest

from linegrid.engine.definitions import GameDifficulty
from linegrid.engine.events import GAME_ADVANCED, GAME_OVER
from linegrid.engine.model import GameModel
from linegrid.persistence.database import make_session_factory
from linegrid.persistence.json_file import JsonFileDataAccess


class EventRecorder:
    """Collects every event a model emits, in order."""

    def __init__(self, model):
        self.events = []
        model.subscribe(GAME_ADVANCED, self.events.append)
        model.subscribe(GAME_OVER, self.events.append)

    def of_type(self, event_type):
        return [e for e in self.events if e.type == event_type]


@pytest.fixture()
def model():
    m = GameModel(difficulty=GameDifficulty.MEDIUM, table_size=3)
    m.new_game()
    return m


@pytest.fixture()
def recorder(model):
    return EventRecorder(model)


@pytest.fixture()
def json_model():
    m = GameModel(JsonFileDataAccess(), difficulty=GameDifficulty.EASY, table_size=3)
    m.new_game()
    return m


@pytest.fixture()
def session_factory():
    return make_session_factory("sqlite://")
