"""
Static definitions: players, difficulties, game statuses and grid directions.
Per-difficulty constants live in DIFFICULTY_SETTINGS; nothing here changes during a game.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Player(IntEnum):
    """The two players. The value is what a claimed cell stores in the table."""
    BLUE = 1
    RED = 2


class GameDifficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    GAME_OVER_WON = "game_over_won"
    GAME_OVER_TIMEOUT = "game_over_timeout"


class Direction(Enum):
    """Grid directions as (row delta, column delta)."""
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def row_delta(self) -> int:
        return self.value[0]

    @property
    def col_delta(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class DifficultySettings:
    """Defines the constants tied to one difficulty level."""
    difficulty: GameDifficulty
    game_time: int  # Ticks on the countdown at the start of a game
    generated_field_count: int  # Pre-filled cells a puzzle generator would place


DIFFICULTY_SETTINGS: dict[GameDifficulty, DifficultySettings] = {
    GameDifficulty.EASY: DifficultySettings(GameDifficulty.EASY, game_time=3600, generated_field_count=6),
    GameDifficulty.MEDIUM: DifficultySettings(GameDifficulty.MEDIUM, game_time=1200, generated_field_count=12),
    GameDifficulty.HARD: DifficultySettings(GameDifficulty.HARD, game_time=600, generated_field_count=18),
}


def parse_difficulty(value: "GameDifficulty | str") -> GameDifficulty:
    """
    Accept a GameDifficulty or its name/value ("easy", "MEDIUM", ...).
    Raises ValueError for anything else.
    """
    if isinstance(value, GameDifficulty):
        return value
    try:
        return GameDifficulty(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(d.value for d in GameDifficulty)
        raise ValueError(f"Unknown difficulty '{value}'. Allowed: {allowed}") from None


def get_difficulty_settings(difficulty: "GameDifficulty | str") -> DifficultySettings:
    return DIFFICULTY_SETTINGS[parse_difficulty(difficulty)]


def game_time_for(difficulty: "GameDifficulty | str") -> int:
    """Countdown length (in ticks) for a difficulty."""
    return get_difficulty_settings(difficulty).game_time
