"""
Game model: the turn/timer state machine.

The model owns one table, one edge graph and the current tile selection. Callers feed it
input (select / set_last_drawn_edge / step) and clock ticks (advance_time); it reports
progress through GAME_ADVANCED and GAME_OVER events.

Not thread-safe: drive it from one thread, and block input while load_game/save_game run.
"""

import logging
from typing import TYPE_CHECKING

from linegrid.config import DEFAULT_DIFFICULTY
from linegrid.engine.definitions import (
    GameDifficulty,
    GameStatus,
    Player,
    game_time_for,
    parse_difficulty,
)
from linegrid.engine.errors import NoDataAccessError
from linegrid.engine.events import (
    EventDispatcher,
    Listener,
    game_advanced,
    game_over,
)
from linegrid.engine.graph import Edge, GameGraph, Node
from linegrid.engine.table import GameTable

if TYPE_CHECKING:
    from linegrid.persistence import TableDataAccess

logger = logging.getLogger(__name__)


class GameModel:
    def __init__(
        self,
        data_access: "TableDataAccess | None" = None,
        difficulty: GameDifficulty | str = DEFAULT_DIFFICULTY,
        table_size: int | None = None,
    ):
        self._data_access = data_access
        self._difficulty = parse_difficulty(difficulty)
        self._table = GameTable(table_size) if table_size is not None else GameTable()
        self._graph = GameGraph()
        self._selected: Node | None = None
        self._step_count = 0
        self._remaining_time = game_time_for(self._difficulty)
        self._events = EventDispatcher()

    # ===== Properties =====

    @property
    def table(self) -> GameTable:
        return self._table

    @property
    def graph(self) -> GameGraph:
        return self._graph

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def remaining_time(self) -> int:
        return self._remaining_time

    @property
    def difficulty(self) -> GameDifficulty:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: GameDifficulty | str) -> None:
        # Takes effect at the next new_game/load_game
        self._difficulty = parse_difficulty(value)

    @property
    def selected_tile(self) -> Node | None:
        return self._selected

    @property
    def is_game_over(self) -> bool:
        return self._remaining_time == 0 or self._table.is_filled

    @property
    def status(self) -> GameStatus:
        if self._table.is_filled:
            return GameStatus.GAME_OVER_WON
        if self._remaining_time == 0:
            return GameStatus.GAME_OVER_TIMEOUT
        return GameStatus.IN_PROGRESS

    # ===== Listeners =====

    def subscribe(self, event_type: str, listener: Listener) -> int:
        return self._events.subscribe(event_type, listener)

    def unsubscribe(self, token: int) -> bool:
        return self._events.unsubscribe(token)

    # ===== Selection and edges =====

    def select(self, x: int, y: int) -> None:
        """Remember (x, y) as the selected tile. Lock state is checked when the move is made."""
        if self.is_game_over:
            logger.debug("Ignoring select(%d, %d): game is over", x, y)
            return
        self._selected = Node(x, y)

    def clear_selected_tiles(self) -> None:
        self._selected = None

    def is_any_field_selected(self) -> bool:
        return self._selected is not None

    def set_last_drawn_edge(self, current_row: int, current_col: int) -> Edge | None:
        """
        Complete a line from the selected tile to (current_row, current_col).

        Returns the new edge, or None when nothing is selected, the game is over or the
        same edge was drawn before. Selection is left as is; callers clear it with
        clear_selected_tiles().
        Raises InvalidEdgeError if the target is the selected tile itself.
        """
        if self._selected is None:
            return None
        if self.is_game_over:
            logger.debug("Ignoring edge to (%d, %d): game is over", current_row, current_col)
            return None
        edge = Edge(Node(current_row, current_col), self._selected)
        if edge in self._graph:
            logger.debug("Ignoring duplicate edge %r", edge)
            return None
        self._graph.add(edge)
        return edge

    def neighbours_for_edge(self, edge: Edge) -> list[Edge]:
        """Drawn edges sharing a node with `edge`, excluding `edge` itself."""
        return self._graph.find_all(lambda current: current.overlaps(edge) and current != edge)

    # ===== Turns and time =====

    def get_current_player(self) -> Player:
        return Player.BLUE if self._step_count % 2 == 0 else Player.RED

    def step(self, x: int, y: int) -> None:
        """
        Make a move on cell (x, y) for the current player.
        Ignored if the game is over or the cell is locked.
        """
        if self.is_game_over:
            logger.debug("Ignoring step(%d, %d): game is over", x, y)
            return
        if self._table.is_locked(x, y):
            logger.debug("Ignoring step(%d, %d): cell is locked", x, y)
            return

        self._table.claim(x, y, self.get_current_player())
        self._step_count += 1
        self._on_game_advanced()

        if self._table.is_filled:
            self._on_game_over(True)

    def advance_time(self) -> None:
        """One clock tick. Ignored once the game is over."""
        if self.is_game_over:
            return

        self._remaining_time -= 1
        self._on_game_advanced()

        if self._remaining_time == 0:
            self._on_game_over(False)

    # ===== Game lifecycle =====

    def new_game(self) -> None:
        self._table = GameTable(self._table.size)
        self._reset_session()
        logger.info(
            "New %s game: %dx%d table, %d ticks",
            self._difficulty.value, self._table.size, self._table.size, self._remaining_time,
        )

    def load_game(self, path: str) -> None:
        """
        Replace the table with the one stored at `path`.
        Raises NoDataAccessError without a data access; storage errors propagate unchanged.
        """
        if self._data_access is None:
            raise NoDataAccessError()

        table = self._data_access.load(path)
        self._table = table
        self._reset_session()
        logger.info("Loaded game from %s (%s)", path, self.status.value)

    def save_game(self, path: str) -> None:
        if self._data_access is None:
            raise NoDataAccessError()

        self._data_access.save(path, self._table)
        logger.info("Saved game to %s", path)

    # ===== Private helpers =====

    def _reset_session(self) -> None:
        self._graph.clear()
        self._selected = None
        self._step_count = 0
        self._remaining_time = game_time_for(self._difficulty)

    def _on_game_advanced(self) -> None:
        self._events.emit(game_advanced(self._step_count, self._remaining_time))

    def _on_game_over(self, won: bool) -> None:
        logger.info(
            "Game over (%s) after %d steps, %d ticks left",
            "won" if won else "time expired", self._step_count, self._remaining_time,
        )
        self._events.emit(game_over(won, self._step_count, self._remaining_time))
