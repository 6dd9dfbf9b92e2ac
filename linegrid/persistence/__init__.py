"""
Persistence collaborators for GameModel.load_game / save_game.
A data access turns a path into a GameTable and back; the storage layout is its own business.
"""

from abc import ABC, abstractmethod

from linegrid.engine.table import GameTable


class TableDataAccess(ABC):
    """Contract used by GameModel. Errors raised here reach the caller unchanged."""

    @abstractmethod
    def load(self, path: str) -> GameTable:
        """Read the table stored at `path`."""
        pass

    @abstractmethod
    def save(self, path: str, table: GameTable) -> None:
        """Store `table` at `path`, replacing anything already there."""
        pass
