"""
Game table: per-cell values and locks for a square grid.
Includes JSON serialization used by the persistence layer.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from linegrid.config import DEFAULT_TABLE_SIZE
from linegrid.engine import EMPTY_CELL
from linegrid.engine.definitions import Player


def _int(value: Any, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def _grid_from(raw: Any, size: int, convert, default) -> list[list]:
    """Coerce a nested list from a save into a size x size grid, filling gaps with default."""
    rows = raw if isinstance(raw, list) else []
    grid = []
    for x in range(size):
        row = rows[x] if x < len(rows) and isinstance(rows[x], list) else []
        grid.append([convert(row[y]) if y < len(row) else default for y in range(size)])
    return grid


@dataclass
class GameTable:
    """
    Square grid of cells. A cell holds EMPTY_CELL or a Player value; cells holding a value may be locked.
    Locked cells no longer accept moves; the table is filled once no cell is empty.
    """
    size: int = DEFAULT_TABLE_SIZE
    values: list[list[int]] = field(default_factory=list)
    locks: list[list[bool]] = field(default_factory=list)

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Table size must be positive, got {self.size}")
        if not self.values:
            self.values = [[EMPTY_CELL] * self.size for _ in range(self.size)]
        if not self.locks:
            self.locks = [[False] * self.size for _ in range(self.size)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise ValueError(f"Cell ({x}, {y}) is outside a {self.size}x{self.size} table")

    # ===== Queries =====

    @property
    def is_filled(self) -> bool:
        return all(value != EMPTY_CELL for row in self.values for value in row)

    def is_locked(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.locks[x][y]

    def is_empty(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.values[x][y] == EMPTY_CELL

    def get_value(self, x: int, y: int) -> int:
        self._check(x, y)
        return self.values[x][y]

    def count_owned(self, player: Player) -> int:
        return sum(1 for row in self.values for value in row if value == player.value)

    # ===== Mutations =====

    def set_value(self, x: int, y: int, value: int, lock: bool = False) -> None:
        self._check(x, y)
        if value != EMPTY_CELL and value not in (p.value for p in Player):
            raise ValueError(f"Invalid cell value {value}")
        if value == EMPTY_CELL and lock:
            raise ValueError(f"Cannot lock empty cell ({x}, {y})")
        self.values[x][y] = value
        if value == EMPTY_CELL:
            # Clearing a cell reopens it
            self.locks[x][y] = False
        elif lock:
            self.locks[x][y] = True

    def set_lock(self, x: int, y: int) -> None:
        """Finalize a cell. Only cells holding a value can be locked."""
        self._check(x, y)
        if self.values[x][y] == EMPTY_CELL:
            raise ValueError(f"Cannot lock empty cell ({x}, {y})")
        self.locks[x][y] = True

    def claim(self, x: int, y: int, player: Player) -> None:
        """Mark the cell as taken by `player` and lock it."""
        self.set_value(x, y, player.value, lock=True)

    # ===== Serialization Methods =====

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "values": [list(row) for row in self.values],
            "locks": [list(row) for row in self.locks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameTable":
        """
        Create a table from a dict (missing cells become empty and unlocked).
        Lock flags on empty cells are dropped: a lock marks a finalized cell.
        """
        if not isinstance(data, dict):
            data = {}
        size = _int(data.get("size"), DEFAULT_TABLE_SIZE)
        if size < 1:
            raise ValueError(f"Table size must be positive, got {size}")
        values = _grid_from(data.get("values"), size, lambda v: _int(v, EMPTY_CELL), EMPTY_CELL)
        locks = _grid_from(data.get("locks"), size, bool, False)
        for x in range(size):
            for y in range(size):
                if values[x][y] == EMPTY_CELL:
                    locks[x][y] = False
        return cls(size=size, values=values, locks=locks)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> "GameTable":
        return cls.from_dict(json.loads(json_str))
