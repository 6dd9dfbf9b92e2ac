"""
Game table cell state and JSON round trip of saved tables.
"""

import pytest

from linegrid.engine import EMPTY_CELL
from linegrid.engine.definitions import Player
from linegrid.engine.table import GameTable


def test_new_table_is_empty_and_unlocked():
    table = GameTable(4)
    assert table.size == 4
    assert not table.is_filled
    assert all(table.is_empty(x, y) and not table.is_locked(x, y)
               for x in range(4) for y in range(4))


def test_default_size_comes_from_config():
    from linegrid.config import DEFAULT_TABLE_SIZE
    assert GameTable().size == DEFAULT_TABLE_SIZE


def test_claim_sets_owner_and_locks():
    table = GameTable(2)
    table.claim(0, 1, Player.RED)
    assert table.get_value(0, 1) == Player.RED.value
    assert table.is_locked(0, 1)
    assert table.count_owned(Player.RED) == 1
    assert table.count_owned(Player.BLUE) == 0


def test_table_is_filled_once_no_cell_is_empty():
    table = GameTable(2)
    for x, y in [(0, 0), (0, 1), (1, 0)]:
        table.set_value(x, y, Player.BLUE.value)
    assert not table.is_filled
    table.set_value(1, 1, Player.RED.value)
    assert table.is_filled


def test_set_lock_requires_a_value():
    table = GameTable(2)
    with pytest.raises(ValueError):
        table.set_lock(1, 0)
    with pytest.raises(ValueError):
        table.set_value(1, 0, EMPTY_CELL, lock=True)
    assert not table.is_locked(1, 0)

    table.set_value(1, 0, Player.RED.value)
    table.set_lock(1, 0)
    assert table.is_locked(1, 0)


def test_clearing_a_cell_unlocks_it():
    table = GameTable(2)
    table.claim(0, 0, Player.BLUE)
    table.set_value(0, 0, EMPTY_CELL)
    assert table.is_empty(0, 0)
    assert not table.is_locked(0, 0)


def test_from_dict_drops_locks_on_empty_cells():
    restored = GameTable.from_dict({
        "size": 2,
        "values": [[0, 2], [0, 0]],
        "locks": [[True, True], [False, False]],
    })
    assert not restored.is_locked(0, 0)
    assert restored.is_locked(0, 1)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_range_cells_raise(x, y):
    table = GameTable(3)
    with pytest.raises(ValueError):
        table.is_locked(x, y)


def test_invalid_value_rejected():
    with pytest.raises(ValueError):
        GameTable(2).set_value(0, 0, 9)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        GameTable(0)
    with pytest.raises(ValueError):
        GameTable.from_dict({"size": -2})


def test_json_round_trip_keeps_values_and_locks():
    table = GameTable(3)
    table.claim(0, 0, Player.BLUE)
    table.set_value(2, 1, Player.RED.value)
    table.set_value(1, 2, Player.BLUE.value)
    table.set_lock(1, 2)

    restored = GameTable.from_json(table.to_json())
    assert restored == table
    assert restored.is_locked(0, 0) and restored.is_locked(1, 2)
    assert not restored.is_locked(2, 1)


def test_from_dict_fills_missing_cells():
    restored = GameTable.from_dict({
        "size": 2,
        "values": [[1]],
        "locks": "garbage",
    })
    assert restored.values == [[1, EMPTY_CELL], [EMPTY_CELL, EMPTY_CELL]]
    assert restored.locks == [[False, False], [False, False]]


def test_format_table_marks_owners_and_locks():
    from linegrid.engine.utils import format_table

    table = GameTable(2)
    table.claim(0, 0, Player.BLUE)
    table.set_value(1, 1, Player.RED.value)
    assert format_table(table).splitlines() == [
        "[B] . ",
        " .  R ",
    ]
