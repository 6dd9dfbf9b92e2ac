"""
Text rendering helpers for demos and debugging.
"""

from linegrid.engine import EMPTY_CELL
from linegrid.engine.definitions import Player
from linegrid.engine.model import GameModel
from linegrid.engine.table import GameTable

CELL_SYMBOLS = {
    EMPTY_CELL: ".",
    Player.BLUE.value: "B",
    Player.RED.value: "R",
}


def format_table(table: GameTable) -> str:
    """One line per row; locked cells are wrapped in brackets."""
    lines = []
    for x in range(table.size):
        cells = []
        for y in range(table.size):
            symbol = CELL_SYMBOLS.get(table.get_value(x, y), "?")
            cells.append(f"[{symbol}]" if table.is_locked(x, y) else f" {symbol} ")
        lines.append("".join(cells))
    return "\n".join(lines)


def print_game_state(model: GameModel, show_edges: bool = False):
    """
    Pretty-print the model.

    Args:
        model: Game model to print
        show_edges: If True, list every drawn edge in draw order
    """
    print(f"\n{'='*60}")
    print(
        f"Difficulty: {model.difficulty.value} | Steps: {model.step_count} | "
        f"Time left: {model.remaining_time} | Status: {model.status.value}")
    print(f"Current player: {model.get_current_player().name}")
    print(f"{'='*60}")
    print(format_table(model.table))
    print(
        f"Owned cells: BLUE={model.table.count_owned(Player.BLUE)} "
        f"RED={model.table.count_owned(Player.RED)}")
    if model.selected_tile is not None:
        print(f"Selected tile: {model.selected_tile}")
    print(f"Edges drawn: {len(model.graph)}")
    if show_edges:
        for edge in model.graph:
            print(f"  - {edge!r}")
