"""
Main entry point for the line-grid rules engine.
Demonstrates core functionality with a short scripted game.
"""

import logging
import os
import tempfile

from linegrid.engine.definitions import GameDifficulty
from linegrid.engine.events import GAME_ADVANCED, GAME_OVER
from linegrid.engine.model import GameModel
from linegrid.engine.utils import print_game_state
from linegrid.persistence.json_file import JsonFileDataAccess


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("Line-Grid Rules Engine")
    print("=" * 60)

    model = GameModel(JsonFileDataAccess(), difficulty=GameDifficulty.HARD, table_size=3)
    model.subscribe(GAME_ADVANCED, lambda e: print(f"  advanced: {e.payload}"))
    model.subscribe(GAME_OVER, lambda e: print(f"  GAME OVER: {e.payload}"))
    model.new_game()

    # ===== SCENARIO 1: Drawing edges =====
    print("\n[SCENARIO 1: Drawing edges]")
    model.select(0, 0)
    edge = model.set_last_drawn_edge(0, 1)
    model.clear_selected_tiles()
    print(f"Drew {edge!r}")

    model.select(0, 1)
    edge = model.set_last_drawn_edge(1, 1)
    model.clear_selected_tiles()
    print(f"Drew {edge!r}, direction from (0, 1): {edge.direction_from(edge.endpoints[0]).name}")
    print(f"Neighbours of {edge!r}: {model.neighbours_for_edge(edge)}")

    # ===== SCENARIO 2: Alternating steps and ticks =====
    print("\n[SCENARIO 2: Steps and ticks]")
    for x, y in [(0, 0), (1, 1), (0, 0), (2, 2)]:
        player = model.get_current_player()
        before = model.step_count
        model.step(x, y)
        accepted = model.step_count != before
        print(f"{player.name} steps on ({x}, {y}): {'accepted' if accepted else 'ignored (locked)'}")
        model.advance_time()
    print_game_state(model, show_edges=True)

    # ===== SCENARIO 3: Save, load and finish the board =====
    print("\n[SCENARIO 3: Save / load / fill]")
    path = os.path.join(tempfile.mkdtemp(), "table.json")
    model.save_game(path)
    model.load_game(path)
    print(f"Reloaded: steps={model.step_count}, time={model.remaining_time}, edges={len(model.graph)}")

    for x in range(model.table.size):
        for y in range(model.table.size):
            model.step(x, y)
    print_game_state(model)

    print("\n" + "=" * 60)
    print(f"Final status: {model.status.value}")
    print("=" * 60)


if __name__ == "__main__":
    main()
