"""
Line-grid game rules engine.
In-memory state machine: grid, edges, turns, timer and win detection.
No UI, storage or tick scheduling; those are callers of GameModel.
"""

# Value of a cell nobody has claimed yet.
EMPTY_CELL = 0
