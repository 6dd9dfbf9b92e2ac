"""
Game events for UI hooks and logging.
Events describe what happened when the model advanced; listeners receive them synchronously.
"""

import itertools
from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class GameEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        return cls(type=data["type"], payload=data["payload"])


# ===== Event Type Constants =====

GAME_ADVANCED = "game_advanced"
GAME_OVER = "game_over"

EVENT_TYPES = (GAME_ADVANCED, GAME_OVER)


# ===== Event Factory Functions =====

def game_advanced(step_count: int, remaining_time: int) -> GameEvent:
    """Emitted after every accepted step and every timer tick."""
    return GameEvent(GAME_ADVANCED, {
        "won": False,
        "step_count": step_count,
        "remaining_time": remaining_time,
    })


def game_over(won: bool, step_count: int, remaining_time: int) -> GameEvent:
    """
    Emitted once when the game ends.

    Args:
        won: True when the table was filled, False when the timer ran out
        step_count: Steps taken when the game ended
        remaining_time: Ticks left (0 on timeout)
    """
    return GameEvent(GAME_OVER, {
        "won": won,
        "step_count": step_count,
        "remaining_time": remaining_time,
    })


Listener = Callable[[GameEvent], None]


class EventDispatcher:
    """
    Per-event-type listener registry.
    Listeners run on the caller's thread in registration order; their exceptions propagate.
    """

    def __init__(self):
        self._tokens = itertools.count(1)
        self._listeners: dict[str, dict[int, Listener]] = {t: {} for t in EVENT_TYPES}

    def subscribe(self, event_type: str, listener: Listener) -> int:
        """Register a listener and return the token used to unsubscribe it."""
        if event_type not in self._listeners:
            raise ValueError(
                f"Unknown event type '{event_type}'. Known types: {', '.join(EVENT_TYPES)}"
            )
        token = next(self._tokens)
        self._listeners[event_type][token] = listener
        return token

    def unsubscribe(self, token: int) -> bool:
        """Remove a listener. Returns False if the token was not registered."""
        for listeners in self._listeners.values():
            if token in listeners:
                del listeners[token]
                return True
        return False

    def emit(self, event: GameEvent) -> None:
        # Snapshot so a listener may unsubscribe itself while being called
        for listener in list(self._listeners[event.type].values()):
            listener(event)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, {}))
