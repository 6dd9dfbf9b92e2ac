"""
Event payloads and the listener registry.
"""

import pytest

from linegrid.engine.events import (
    GAME_ADVANCED,
    GAME_OVER,
    EventDispatcher,
    GameEvent,
    game_advanced,
    game_over,
)


def test_advanced_event_never_reports_a_win():
    event = game_advanced(step_count=3, remaining_time=17)
    assert event.type == GAME_ADVANCED
    assert event.payload == {"won": False, "step_count": 3, "remaining_time": 17}


def test_event_dict_round_trip():
    event = game_over(won=True, step_count=9, remaining_time=40)
    assert GameEvent.from_dict(event.to_dict()) == event


def test_unknown_event_type_rejected():
    with pytest.raises(ValueError):
        EventDispatcher().subscribe("board_rotated", lambda e: None)


def test_emit_only_reaches_listeners_of_that_type():
    dispatcher = EventDispatcher()
    advanced, over = [], []
    dispatcher.subscribe(GAME_ADVANCED, advanced.append)
    dispatcher.subscribe(GAME_OVER, over.append)

    dispatcher.emit(game_over(False, 0, 0))
    assert advanced == []
    assert len(over) == 1


def test_unsubscribe_unknown_token():
    dispatcher = EventDispatcher()
    token = dispatcher.subscribe(GAME_OVER, lambda e: None)
    assert dispatcher.unsubscribe(token)
    assert not dispatcher.unsubscribe(token)
    assert dispatcher.listener_count(GAME_OVER) == 0


def test_listener_may_unsubscribe_itself_during_emit():
    dispatcher = EventDispatcher()
    calls = []
    tokens = {}

    def once(event):
        calls.append("once")
        dispatcher.unsubscribe(tokens["once"])

    tokens["once"] = dispatcher.subscribe(GAME_ADVANCED, once)
    dispatcher.subscribe(GAME_ADVANCED, lambda e: calls.append("always"))

    dispatcher.emit(game_advanced(1, 1))
    dispatcher.emit(game_advanced(2, 1))
    assert calls == ["once", "always", "always"]


def test_listener_errors_propagate():
    dispatcher = EventDispatcher()

    def broken(event):
        raise RuntimeError("listener failed")

    dispatcher.subscribe(GAME_OVER, broken)
    with pytest.raises(RuntimeError, match="listener failed"):
        dispatcher.emit(game_over(True, 1, 1))
