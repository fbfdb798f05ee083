"""Unit tests for game history logging."""

import logging

from unosim.engine import UnoGame


def test_history_initialization():
    game = UnoGame(2)
    game.initialize()
    assert len(game.history) == 0
    assert game.recent_history() == []


def test_history_records_turn():
    game = UnoGame(2, seed=42)
    game.initialize()
    game.play_turn()

    assert len(game.history) >= 1
    assert game.history[-1].startswith("player 0 ")


def test_history_persists_across_turns():
    game = UnoGame(2, seed=42)
    game.initialize()

    game.play_turn()
    after_first = len(game.history)
    second = game.current_player
    game.play_turn()

    assert len(game.history) > after_first
    assert game.history[-1].startswith(f"player {second} ")


def test_recent_history_tail():
    game = UnoGame(3, seed=8)
    game.initialize()
    for _ in range(20):
        game.play_turn()

    assert game.recent_history(5) == list(game.history[-5:])
    assert len(game.recent_history()) == min(10, len(game.history))
    assert game.recent_history(0) == []


def test_events_are_logged(caplog):
    game = UnoGame(2, seed=42)
    game.initialize()
    with caplog.at_level(logging.DEBUG, logger="unosim.engine.game"):
        game.play_turn()

    assert game.history[-1] in caplog.messages
