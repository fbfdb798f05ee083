"""Turn resolution on hand-built tables."""

from typing import Sequence

import pytest
from unosim.engine import (
    Card,
    DrawPile,
    DiscardPile,
    DrawPolicy,
    GamePhase,
    Hand,
    UnoGame,
    describe,
    next_index,
    select_card,
)


def _cards(labels: Sequence[str]) -> list[Card]:
    return [Card.from_label(s) for s in labels]


def _rig(
    game: UnoGame,
    hands: Sequence[Sequence[str]],
    top: str,
    draw: Sequence[str] = (),
) -> UnoGame:
    """Replace the dealt table. ``draw`` is listed bottom to top."""
    game.initialize()
    for hand, labels in zip(game.hands, hands):
        hand.clear()
        for card in _cards(labels):
            hand.append(card)
    game.discard_pile.clear()
    game.discard_pile.push(Card.from_label(top))
    game.draw_pile.reset(_cards(draw))
    return game


# -- Hand / piles ------------------------------------------------------------


def test_hand_find_and_remove_first_match() -> None:
    hand = Hand(_cards(["Blue 1", "Red 2", "Red 2", "Green 3"]))
    card = hand.find_and_remove(lambda c: c.color.value == "Red")
    assert card == Card.from_label("Red 2")
    assert [str(c) for c in hand] == ["Blue 1", "Red 2", "Green 3"]
    assert hand.find_and_remove(lambda c: c.label.value == "Skip") is None
    assert len(hand) == 3
    assert not hand.is_empty()


def test_hand_append_keeps_order() -> None:
    hand = Hand()
    assert hand.is_empty()
    for card in _cards(["Red 1", "Blue 2", "Red 1"]):
        hand.append(card)
    assert hand.cards() == _cards(["Red 1", "Blue 2", "Red 1"])


def test_draw_pile_draws_from_top() -> None:
    pile = DrawPile(_cards(["Red 1", "Red 2", "Red 3"]))
    assert pile.peek() == Card.from_label("Red 3")
    assert pile.draw() == Card.from_label("Red 3")
    assert pile.draw_many(5) == _cards(["Red 2", "Red 1"])
    assert pile.is_empty()
    assert pile.draw() is None


def test_discard_pile_top() -> None:
    pile = DiscardPile()
    assert pile.top() is None
    pile.push(Card.from_label("Red 1"))
    pile.push(Card.from_label("Blue 1"))
    assert pile.top() == Card.from_label("Blue 1")
    assert len(pile) == 2


# -- selection policy --------------------------------------------------------


def test_select_prefers_color_over_label() -> None:
    hand = Hand(_cards(["Blue 5", "Green 1", "Red 9"]))
    assert select_card(hand, Card.from_label("Red 5")) == Card.from_label("Red 9")
    assert hand.cards() == _cards(["Blue 5", "Green 1"])


def test_select_first_label_match() -> None:
    hand = Hand(_cards(["Green 2", "Blue 5", "Yellow 5"]))
    assert select_card(hand, Card.from_label("Red 5")) == Card.from_label("Blue 5")


def test_select_first_color_match_in_hand_order() -> None:
    hand = Hand(_cards(["Red Skip", "Red 3"]))
    assert select_card(hand, Card.from_label("Red 5")) == Card.from_label("Red Skip")


def test_select_action_needs_match() -> None:
    hand = Hand(_cards(["Blue Skip", "Green Reverse", "Yellow Draw Two"]))
    assert select_card(hand, Card.from_label("Red 5")) is None
    assert len(hand) == 3
    assert select_card(hand, Card.from_label("Red Reverse")) == Card.from_label("Green Reverse")


def test_select_on_empty_discard() -> None:
    hand = Hand(_cards(["Yellow 4", "Blue 1"]))
    assert select_card(hand, None) == Card.from_label("Yellow 4")


def test_next_index_wraps() -> None:
    assert next_index(0, 1, 3) == 1
    assert next_index(0, -1, 3) == 2
    assert next_index(2, 1, 3, steps=2) == 1
    assert next_index(0, 1, 1, steps=2) == 0


# -- turn resolution ---------------------------------------------------------


def test_number_card_advances_one() -> None:
    game = _rig(UnoGame(3), [["Red 1", "Blue 2"], ["Green 3"], ["Green 4"]], "Red 5")
    game.play_turn()
    assert game.discard_pile.top() == Card.from_label("Red 1")
    assert game.current_player == 1
    assert len(game.hands[0]) == 1


def test_skip_with_three_players() -> None:
    game = _rig(UnoGame(3), [["Red Skip", "Blue 2"], ["Green 3"], ["Green 4"]], "Red 5")
    game.play_turn()
    assert game.current_player == 2
    assert game.direction == 1


def test_draw_two_with_three_players() -> None:
    game = _rig(
        UnoGame(3),
        [["Red Draw Two", "Blue 2"], ["Green 3"], ["Green 4"]],
        "Red 5",
        draw=["Yellow 1", "Yellow 2", "Yellow 3"],
    )
    game.play_turn()
    assert len(game.hands[1]) == 3
    assert game.hands[1].cards()[1:] == _cards(["Yellow 3", "Yellow 2"])
    assert len(game.draw_pile) == 1
    assert game.current_player == 2
    assert "player 1 drew 2 cards (penalty)" in game.history


def test_draw_two_with_short_pile() -> None:
    game = _rig(
        UnoGame(3),
        [["Red Draw Two", "Blue 2"], ["Green 3"], ["Green 4"]],
        "Red 5",
        draw=["Yellow 1"],
    )
    game.play_turn()
    assert len(game.hands[1]) == 2
    assert game.draw_pile.is_empty()
    assert game.current_player == 2


def test_draw_two_follows_direction() -> None:
    game = _rig(
        UnoGame(3),
        [["Red Draw Two", "Blue 2"], ["Green 3"], ["Green 4"]],
        "Red 5",
        draw=["Yellow 1", "Yellow 2"],
    )
    game._turn.direction = -1
    game.play_turn()
    assert len(game.hands[2]) == 3
    assert len(game.hands[1]) == 1
    assert game.current_player == 1


def test_reverse_with_three_players() -> None:
    game = _rig(UnoGame(3), [["Red Reverse", "Blue 2"], ["Green 3"], ["Green 4"]], "Red 5")
    game.play_turn()
    assert game.direction == -1
    assert game.current_player == 2
    assert "Counter-clockwise" in game.describe()


def test_reverse_with_two_players_default() -> None:
    game = _rig(
        UnoGame(2),
        [["Red Reverse", "Blue 2"], ["Red 3", "Green 9"]],
        "Red 5",
    )
    game.play_turn()
    assert game.direction == -1
    assert game.current_player == 1
    # Play keeps alternating after the flip
    game.play_turn()
    assert game.current_player == 0


def test_reverse_with_two_players_as_skip() -> None:
    game = _rig(
        UnoGame(2, reverse_skips_with_two_players=True),
        [["Red Reverse", "Red 2", "Blue 2"], ["Green 3"]],
        "Red 5",
    )
    game.play_turn()
    assert game.direction == -1
    assert game.current_player == 0
    game.play_turn()
    assert game.discard_pile.top() == Card.from_label("Red 2")
    assert game.current_player == 1


def test_retry_policy_plays_drawn_card() -> None:
    hand = ["Blue Skip", "Green 7", "Yellow 1", "Blue 2", "Green 8", "Yellow 9", "Blue 0"]
    game = _rig(UnoGame(2), [hand, ["Green 3"] * 7], "Red 5", draw=["Blue 4", "Red 3"])
    game.play_turn()
    assert game.discard_pile.top() == Card.from_label("Red 3")
    assert len(game.hands[0]) == 7
    assert len(game.draw_pile) == 1
    assert game.current_player == 1
    assert game.history[-2:] == ("player 0 drew a card", "player 0 played Red 3")


def test_retry_policy_keeps_unplayable_card() -> None:
    game = _rig(UnoGame(2), [["Blue 1"], ["Green 3"]], "Red 5", draw=["Yellow 8"])
    game.play_turn()
    assert game.hands[0].cards() == _cards(["Blue 1", "Yellow 8"])
    assert game.discard_pile.top() == Card.from_label("Red 5")
    assert game.current_player == 1


def test_immediate_policy_plays_drawn_card() -> None:
    game = _rig(
        UnoGame(2, draw_policy=DrawPolicy.IMMEDIATE),
        [["Blue 1", "Green 2"], ["Green 3"]],
        "Red 5",
        draw=["Red 3"],
    )
    game.play_turn()
    assert game.discard_pile.top() == Card.from_label("Red 3")
    assert game.hands[0].cards() == _cards(["Blue 1", "Green 2"])
    assert game.current_player == 1


def test_immediate_policy_applies_drawn_action() -> None:
    game = _rig(
        UnoGame(3, draw_policy="immediate"),
        [["Blue 1"], ["Green 3"], ["Green 4"]],
        "Red 5",
        draw=["Red Skip"],
    )
    game.play_turn()
    assert game.discard_pile.top() == Card.from_label("Red Skip")
    assert game.current_player == 2


def test_immediate_policy_keeps_unplayable_card() -> None:
    game = _rig(
        UnoGame(2, draw_policy=DrawPolicy.IMMEDIATE),
        [["Blue 1"], ["Green 3"]],
        "Red 5",
        draw=["Yellow 8"],
    )
    game.play_turn()
    assert game.hands[0].cards() == _cards(["Blue 1", "Yellow 8"])
    assert game.current_player == 1


def test_empty_draw_pile_passes_and_stalls() -> None:
    game = _rig(UnoGame(2), [["Blue 1"], ["Green 3"]], "Red 5")
    game.play_turn()
    assert game.current_player == 1
    assert not game.is_stalled()
    game.play_turn()
    assert game.is_stalled()
    assert not game.is_game_over()
    assert game.snapshot().hand_sizes == (1, 1)


def test_win_on_last_card() -> None:
    game = _rig(UnoGame(3), [["Red 1"], ["Green 3"], ["Green 4"]], "Red 5")
    game.play_turn()
    assert game.is_game_over()
    assert game.get_winner() == 0
    assert game.current_player == 0
    assert game.phase is GamePhase.FINISHED
    assert game.history[-1] == "player 0 played Red 1 and WON!"


def test_win_on_action_card_does_not_advance() -> None:
    game = _rig(
        UnoGame(3),
        [["Red Draw Two"], ["Green 3"], ["Green 4"]],
        "Red 5",
        draw=["Yellow 1", "Yellow 2"],
    )
    game.play_turn()
    assert game.get_winner() == 0
    assert game.current_player == 0
    assert len(game.hands[1]) == 3


def test_play_turn_after_win_is_noop() -> None:
    game = _rig(UnoGame(2), [["Red 1"], ["Green 3"]], "Red 5", draw=["Blue 1"])
    game.play_turn()
    before = game.snapshot()
    game.play_turn()
    game.play_turn()
    assert game.snapshot() == before
    assert len(game.draw_pile) == 1


def test_describe() -> None:
    game = _rig(UnoGame(2), [["Red 1", "Blue 2"], ["Green 3"]], "Red 5")
    before = game.snapshot()
    text = game.describe()
    assert text == "Player 0's turn, Direction: Clockwise, Top: Red 5, Players cards: P0:2, P1:1"
    assert describe(before) == text
    assert game.snapshot() == before


def test_describe_winner() -> None:
    game = _rig(UnoGame(2), [["Red 1"], ["Green 3"]], "Red 5")
    game.play_turn()
    assert game.describe().endswith("Top: Red 1, Players cards: P0:0, P1:1, Winner: P0")


@pytest.mark.parametrize("policy", list(DrawPolicy))
def test_history_reset_on_initialize(policy: DrawPolicy) -> None:
    game = _rig(UnoGame(2, draw_policy=policy), [["Blue 1"], ["Green 3"]], "Red 5", draw=["Red 3"])
    game.play_turn()
    assert game.history
    game.initialize()
    assert game.history == ()
