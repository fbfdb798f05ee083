"""UNO rules: card selection policy and turn-order arithmetic."""

from enum import Enum
from typing import Optional

from unosim.engine.card import Card, Label
from unosim.engine.hand import Hand

# Order in which action cards are tried once plain color/label matching fails.
ACTION_PRIORITY = (Label.SKIP, Label.REVERSE, Label.DRAW_TWO)


class DrawPolicy(str, Enum):
    """What happens to the card drawn when a player has nothing to play.

    RETRY: the drawn card goes into the hand and selection runs once more.
    IMMEDIATE: the drawn card is played straight away if it matches the top
    card, otherwise it goes into the hand.
    """

    RETRY = "retry"
    IMMEDIATE = "immediate"


def select_card(hand: Hand, top: Optional[Card]) -> Optional[Card]:
    """Remove and return the card the player plays on ``top``, or None.

    Rules, first that yields a card wins, each scanning the hand front to back:
    1. first card with the top card's color
    2. first card with the top card's label
    3. first playable action card, trying Skip, then Reverse, then Draw Two
    With no top card any card is playable and the first card in hand is used.
    """
    if top is None:
        return hand.find_and_remove(lambda c: True)

    card = hand.find_and_remove(lambda c: c.color == top.color)
    if card is not None:
        return card

    card = hand.find_and_remove(lambda c: c.label == top.label)
    if card is not None:
        return card

    # Any card found here already matched rule 1 or 2
    for action in ACTION_PRIORITY:
        card = hand.find_and_remove(lambda c: c.label == action and c.matches(top))
        if card is not None:
            return card

    return None


def next_index(current: int, direction: int, num_players: int, steps: int = 1) -> int:
    """Index reached by moving ``steps`` seats from ``current`` in ``direction``."""
    return (current + direction * steps) % num_players
