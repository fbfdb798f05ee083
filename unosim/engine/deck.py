"""Deck creation and shuffling."""

import random
from typing import List

from unosim.engine.card import Card, Color, Label

DECK_SIZE = 100
HAND_SIZE = 7
DEFAULT_SEED = 1234


def build_deck() -> List[Card]:
    """Create the 100-card deck in fixed order, no wild cards.

    - Per color: one 0, two each of 1-9, two each of Skip, Reverse, Draw Two
    - 4 colors x 25 cards = 100 cards
    """
    cards: List[Card] = []

    for color in Color:
        # One zero per color
        cards.append(Card(color=color, label=Label.ZERO))
        # Two of each 1-9 and action cards per color
        for label in list(Label)[1:]:
            cards.append(Card(color=color, label=label))
            cards.append(Card(color=color, label=label))

    return cards


def shuffle_deck(deck: List[Card], seed: int = DEFAULT_SEED) -> List[Card]:
    """Return a shuffled copy of ``deck``.

    Uses ``random.Random(seed).shuffle`` (Fisher-Yates over a Mersenne Twister),
    so the same seed always gives the same order. The input list is not touched.
    """
    shuffled = list(deck)
    rng = random.Random(seed)
    rng.shuffle(shuffled)
    return shuffled
