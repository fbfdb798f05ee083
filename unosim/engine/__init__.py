"""Game engine for UNO."""

from unosim.engine.card import Card, Color, Label
from unosim.engine.deck import DECK_SIZE, DEFAULT_SEED, HAND_SIZE, build_deck, shuffle_deck
from unosim.engine.game import UnoGame
from unosim.engine.game_state import GamePhase, GameSnapshot, TurnState
from unosim.engine.hand import Hand
from unosim.engine.piles import DiscardPile, DrawPile
from unosim.engine.report import describe
from unosim.engine.rules import ACTION_PRIORITY, DrawPolicy, next_index, select_card

__all__ = [
    "Card",
    "Color",
    "Label",
    "DECK_SIZE",
    "DEFAULT_SEED",
    "HAND_SIZE",
    "build_deck",
    "shuffle_deck",
    "UnoGame",
    "GamePhase",
    "GameSnapshot",
    "TurnState",
    "Hand",
    "DiscardPile",
    "DrawPile",
    "describe",
    "ACTION_PRIORITY",
    "DrawPolicy",
    "next_index",
    "select_card",
]
