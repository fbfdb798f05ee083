"""Card, Color and Label types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors, in deck-building order."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"


class Label(str, Enum):
    """Card faces: numbers 0-9 and the three action cards."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    SKIP = "Skip"
    REVERSE = "Reverse"
    DRAW_TWO = "Draw Two"

    @property
    def is_action(self) -> bool:
        return self in (Label.SKIP, Label.REVERSE, Label.DRAW_TWO)


@dataclass(frozen=True)
class Card:
    """A single card. Equal cards are interchangeable; a deck holds duplicates."""

    color: Color
    label: Label

    @property
    def is_action(self) -> bool:
        return self.label.is_action

    def matches(self, top: Optional["Card"]) -> bool:
        """True if this card can be played on ``top`` (any card plays on an empty pile)."""
        if top is None:
            return True
        return self.color == top.color or self.label == top.label

    @classmethod
    def from_label(cls, text: str) -> "Card":
        """Parse ``"Red 5"`` or ``"Blue Draw Two"`` back into a Card."""
        color_part, _, label_part = text.strip().partition(" ")
        try:
            return cls(Color(color_part.title()), Label(label_part.strip().title()))
        except ValueError:
            raise ValueError(f"Invalid card label: {text!r}") from None

    def __str__(self) -> str:
        return f"{self.color.value} {self.label.value}"
