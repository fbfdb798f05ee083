"""Turn state and read-only snapshots of a game."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from unosim.engine.card import Card


class GamePhase(str, Enum):
    """Lifecycle of a game."""

    CREATED = "created"  # constructed, initialize() not called yet
    DEALING = "dealing"
    AWAITING_TURN = "awaiting_turn"
    FINISHED = "finished"


@dataclass
class TurnState:
    """Whose turn it is, which way play goes, and who (if anyone) has won."""

    current_player: int = 0
    direction: int = 1  # 1 = ascending index (clockwise), -1 = descending
    winner: Optional[int] = None


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of everything observable about a game at one moment."""

    phase: GamePhase
    current_player: int
    direction: int
    winner: Optional[int]
    top_discard: Optional[Card]
    hand_sizes: tuple[int, ...]
    draw_pile_size: int
    discard_pile_size: int
    turns_played: int = 0
    stalled: bool = False
    history: tuple[str, ...] = field(default_factory=tuple)

    @property
    def num_players(self) -> int:
        return len(self.hand_sizes)

    @property
    def total_cards(self) -> int:
        """Cards in play across both piles and every hand."""
        return self.draw_pile_size + self.discard_pile_size + sum(self.hand_sizes)
