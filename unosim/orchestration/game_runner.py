"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from unosim.engine import DEFAULT_SEED, DrawPolicy, GameSnapshot, UnoGame

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]
    num_turns: int
    num_players: int
    stalled: bool = False
    history: tuple[str, ...] = field(default_factory=tuple)


class GameRunner:
    """Runs a single UNO game to completion."""

    def __init__(
        self,
        num_players: int,
        seed: int = DEFAULT_SEED,
        draw_policy: Union[DrawPolicy, str] = DrawPolicy.RETRY,
        reverse_skips_with_two_players: bool = False,
        max_turns: int = 1000,
        on_turn: Optional[Callable[[GameSnapshot], None]] = None,
    ):
        self._game = UnoGame(
            num_players,
            seed=seed,
            draw_policy=draw_policy,
            reverse_skips_with_two_players=reverse_skips_with_two_players,
        )
        self._max_turns = max_turns
        self._on_turn = on_turn

    @property
    def game(self) -> UnoGame:
        return self._game

    def run(self) -> GameResult:
        """Deal and play until someone wins, the table stalls, or ``max_turns`` is hit."""
        game = self._game
        game.initialize()
        num_turns = 0

        while not game.is_game_over() and num_turns < self._max_turns:
            if self._on_turn is not None:
                self._on_turn(game.snapshot())
            game.play_turn()
            num_turns += 1
            if game.is_stalled():
                logger.info("no player can move after %d turns; game drawn", num_turns)
                break

        if not game.is_game_over() and not game.is_stalled():
            logger.warning("game stopped at the %d turn limit without a winner", self._max_turns)

        return GameResult(
            winner=game.get_winner(),
            num_turns=num_turns,
            num_players=game.num_players,
            stalled=game.is_stalled(),
            history=game.history,
        )
