"""The turn engine: owns hands, piles and turn order, and plays one turn at a time."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from unosim.engine.card import Card, Label
from unosim.engine.deck import DEFAULT_SEED, HAND_SIZE, build_deck, shuffle_deck
from unosim.engine.game_state import GamePhase, GameSnapshot, TurnState
from unosim.engine.hand import Hand
from unosim.engine.piles import DiscardPile, DrawPile
from unosim.engine.report import describe
from unosim.engine.rules import DrawPolicy, next_index, select_card

logger = logging.getLogger(__name__)


class UnoGame:
    """A single UNO table for ``num_players`` automated players.

    Call :meth:`initialize` once, then :meth:`play_turn` until
    :meth:`is_game_over`. Not thread-safe: one caller drives one instance.

    Args:
        num_players: Number of seats, at least 1.
        seed: Shuffle seed; the same seed always deals the same game.
        draw_policy: What to do with the card drawn when nothing is playable.
        reverse_skips_with_two_players: Treat Reverse as Skip at a two-player table.
    """

    def __init__(
        self,
        num_players: int,
        *,
        seed: int = DEFAULT_SEED,
        draw_policy: Union[DrawPolicy, str] = DrawPolicy.RETRY,
        reverse_skips_with_two_players: bool = False,
    ) -> None:
        if num_players < 1:
            raise ValueError(f"num_players must be at least 1, got {num_players}")
        self._num_players = num_players
        self._seed = seed
        self._draw_policy = DrawPolicy(draw_policy)
        self._reverse_skips = reverse_skips_with_two_players

        self._hands: List[Hand] = [Hand() for _ in range(num_players)]
        self._draw_pile = DrawPile()
        self._discard_pile = DiscardPile()
        self._turn = TurnState()
        self._phase = GamePhase.CREATED
        self._history: List[str] = []
        self._turns_played = 0
        self._idle_turns = 0

    # -- setup -------------------------------------------------------------

    def initialize(self) -> None:
        """Shuffle a fresh deck, deal 7 cards each and turn up the first discard.

        Dealing is round-robin from player 0 and stops early if the deck runs out.
        """
        self._phase = GamePhase.DEALING
        self._draw_pile.reset(shuffle_deck(build_deck(), self._seed))
        self._discard_pile.clear()
        for hand in self._hands:
            hand.clear()

        for _ in range(HAND_SIZE):
            for hand in self._hands:
                card = self._draw_pile.draw()
                if card is None:
                    break
                hand.append(card)

        first = self._draw_pile.draw()
        if first is not None:
            self._discard_pile.push(first)

        self._turn = TurnState()
        self._history = []
        self._turns_played = 0
        self._idle_turns = 0
        self._phase = GamePhase.AWAITING_TURN
        logger.debug(
            "dealt %d players (seed=%s), top card %s, %d left to draw",
            self._num_players, self._seed, first, len(self._draw_pile),
        )

        # Only possible when there are more seats than cards
        for idx, hand in enumerate(self._hands):
            if hand.is_empty():
                self._finish(idx, f"player {idx} was dealt no cards and WON!")
                break

    # -- turns -------------------------------------------------------------

    def play_turn(self) -> None:
        """Play exactly one turn for the current player. No-op once finished."""
        if self._phase is GamePhase.CREATED:
            raise RuntimeError("Game not initialized; call initialize() first")
        if self._turn.winner is not None:
            return

        player = self._turn.current_player
        hand = self._hands[player]
        top = self._discard_pile.top()
        self._turns_played += 1

        played = select_card(hand, top)
        drew = False
        if played is None:
            drawn = self._draw_pile.draw()
            if drawn is not None:
                drew = True
                played = self._resolve_drawn(player, hand, top, drawn)

        if played is None:
            if drew:
                self._idle_turns = 0
            else:
                self._idle_turns += 1
                self._record(f"player {player} passed")
            self._advance(1)
            return

        self._idle_turns = 0
        self._discard_pile.push(played)
        steps = self._apply_effect(played, player)

        if hand.is_empty():
            self._finish(player, f"player {player} played {played} and WON!")
            return

        self._record(f"player {player} played {played}")
        self._advance(steps)

    def _resolve_drawn(self, player: int, hand: Hand, top: Optional[Card], drawn: Card) -> Optional[Card]:
        """Apply the draw policy to ``drawn``; return the card to play, if any."""
        if self._draw_policy is DrawPolicy.RETRY:
            hand.append(drawn)
            self._record(f"player {player} drew a card")
            return select_card(hand, top)

        if drawn.matches(top):
            self._record(f"player {player} drew a card and played it")
            return drawn
        hand.append(drawn)
        self._record(f"player {player} drew a card")
        return None

    def _apply_effect(self, card: Card, player: int) -> int:
        """Resolve an action card; return how many seats the turn moves on."""
        if card.label is Label.SKIP:
            return 2

        if card.label is Label.REVERSE:
            self._turn.direction = -self._turn.direction
            if self._reverse_skips and self._num_players == 2:
                return 2
            return 1

        if card.label is Label.DRAW_TWO:
            victim = next_index(player, self._turn.direction, self._num_players)
            drawn = self._draw_pile.draw_many(2)
            for c in drawn:
                self._hands[victim].append(c)
            self._record(f"player {victim} drew {len(drawn)} cards (penalty)")
            return 2

        return 1

    def _advance(self, steps: int) -> None:
        self._turn.current_player = next_index(
            self._turn.current_player, self._turn.direction, self._num_players, steps
        )

    def _finish(self, player: int, event: str) -> None:
        self._turn.winner = player
        self._phase = GamePhase.FINISHED
        self._record(event)
        logger.info("player %d won after %d turns", player, self._turns_played)

    def _record(self, event: str) -> None:
        self._history.append(event)
        logger.debug(event)

    # -- queries -----------------------------------------------------------

    def is_game_over(self) -> bool:
        return self._turn.winner is not None

    def get_winner(self) -> Optional[int]:
        return self._turn.winner

    def is_stalled(self) -> bool:
        """True when a full round went by with no card played or drawn.

        The draw pile is never refilled, so such a table can never change again.
        """
        return self._turn.winner is None and self._idle_turns >= self._num_players

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self._phase,
            current_player=self._turn.current_player,
            direction=self._turn.direction,
            winner=self._turn.winner,
            top_discard=self._discard_pile.top(),
            hand_sizes=tuple(len(h) for h in self._hands),
            draw_pile_size=len(self._draw_pile),
            discard_pile_size=len(self._discard_pile),
            turns_played=self._turns_played,
            stalled=self.is_stalled(),
            history=tuple(self._history),
        )

    def describe(self) -> str:
        return describe(self.snapshot())

    def recent_history(self, n: int = 10) -> List[str]:
        return self._history[-n:] if n > 0 else []

    @property
    def num_players(self) -> int:
        return self._num_players

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def draw_policy(self) -> DrawPolicy:
        return self._draw_policy

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_player(self) -> int:
        return self._turn.current_player

    @property
    def direction(self) -> int:
        return self._turn.direction

    @property
    def turns_played(self) -> int:
        return self._turns_played

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def hands(self) -> tuple[Hand, ...]:
        return tuple(self._hands)

    @property
    def draw_pile(self) -> DrawPile:
        return self._draw_pile

    @property
    def discard_pile(self) -> DiscardPile:
        return self._discard_pile
