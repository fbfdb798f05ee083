"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Union

from unosim.engine import DrawPolicy
from unosim.orchestration.game_runner import GameRunner


@dataclass
class TournamentResult:
    """Wins per player index over a series of games."""

    wins: Dict[int, int] = field(default_factory=dict)
    draws: int = 0
    num_games: int = 0


def run_tournament(
    num_players: int,
    num_games: int = 100,
    seed: int | None = None,
    draw_policy: Union[DrawPolicy, str] = DrawPolicy.RETRY,
    reverse_skips_with_two_players: bool = False,
    max_turns: int = 1000,
) -> TournamentResult:
    """Play ``num_games`` games, each dealt from its own seed.

    Per-game seeds come from ``random.Random(seed)``, so a tournament seed
    reproduces the whole series. Games without a winner (stalled or cut off
    at ``max_turns``) count as draws.
    """
    wins: Dict[int, int] = defaultdict(int)
    draws = 0

    rng = random.Random(seed)
    for _ in range(num_games):
        runner = GameRunner(
            num_players,
            seed=rng.randint(0, 2**31 - 1),
            draw_policy=draw_policy,
            reverse_skips_with_two_players=reverse_skips_with_two_players,
            max_turns=max_turns,
        )
        result = runner.run()
        if result.winner is not None:
            wins[result.winner] += 1
        else:
            draws += 1

    return TournamentResult(wins=dict(wins), draws=draws, num_games=num_games)
