"""Game orchestration."""

from unosim.orchestration.game_runner import GameResult, GameRunner
from unosim.orchestration.tournament import TournamentResult, run_tournament

__all__ = ["GameResult", "GameRunner", "TournamentResult", "run_tournament"]
