"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from unosim.config import GameConfig

app = typer.Typer(help="Automated UNO games (numbers, Skip, Reverse, Draw Two)")


def _load_config(log_level: Optional[str]) -> GameConfig:
    try:
        config = GameConfig.from_env()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if log_level is not None:
        config.log_level = log_level.upper()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return config


def _check_players(players: int) -> int:
    if players < 1:
        raise typer.BadParameter(f"Need at least 1 player, got {players}.")
    return players


@app.command()
def play(
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of players"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Shuffle seed"),
    policy: Optional[str] = typer.Option(
        None,
        "--policy",
        "-p",
        help="What to do with a drawn card: retry (re-check the hand) or immediate (play it if it matches)",
    ),
    reverse_skip: Optional[bool] = typer.Option(
        None,
        "--reverse-skip/--no-reverse-skip",
        help="With two players, Reverse acts like Skip",
    ),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", "-t", help="Turn limit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print the table before every turn"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ..."),
) -> None:
    """Run a single UNO game."""
    from unosim.engine import DrawPolicy, describe
    from unosim.orchestration.game_runner import GameRunner

    config = _load_config(log_level)
    try:
        draw_policy = DrawPolicy((policy or config.draw_policy.value).lower())
    except ValueError:
        raise typer.BadParameter(f"Unknown policy: {policy}. Use 'retry' or 'immediate'.") from None

    runner = GameRunner(
        _check_players(players if players is not None else config.num_players),
        seed=seed if seed is not None else config.seed,
        draw_policy=draw_policy,
        reverse_skips_with_two_players=(
            reverse_skip if reverse_skip is not None else config.reverse_skips_with_two_players
        ),
        max_turns=max_turns if max_turns is not None else config.max_turns,
        on_turn=(lambda snap: typer.echo(describe(snap))) if verbose else None,
    )
    result = runner.run()
    if verbose:
        typer.echo(runner.game.describe())
    if result.winner is not None:
        typer.echo(f"Winner: player {result.winner}")
    elif result.stalled:
        typer.echo("Winner: None (stalled)")
    else:
        typer.echo("Winner: None (turn limit)")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    players: Optional[int] = typer.Option(None, "--players", "-n", help="Number of players"),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Tournament seed"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ..."),
) -> None:
    """Run a tournament."""
    from unosim.orchestration.tournament import run_tournament

    config = _load_config(log_level)
    result = run_tournament(
        _check_players(players if players is not None else config.num_players),
        num_games=games,
        seed=seed if seed is not None else config.seed,
        draw_policy=config.draw_policy,
        reverse_skips_with_two_players=config.reverse_skips_with_two_players,
        max_turns=config.max_turns,
    )
    typer.echo("Tournament results:")
    for pid, w in sorted(result.wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  player {pid}: {w} wins")
    typer.echo(f"  draws: {result.draws}")


if __name__ == "__main__":
    app()
