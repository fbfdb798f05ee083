"""Human-readable game state."""

from unosim.engine.game_state import GameSnapshot


def _direction_label(direction: int) -> str:
    return "Clockwise" if direction == 1 else "Counter-clockwise"


def describe(snapshot: GameSnapshot) -> str:
    """Render ``snapshot`` as one line, e.g.

    ``Player 0's turn, Direction: Clockwise, Top: Red 5, Players cards: P0:7, P1:7``
    """
    top = str(snapshot.top_discard) if snapshot.top_discard is not None else "None"
    counts = ", ".join(f"P{i}:{size}" for i, size in enumerate(snapshot.hand_sizes))
    text = (
        f"Player {snapshot.current_player}'s turn, "
        f"Direction: {_direction_label(snapshot.direction)}, "
        f"Top: {top}, "
        f"Players cards: {counts}"
    )
    if snapshot.winner is not None:
        text += f", Winner: P{snapshot.winner}"
    return text
