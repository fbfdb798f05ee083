"""Simulate a game and print the table after every turn."""

from unosim.engine import UnoGame


def main():
    game = UnoGame(4, seed=42)
    game.initialize()
    print(game.describe())

    turns = 0
    while not game.is_game_over() and not game.is_stalled() and turns < 1000:
        game.play_turn()
        turns += 1
        # Log the last move from history to see the game progress
        if game.history:
            print(f"> {game.history[-1]}")
        print(game.describe())

    print(f"Game finished! Winner: {game.get_winner()}")
    print(f"Turns: {turns}")


if __name__ == "__main__":
    main()
