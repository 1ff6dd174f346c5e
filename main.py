"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default. With --no-ui the game runs in the
console: type a cell number (0-8) to play.

Run this script to play TicTacToe against the computer or a friend!
"""

import time
from typing import Optional

from session.config import GameConfig
from session.game_state import GameSession, GameMode


class ConsoleGame:
    """
    Console controller for TicTacToe.

    Game flow:
    1. Player to move types a cell number
    2. In AI mode the computer answers after a short pause
    3. Repeat until someone wins or it's a draw
    4. Show the score and start another round
    """

    def __init__(self, mode: GameMode = GameMode.AI, rounds: Optional[int] = None):
        """
        Initialize the console game.

        Args:
            mode: 2-Player or Play vs AI.
            rounds: Stop after this many rounds (None = until quit).
        """
        self.game = GameSession()
        self.game.change_mode(mode)
        self.rounds = rounds
        self.is_running = False

        print("\n" + "="*60)
        print("   TicTacToe - Ready!")
        print(f"   Mode: {mode.value}")
        if mode == GameMode.AI:
            print(f"   You play: {GameConfig.HUMAN_MARK.value}   Computer plays: {GameConfig.AI_MARK.value}")
        print("="*60 + "\n")

    def start(self):
        """Start the game."""
        print("Enter a cell number (0-8). 'n' = new round, 'q' = quit\n")

        self.is_running = True
        played = 0

        while self.is_running:
            self._play_round()
            if self.game.is_game_over:
                played += 1
                self._show_round_result()
            if not self.is_running:
                break
            if self.rounds is not None and played >= self.rounds:
                break
            self.game.new_round()

        self._show_scores()

    def _play_round(self):
        """Play until the round ends or the user leaves it."""
        while self.is_running and not self.game.is_game_over:
            self.game.print_board()

            if self.game.needs_ai_move():
                print("\n>>> Computer is thinking...")
                time.sleep(GameConfig.AI_DELAY_MS / 1000.0)
                move = self.game.play_ai_move()
                if move is not None:
                    print(f">>> Computer plays cell {move}")
                continue

            command = input(f"\n{self.game.current_player.value} > ").strip().lower()

            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "n":
                print("\nStarting a new round...")
                return
            else:
                try:
                    index = int(command)
                except ValueError:
                    print("Please type a number 0-8, 'n' or 'q'.")
                    continue
                self.game.play(index)

    def _show_round_result(self):
        """Show the result of the finished round."""
        print("\n" + "="*60)
        print("   ROUND OVER!")
        print("="*60)

        self.game.print_board()

        winner = self.game.winner
        if winner is None:
            print("\n🤝 It's a draw! Good game!")
        elif self.game.mode == GameMode.AI and winner == GameConfig.AI_MARK:
            print("\n🤖 Computer wins! Better luck next time!")
        else:
            print(f"\n🎉 Congratulations {winner.value}! You won!")

    def _show_scores(self):
        """Print the scoreboard."""
        scores = self.game.scores
        print("\n" + "="*60)
        print(f"   X wins: {scores.x_wins}   O wins: {scores.o_wins}   Draws: {scores.draws}")
        print("="*60)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=["ai", "human"],
        default=GameConfig.DEFAULT_MODE.lower(),
        help="Play vs AI or 2-Player"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of rounds to play in console mode"
    )

    args = parser.parse_args()
    mode = GameMode[args.mode.upper()]

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(mode=mode)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(mode=mode, rounds=args.rounds)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
