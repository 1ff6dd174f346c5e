"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the game mode and the scores.

The engine never keeps state between calls; everything mutable lives here.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass, field

from engine.board import Board, Mark, empty_board, place, format_board
from engine.rules import Evaluation, evaluate, winning_line
from engine.ai_player import AIPlayer

from .config import GameConfig
from .move_validator import MoveValidator


class GameMode(Enum):
    """Who plays the O side."""
    HUMAN = "2-Player"
    AI = "Play vs AI"


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class TurnState:
    """
    Tagged turn state.

    IN_PROGRESS carries the mark to move, WON carries the winner,
    DRAW carries neither.
    """
    status: GameStatus
    to_move: Optional[Mark] = None
    winner: Optional[Mark] = None

    @classmethod
    def turn(cls, mark: Mark) -> "TurnState":
        return cls(GameStatus.IN_PROGRESS, to_move=mark)

    @classmethod
    def won(cls, mark: Mark) -> "TurnState":
        return cls(GameStatus.WON, winner=mark)

    @classmethod
    def draw(cls) -> "TurnState":
        return cls(GameStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


@dataclass
class Scoreboard:
    """Running tally of finished rounds."""
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, winner: Optional[Mark]):
        """
        Record a finished round.

        Args:
            winner: The winning mark, or None for a draw.
        """
        if winner == Mark.X:
            self.x_wins += 1
        elif winner == Mark.O:
            self.o_wins += 1
        else:
            self.draws += 1

    def wins_for(self, mark: Mark) -> int:
        """Get the number of rounds won by a mark."""
        return self.x_wins if mark == Mark.X else self.o_wins


@dataclass
class GameSession:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - The current board
    - Turn state (whose turn, or the final result)
    - Game mode (2-Player or vs AI)
    - Scores across rounds
    """

    board: Board = field(default_factory=empty_board)
    state: TurnState = field(default_factory=lambda: TurnState.turn(GameConfig.FIRST_MARK))
    mode: GameMode = field(default_factory=lambda: GameMode[GameConfig.DEFAULT_MODE])
    scores: Scoreboard = field(default_factory=Scoreboard)

    def __post_init__(self):
        self.validator = MoveValidator()
        self.ai = AIPlayer(GameConfig.AI_MARK)

    @property
    def current_player(self) -> Optional[Mark]:
        """Mark to move, or None once the game is over."""
        return self.state.to_move

    @property
    def winner(self) -> Optional[Mark]:
        return self.state.winner

    @property
    def is_game_over(self) -> bool:
        return self.state.is_over

    @property
    def is_draw(self) -> bool:
        return self.state.status == GameStatus.DRAW

    def is_ai_turn(self) -> bool:
        """True if the computer is the side to move."""
        return self.mode == GameMode.AI and self.current_player == GameConfig.AI_MARK

    def needs_ai_move(self) -> bool:
        """True if the computer should move now."""
        return not self.is_game_over and self.is_ai_turn()

    def evaluation(self) -> Evaluation:
        """Evaluate the live board."""
        return evaluate(self.board)

    def winning_cells(self):
        """Get the completed line, if there is one."""
        return winning_line(self.board)

    def play(self, index: int) -> bool:
        """
        Make a human move at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        result = self.validator.validate_move(self, index)
        if not result.is_valid:
            print(f"Move rejected: {result.error_message}")
            return False

        self._apply_move(index)
        return True

    def play_ai_move(self) -> Optional[int]:
        """
        Let the computer make its move.

        Returns:
            The cell the computer marked, or None if it did not move.
        """
        if not self.needs_ai_move():
            return None

        move = self.ai.get_best_move(self.board)

        if move is None:
            print("AI could not find a move!")
            return None

        # Never overwrite a mark, even if the search result is stale
        if self.board[move] is not None:
            print(f"Ignoring AI move {move}: cell is occupied")
            return None

        self._apply_move(move)
        return move

    def _apply_move(self, index: int):
        """Place the current mark and advance the turn state."""
        mark = self.current_player
        self.board = place(self.board, index, mark)

        verdict = evaluate(self.board)
        if verdict.winner is not None:
            self.state = TurnState.won(verdict.winner)
            self.scores.record(verdict.winner)
        elif verdict.is_draw:
            self.state = TurnState.draw()
            self.scores.record(None)
        else:
            self.state = TurnState.turn(mark.opposite())

    def new_round(self):
        """Start a new round, keeping the score tally intact."""
        self.board = empty_board()
        self.state = TurnState.turn(GameConfig.FIRST_MARK)

    def reset(self):
        """Reset the board, the scores and the mode."""
        self.new_round()
        self.mode = GameMode[GameConfig.DEFAULT_MODE]
        self.scores = Scoreboard()

    def change_mode(self, mode: GameMode):
        """Switch between 2-Player and AI mode. Starts a new round."""
        self.mode = mode
        self.new_round()

    def status_text(self) -> str:
        """Get the banner text for the current state."""
        if self.state.status == GameStatus.WON:
            return f"{self.winner.value} wins!"
        if self.state.status == GameStatus.DRAW:
            return "It's a draw!"
        return f"{self.current_player.value}'s turn"

    def print_board(self):
        """Print the board to console."""
        print()
        print(format_board(self.board))
        print(f"\n{self.status_text()}")


# Quick test
if __name__ == "__main__":
    print("Testing GameSession...")

    game = GameSession(mode=GameMode.HUMAN)

    # Simulate a game
    for index in (4, 0, 2, 6, 3, 5, 8, 1, 7):
        print(f"\n{game.current_player.value} moves to {index}")
        game.play(index)
        game.print_board()
        if game.is_game_over:
            break

    print(f"\nScores: {game.scores}")
    print("\nGame state test done!")
