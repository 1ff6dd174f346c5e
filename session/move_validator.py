"""
Move validator for TicTacToe.
Validates that a clicked cell is a legal move right now.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from engine.board import BOARD_SIZE
from engine.rules import legal_moves


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell index must be 0-8
    3. Can only place on empty cells
    4. In AI mode the human can't move on the computer's turn
    """

    def validate_move(self, game, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: Current GameSession.
            index: Cell the player wants to mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not (0 <= index < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        # Check if cell is empty
        if game.board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game.board[index].value}"
            )

        # Check if it's the computer's turn
        if game.is_ai_turn():
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the computer to move!"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game) -> Tuple[int, ...]:
        """
        Get all valid moves for the side to move.

        Args:
            game: Current GameSession.

        Returns:
            Tuple of free cell indices, empty once the game is over.
        """
        if game.is_game_over:
            return ()

        return legal_moves(game.board)


# Quick test
if __name__ == "__main__":
    from .game_state import GameSession, GameMode

    print("Testing MoveValidator...")

    game = GameSession(mode=GameMode.HUMAN)
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(game, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    game.play(4)

    # Test invalid move (same cell)
    result = validator.validate_move(game, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    # Test out of range
    result = validator.validate_move(game, 12)
    print(f"Move 12: valid={result.is_valid}, error={result.error_message}")

    # Get valid moves
    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
