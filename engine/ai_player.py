"""
AI player for TicTacToe.
Uses the minimax search to choose the best move.
"""

from typing import Optional

from .board import Board, Mark, side_to_move
from .minimax import SearchResult, search
from .rules import winner


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, mark: Mark = Mark.O):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
        """
        self.mark = mark
        self.opponent = mark.opposite()

        # Keep track of the last search (for debugging)
        self.last_result: Optional[SearchResult] = None
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            board: Current board, with the AI to move.

        Returns:
            Cell index of the best move, or None if no moves available.
        """
        self.last_result = None
        self.moves_evaluated = 0

        # Search is never started on a finished game
        if winner(board) is not None:
            print("Warning: Game already has a winner!")
            return None

        # Check if it's our turn
        if side_to_move(board) != self.mark:
            print(f"Warning: It's not {self.mark.value}'s turn!")
            return None

        result = search(board, self.mark, self.mark, self.opponent)
        self.last_result = result
        self.moves_evaluated = result.nodes

        if result.move is None:
            return None

        print(f"AI evaluated {result.nodes} positions. Best move: {result.move} (score: {result.score})")

        return result.move

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, 3)
        return f"Place {self.mark.value} at cell {move} (row {row}, col {col})"


# Quick test
if __name__ == "__main__":
    from .board import parse_board, format_board

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = parse_board("XX. .O. ...")
    print(format_board(board))
    print("\nAI is O. X is about to win with cell 2!")

    move = ai.get_best_move(board)
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = parse_board("XX. OO. ..X")
    print(format_board(board))
    print("\nAI is O. Can win with cell 5!")

    move = ai.get_best_move(board)
    assert move == 5, f"Expected 5, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
