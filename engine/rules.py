"""
Rules evaluator for TicTacToe.
Checks if a mark has won, if the game is drawn, and which cells are free.

Every function here is pure: the board is only read, never changed.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Line, Mark, WIN_LINES


@dataclass(frozen=True)
class Evaluation:
    """Verdict for one board snapshot."""
    winner: Optional[Mark]
    is_draw: bool
    legal_moves: Tuple[int, ...]


def winning_line(board: Board) -> Optional[Line]:
    """
    Get the first completed line, if there is one.

    Lines are checked rows first, then columns, then diagonals.

    Args:
        board: The board to check.

    Returns:
        The winning line as an index triple, or None.
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def winner(board: Board) -> Optional[Mark]:
    """
    Check if there's a winner.

    Args:
        board: The board to check.

    Returns:
        The winning Mark, or None if no line is complete.
    """
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def legal_moves(board: Board) -> Tuple[int, ...]:
    """Return indices of all empty cells in ascending order."""
    return tuple(index for index, cell in enumerate(board) if cell is None)


def is_draw(board: Board) -> bool:
    """A draw is a full board with no completed line."""
    return winner(board) is None and not legal_moves(board)


def evaluate(board: Board) -> Evaluation:
    """
    Evaluate a board for the session controller.

    Args:
        board: Current board snapshot.

    Returns:
        Evaluation with winner, draw flag and legal moves.
    """
    moves = legal_moves(board)
    who = winner(board)
    return Evaluation(
        winner=who,
        is_draw=who is None and not moves,
        legal_moves=moves,
    )


# Quick test
if __name__ == "__main__":
    from .board import parse_board, format_board

    print("Testing rules...")

    board = parse_board("XXX .O. O..")
    print(format_board(board))
    print(f"Winner: {winner(board)}  line: {winning_line(board)}")
    assert winner(board) == Mark.X

    board = parse_board("XOX XOO OXX")
    print(format_board(board))
    print(f"Draw: {is_draw(board)}")
    assert is_draw(board)

    print("\nRules test done!")
