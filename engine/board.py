"""
Board model for TicTacToe.
Marks, the 9-cell board and the fixed table of winning lines.

Board representation: tuple of length 9, row-major
  - None: empty
  - Mark.X / Mark.O: occupied

   0 | 1 | 2
  ---+---+---
   3 | 4 | 5
  ---+---+---
   6 | 7 | 8
"""

from enum import Enum
from typing import Dict, Optional, Tuple


class Mark(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


EMPTY = None
BOARD_SIZE = 9

Board = Tuple[Optional[Mark], ...]
Line = Tuple[int, int, int]

# All possible winning lines, checked in this order
WIN_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

# Symbols accepted by parse_board for an empty cell
_EMPTY_SYMBOLS = {".", "-", "_"}
_IGNORED_SYMBOLS = {" ", "\t", "\n", "\r", "|", ",", "+"}


def empty_board() -> Board:
    """Return a board with nine empty cells."""
    return (EMPTY,) * BOARD_SIZE


def place(board: Board, index: int, mark: Mark) -> Board:
    """
    Place a mark on a copy of the board.

    The input board is left untouched, so every search branch
    works on its own board.

    Args:
        board: Current board.
        index: Cell index (0-8).
        mark: Mark to place.

    Returns:
        New board with the mark at index.
    """
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def count_marks(board: Board) -> Dict[Mark, int]:
    """Count how many cells each mark occupies."""
    counts = {Mark.X: 0, Mark.O: 0}
    for cell in board:
        if cell is not None:
            counts[cell] += 1
    return counts


def side_to_move(board: Board) -> Mark:
    """Infer the mark to move from the counts (X plays first)."""
    counts = count_marks(board)
    return Mark.X if counts[Mark.X] == counts[Mark.O] else Mark.O


def parse_board(text: str) -> Board:
    """
    Build a board from text like "XX. .O. ...".

    Args:
        text: Nine symbols from X, O and . (also - or _ for empty).
              Whitespace, commas and | are ignored.

    Returns:
        The parsed board.

    Raises:
        ValueError: On an unknown symbol or a cell count other than 9.
    """
    cells = []
    for symbol in text:
        if symbol in _IGNORED_SYMBOLS:
            continue
        upper = symbol.upper()
        if upper in ("X", "O"):
            cells.append(Mark(upper))
        elif symbol in _EMPTY_SYMBOLS:
            cells.append(EMPTY)
        else:
            raise ValueError(f"Unknown board symbol: {symbol!r}")

    if len(cells) != BOARD_SIZE:
        raise ValueError(f"Board must have exactly {BOARD_SIZE} cells, got {len(cells)}")

    return tuple(cells)


def format_board(board: Board) -> str:
    """
    Render the board as text.

    Empty cells show their index so a console player can see
    which numbers are still free.
    """
    rows = []
    for row in range(3):
        symbols = []
        for col in range(3):
            index = row * 3 + col
            cell = board[index]
            symbols.append(str(index) if cell is None else cell.value)
        rows.append(" " + " | ".join(symbols) + " ")
    return "\n---+---+---\n".join(rows)


# Quick test
if __name__ == "__main__":
    print("Testing board...")

    board = empty_board()
    for index, mark in ((4, Mark.X), (0, Mark.O), (8, Mark.X)):
        board = place(board, index, mark)
        print(f"\n{mark.value} moves to {index}")
        print(format_board(board))

    print(f"\nCounts: {count_marks(board)}  next: {side_to_move(board).value}")
    assert side_to_move(board) == Mark.O
    assert parse_board("O.. .X. ..X") == board

    print("\nBoard test done!")
