"""
Tests for the board model and rules evaluator.

Usage:
    pytest test_rules.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from engine.board import Mark, WIN_LINES, empty_board, place, parse_board, format_board, count_marks, side_to_move
from engine.rules import winner, winning_line, legal_moves, is_draw, evaluate


def test_win_lines_table():
    """8 lines: rows, then columns, then diagonals."""
    assert len(WIN_LINES) == 8
    assert WIN_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WIN_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WIN_LINES[6:] == ((0, 4, 8), (2, 4, 6))


def test_winner_on_every_line():
    for mark in Mark:
        for line in WIN_LINES:
            board = empty_board()
            for index in line:
                board = place(board, index, mark)
            assert winner(board) == mark
            assert winning_line(board) == line


def test_no_winner():
    assert winner(empty_board()) is None
    assert winner(parse_board("XX. .O. ...")) is None
    assert winner(parse_board("XOX XOO OXX")) is None
    # Mixed line doesn't count
    assert winner(parse_board("XXO ... ...")) is None


def test_legal_moves():
    assert legal_moves(empty_board()) == tuple(range(9))

    board = parse_board("XX. .O. ...")
    moves = legal_moves(board)
    assert moves == (2, 3, 5, 6, 7, 8)
    assert len(moves) == 9 - 3
    for index in (0, 1, 4):
        assert index not in moves

    assert legal_moves(parse_board("XOX XOO OXX")) == ()


def test_is_draw():
    assert is_draw(parse_board("XOX XOO OXX"))
    assert not is_draw(empty_board())
    # Full board with a winner is not a draw
    assert not is_draw(parse_board("XXX OOX XOO"))


def test_evaluate_is_pure():
    board = parse_board("XX. .O. ...")
    first = evaluate(board)
    second = evaluate(board)
    assert first == second
    assert first.winner is None
    assert not first.is_draw
    assert first.legal_moves == (2, 3, 5, 6, 7, 8)
    assert board == parse_board("XX. .O. ...")


def test_evaluate_won_board():
    verdict = evaluate(parse_board("OOO XX. X.."))
    assert verdict.winner == Mark.O
    assert not verdict.is_draw


def test_place_copies_board():
    board = empty_board()
    moved = place(board, 4, Mark.X)
    assert board[4] is None
    assert moved[4] == Mark.X
    assert count_marks(moved) == {Mark.X: 1, Mark.O: 0}


def test_parse_board_errors():
    for text in ("XX", "XXXXXXXXXX", "XX? ... ..."):
        try:
            parse_board(text)
        except ValueError:
            continue
        raise AssertionError(f"parse_board accepted {text!r}")


def test_format_board():
    text = format_board(parse_board("X.. .O. ..."))
    assert text.splitlines()[0] == " X | 1 | 2 "
    assert " O " in text.splitlines()[2]



def test_side_to_move():
    assert side_to_move(empty_board()) == Mark.X
    assert side_to_move(parse_board("X.. ... ...")) == Mark.O
    assert side_to_move(parse_board("XX. .O. ...")) == Mark.O
    assert side_to_move(parse_board("XO. ... ...")) == Mark.X
