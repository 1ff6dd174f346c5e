"""
Exhaustive minimax search for TicTacToe.

Scores are depth adjusted so the searching side prefers the fastest win
and the slowest loss:
  - maximizing player wins:  10 - depth
  - minimizing player wins:  depth - 10
  - draw:                     0

No pruning is applied. The full tree from an empty board is small enough
to search on every call.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board, Mark, place
from .rules import legal_moves, winner

WIN_SCORE = 10
DRAW_SCORE = 0


@dataclass(frozen=True)
class SearchResult:
    """
    Result of a minimax search.

    move is None only when the searched board is terminal.
    nodes counts every position visited, the root included.
    """
    move: Optional[int]
    score: int
    nodes: int = 1


def search(
    board: Board,
    player_to_move: Mark,
    maximizing_player: Mark,
    minimizing_player: Mark,
    depth: int = 0
) -> SearchResult:
    """
    Find the best move for player_to_move.

    Args:
        board: Board to search from. Never modified.
        player_to_move: Mark that moves next.
        maximizing_player: Mark whose wins score positive.
        minimizing_player: Mark whose wins score negative.
        depth: Plies already played below the root call.

    Returns:
        SearchResult with the chosen move and its score.
    """
    # Terminal states
    who = winner(board)
    if who == maximizing_player:
        return SearchResult(move=None, score=WIN_SCORE - depth)
    if who == minimizing_player:
        return SearchResult(move=None, score=depth - WIN_SCORE)

    moves = legal_moves(board)
    if not moves:
        return SearchResult(move=None, score=DRAW_SCORE)

    next_player = (
        minimizing_player if player_to_move == maximizing_player
        else maximizing_player
    )
    is_maximizing = player_to_move == maximizing_player

    best_move = None
    best_score = 0
    nodes = 1

    for move in moves:
        child = search(
            place(board, move, player_to_move),
            next_player,
            maximizing_player,
            minimizing_player,
            depth + 1
        )
        nodes += child.nodes

        # Strict comparison keeps the lowest index on ties
        if best_move is None:
            better = True
        elif is_maximizing:
            better = child.score > best_score
        else:
            better = child.score < best_score

        if better:
            best_move = move
            best_score = child.score

    return SearchResult(move=best_move, score=best_score, nodes=nodes)


def choose_move(board: Board, ai_mark: Mark, human_mark: Mark) -> Optional[int]:
    """
    Pick the computer's move.

    Args:
        board: Current board.
        ai_mark: Mark the computer plays (moves next).
        human_mark: Mark the opponent plays.

    Returns:
        Cell index (0-8), or None if no move is available.
    """
    return search(board, ai_mark, ai_mark, human_mark).move


# Quick test
if __name__ == "__main__":
    from .board import empty_board, parse_board

    print("Testing minimax...")

    # X has a fork coming; O can only delay the loss
    board = parse_board("XO. .X. ...")
    result = search(board, Mark.O, Mark.O, Mark.X)
    print(f"Delaying loss: move={result.move} score={result.score} nodes={result.nodes}")
    assert result.move == 8

    # Perfect play from the empty board is a draw
    result = search(empty_board(), Mark.X, Mark.X, Mark.O)
    print(f"Empty board: move={result.move} score={result.score} nodes={result.nodes}")
    assert result.score == 0

    print("\nMinimax test done!")
