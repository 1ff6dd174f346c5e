"""
Tests for the game session: turns, modes, scores and move validation.

Usage:
    pytest test_session.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from engine.board import Mark, parse_board
from engine.rules import legal_moves
from session.config import GameConfig
from session.game_state import GameSession, GameMode, GameStatus, TurnState, Scoreboard
from session.move_validator import MoveValidator


def _play_all(game, moves):
    for index in moves:
        assert game.play(index), f"move {index} rejected"


def test_initial_session():
    game = GameSession()
    assert game.mode == GameMode.AI
    assert game.current_player == Mark.X
    assert game.state == TurnState.turn(Mark.X)
    assert legal_moves(game.board) == tuple(range(9))
    assert game.status_text() == "X's turn"
    assert not game.needs_ai_move()


def test_human_then_ai_move():
    game = GameSession()
    assert game.play(4)
    assert game.board[4] == Mark.X
    assert game.current_player == Mark.O
    assert game.needs_ai_move()

    # Human can't move on the computer's turn
    assert not game.play(0)

    move = game.play_ai_move()
    assert move in (0, 2, 6, 8)
    assert game.board[move] == GameConfig.AI_MARK
    assert game.current_player == Mark.X
    assert not game.needs_ai_move()
    assert game.play_ai_move() is None


def test_occupied_and_out_of_range():
    game = GameSession(mode=GameMode.HUMAN)
    assert game.play(4)
    assert not game.play(4)
    assert not game.play(9)
    assert not game.play(-1)
    assert game.current_player == Mark.O


def test_two_player_win_and_scores():
    game = GameSession()
    game.change_mode(GameMode.HUMAN)
    _play_all(game, [0, 3, 1, 4, 2])

    assert game.state == TurnState.won(Mark.X)
    assert game.is_game_over
    assert game.winner == Mark.X
    assert game.current_player is None
    assert game.winning_cells() == (0, 1, 2)
    assert game.status_text() == "X wins!"
    assert game.scores == Scoreboard(x_wins=1, o_wins=0, draws=0)

    # No moves after the game is over
    assert not game.play(5)

    game.new_round()
    assert game.board == parse_board("... ... ...")
    assert game.current_player == Mark.X
    assert game.scores.x_wins == 1
    assert game.mode == GameMode.HUMAN


def test_two_player_draw():
    game = GameSession(mode=GameMode.HUMAN)
    _play_all(game, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert game.state.status == GameStatus.DRAW
    assert game.is_draw
    assert game.winner is None
    assert game.status_text() == "It's a draw!"
    assert game.scores.draws == 1
    assert game.evaluation().is_draw


def test_reset_and_change_mode():
    game = GameSession(mode=GameMode.HUMAN)
    _play_all(game, [0, 3, 1, 4, 2])

    game.change_mode(GameMode.AI)
    assert game.mode == GameMode.AI
    assert game.board == parse_board("... ... ...")
    assert game.scores.x_wins == 1

    game.reset()
    assert game.mode == GameMode[GameConfig.DEFAULT_MODE]
    assert game.scores == Scoreboard()


def test_ai_mode_never_loses():
    game = GameSession()
    # Human always takes the first free cell
    while not game.is_game_over:
        if game.needs_ai_move():
            assert game.play_ai_move() is not None
        else:
            assert game.play(legal_moves(game.board)[0])

    assert game.winner != GameConfig.HUMAN_MARK
    assert game.scores.wins_for(GameConfig.HUMAN_MARK) == 0


def test_ai_ignored_in_two_player_mode():
    game = GameSession(mode=GameMode.HUMAN)
    assert game.play(4)
    assert not game.needs_ai_move()
    assert game.play_ai_move() is None
    # O is a human here, so O may click
    assert game.play(0)


def test_validator_messages():
    game = GameSession()
    validator = MoveValidator()

    result = validator.validate_move(game, 9)
    assert not result.is_valid
    assert "Invalid cell" in result.error_message

    game.play(4)
    result = validator.validate_move(game, 4)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_move(game, 0)
    assert not result.is_valid
    assert "computer" in result.error_message

    assert validator.get_valid_moves(game) == (0, 1, 2, 3, 5, 6, 7, 8)


def test_scoreboard_record():
    scores = Scoreboard()
    scores.record(Mark.O)
    scores.record(None)
    scores.record(Mark.O)
    assert scores.o_wins == 2
    assert scores.draws == 1
    assert scores.wins_for(Mark.X) == 0

