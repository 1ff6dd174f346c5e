"""
Session module for TicTacToe.
Owns the live board, turns, game mode and scores.
"""

from .config import GameConfig
from .game_state import GameSession, GameMode, GameStatus, TurnState, Scoreboard
from .move_validator import MoveValidator, ValidationResult
