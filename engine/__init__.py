"""
Engine module for TicTacToe.
Pure rules evaluation and minimax move search.
"""

from .board import Mark, WIN_LINES, empty_board, place, parse_board, format_board
from .rules import Evaluation, winner, winning_line, legal_moves, is_draw, evaluate
from .minimax import SearchResult, search, choose_move
from .ai_player import AIPlayer
