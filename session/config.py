"""
Game configuration for TicTacToe.
Players, timing, and the look of the UI.
"""

from typing import Tuple

from engine.board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the game!
    """

    # ==================== PLAYERS ====================
    # X always starts. In "Play vs AI" mode the human is X.
    FIRST_MARK = Mark.X
    HUMAN_MARK = Mark.X
    AI_MARK = Mark.O

    # Mode used on start and after Reset Game ("AI" or "HUMAN")
    DEFAULT_MODE = "AI"

    # ==================== TIMING ====================
    # Pause before the computer commits its move (milliseconds)
    # Gives the UI time to show the human's move first
    AI_DELAY_MS = 350

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_SIZE = "420x620"

    # ==================== COLORS ====================
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    CELL_WIN_COLOR = '#065f46'
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    ACTIVE_BUTTON_COLOR = '#6366f1'
    INACTIVE_BUTTON_COLOR = '#2d3748'

    # ==================== FONTS ====================
    FONT_FAMILY = 'Segoe UI'
    CELL_FONT = (FONT_FAMILY, 28, 'bold')
    TITLE_FONT = (FONT_FAMILY, 20, 'bold')
    STATUS_FONT = (FONT_FAMILY, 13)
    BUTTON_FONT = (FONT_FAMILY, 10, 'bold')

    @classmethod
    def mark_color(cls, mark: Mark) -> str:
        """Get the text color for a mark."""
        return cls.X_COLOR if mark == Mark.X else cls.O_COLOR

    @staticmethod
    def cell_to_row_col(index: int) -> Tuple[int, int]:
        """
        Convert a cell index to a grid position.

        Args:
            index: Cell index (0-8).

        Returns:
            (row, col) tuple.
        """
        return divmod(index, 3)
