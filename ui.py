"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Live 3x3 board (click a cell to play)
- Game status and scoreboard
- Mode selection (2-Player or Play vs AI)
- New Round / Reset Game controls
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from engine.board import Mark
from session.config import GameConfig
from session.game_state import GameSession, GameMode


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, mode: Optional[GameMode] = None):
        """Initialize the UI."""
        self.game = GameSession()
        if mode is not None:
            self.game.mode = mode

        # Pending "after" callback for the computer's move
        self.pending_ai_job: Optional[str] = None

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.geometry(GameConfig.WINDOW_SIZE)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white',
                        font=(GameConfig.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT, foreground=GameConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=GameConfig.STATUS_FONT, foreground=GameConfig.STATUS_COLOR)
        style.configure('Score.TLabel', font=(GameConfig.FONT_FAMILY, 16, 'bold'))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Header
        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 5))
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=5)

        self.board_cells = []
        for index in range(9):
            row, col = GameConfig.cell_to_row_col(index)
            cell = tk.Button(
                board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_COLOR,
                fg='white',
                activebackground=GameConfig.CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Scoreboard
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        score_frame = ttk.Frame(main_frame)
        score_frame.pack()

        self.score_labels = {}
        for key, text in (("x", "X Wins"), ("o", "O Wins"), ("draws", "Draws")):
            card = ttk.Frame(score_frame)
            card.pack(side=tk.LEFT, padx=12)
            ttk.Label(card, text=text).pack()
            value = ttk.Label(card, text="0", style='Score.TLabel')
            value.pack()
            self.score_labels[key] = value

        # Mode toggle
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        self.mode_buttons = {}
        for mode in (GameMode.HUMAN, GameMode.AI):
            btn = tk.Button(
                mode_frame,
                text=mode.value,
                font=GameConfig.BUTTON_FONT,
                width=12,
                fg='white',
                command=lambda m=mode: self._change_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Round",
            font=GameConfig.BUTTON_FONT,
            bg='#10b981',
            fg='white',
            width=12,
            command=self._new_round
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset Game",
            font=GameConfig.BUTTON_FONT,
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        # Footer
        self.hint_label = ttk.Label(main_frame, text="", font=(GameConfig.FONT_FAMILY, 9))
        self.hint_label.pack(side=tk.BOTTOM, pady=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell in either mode."""
        if not self.game.play(index):
            return

        self._refresh()
        self._schedule_ai_move()

    def _schedule_ai_move(self):
        """Queue the computer's move after a short pause."""
        if not self.game.needs_ai_move() or self.pending_ai_job is not None:
            return

        self.status_label.configure(text="Computer is thinking...")
        self.pending_ai_job = self.root.after(GameConfig.AI_DELAY_MS, self._ai_move)

    def _ai_move(self):
        """Execute the computer's move (runs on UI thread)."""
        self.pending_ai_job = None

        # The round may have changed while we waited
        if not self.game.needs_ai_move():
            return

        self.game.play_ai_move()
        self._refresh()

    def _cancel_ai_move(self):
        """Drop a queued computer move."""
        if self.pending_ai_job is not None:
            self.root.after_cancel(self.pending_ai_job)
            self.pending_ai_job = None

    def _refresh(self):
        """Update board, status, scores and mode buttons."""
        win_line = self.game.winning_cells() or ()

        for index, cell in enumerate(self.board_cells):
            mark = self.game.board[index]
            bg = GameConfig.CELL_WIN_COLOR if index in win_line else GameConfig.CELL_COLOR
            if mark is None:
                cell.configure(text="", bg=bg)
            else:
                cell.configure(text=mark.value, bg=bg, fg=GameConfig.mark_color(mark),
                               disabledforeground=GameConfig.mark_color(mark))

        self.status_label.configure(text=self.game.status_text())

        scores = self.game.scores
        self.score_labels["x"].configure(text=str(scores.wins_for(Mark.X)))
        self.score_labels["o"].configure(text=str(scores.wins_for(Mark.O)))
        self.score_labels["draws"].configure(text=str(scores.draws))

        for mode, btn in self.mode_buttons.items():
            active = mode == self.game.mode
            btn.configure(bg=GameConfig.ACTIVE_BUTTON_COLOR if active else GameConfig.INACTIVE_BUTTON_COLOR)

        if self.game.mode == GameMode.AI:
            hint = f"Mode: Play vs AI ({GameConfig.FIRST_MARK.value} starts, {GameConfig.AI_MARK.value} is AI)"
        else:
            hint = "Mode: 2-Player (X vs O)"
        self.hint_label.configure(text=hint)

    def _new_round(self):
        """Start a new round, keeping the scores."""
        self._cancel_ai_move()
        self.game.new_round()
        self._refresh()
        self._schedule_ai_move()

    def _reset_game(self):
        """Reset the board and scoreboard."""
        print("Resetting game...")
        self._cancel_ai_move()
        self.game.reset()
        self._refresh()
        self._schedule_ai_move()

    def _change_mode(self, mode: GameMode):
        """Switch mode. Starts a new round on change."""
        print(f"Mode set to: {mode.value}")
        self._cancel_ai_move()
        self.game.change_mode(mode)
        self._refresh()
        self._schedule_ai_move()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_ai_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
