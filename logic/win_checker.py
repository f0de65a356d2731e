"""
Win checker for TicTacToe.
Checks if a mark has completed a line or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .game_state import GameState, CellValue, Winner


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    # Same lines as index arrays, shape (8, 3)
    _LINE_ROWS = np.array([[r for r, _ in line] for line in WINNING_LINES])
    _LINE_COLS = np.array([[c for _, c in line] for line in WINNING_LINES])

    def line_values(self, board: np.ndarray) -> np.ndarray:
        """
        Gather the cell values of every line.

        Returns:
            Array of shape (8, 3), one row per entry of WINNING_LINES.
        """
        return board[self._LINE_ROWS, self._LINE_COLS]

    def completed_lines(self, board: np.ndarray, value: CellValue) -> np.ndarray:
        """Boolean mask over WINNING_LINES: True where the line is all `value`."""
        return np.all(self.line_values(board) == value.value, axis=1)

    def check_winner(self, game_state: GameState) -> Optional[CellValue]:
        """
        Check if there's a winner. X is checked before O.

        Args:
            game_state: The current game state.

        Returns:
            The winning mark, or None if no winner yet.
        """
        for value in (CellValue.X, CellValue.O):
            if np.any(self.completed_lines(game_state.board, value)):
                return value

        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw: the board is full and nobody won.
        """
        if self.check_winner(game_state) is not None:
            return False

        return game_state.is_full()

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.
        A finished game stays finished.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        if game_state.is_game_over:
            return game_state

        winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = Winner[winner.name]
            game_state.is_game_over = True
        elif self.check_draw(game_state):
            game_state.winner = Winner.NONE
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as list of (row, col), or None.
        """
        winner = self.check_winner(game_state)
        if winner is None:
            return None

        index = int(np.argmax(self.completed_lines(game_state.board, winner)))
        return self.WINNING_LINES[index]
