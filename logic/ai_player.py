"""
AI player for TicTacToe.
Picks moves with one of two static heuristics: random, or a rule-ordered
win > block > position picker.
"""

import random
from typing import Optional, Tuple

import numpy as np

from .config import GameConfig
from .game_state import GameState, CellValue, Hardness
from .win_checker import WinChecker


class AIPlayer:
    """
    A computer opponent for TicTacToe.

    RANDOM plays any empty cell. HARD looks one move ahead only:
    it completes its own line if it can, blocks the opponent's line
    otherwise, and falls back to a fixed position order.
    """

    def __init__(
        self,
        mark: CellValue = CellValue.O,
        hardness: Hardness = GameConfig.DEFAULT_HARDNESS,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI places (X or O).
            hardness: Which heuristic to use.
            rng: Random source for RANDOM hardness (seed it for repeatable games).
        """
        self.mark = mark
        self.hardness = hardness
        self.rng = rng or random.Random()
        self.win_checker = WinChecker()

    def get_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Get the next move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            (row, col) of the chosen move, or None if no moves available.
        """
        if game_state.is_game_over:
            return None

        empty_cells = game_state.get_empty_cells()
        if not empty_cells:
            return None

        if self.hardness == Hardness.RANDOM:
            return self.rng.choice(empty_cells)

        return self._get_hard_move(game_state)

    def _get_hard_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        # Win now
        move = self._find_completing_cell(game_state, self.mark)
        if move is not None:
            return move

        # Block the opponent
        move = self._find_completing_cell(game_state, self.mark.opposite())
        if move is not None:
            return move

        for row, col in GameConfig.POSITION_PRIORITY:
            if game_state.get_cell(row, col) == CellValue.EMPTY:
                return (row, col)

        return None

    def _find_completing_cell(
        self,
        game_state: GameState,
        value: CellValue
    ) -> Optional[Tuple[int, int]]:
        """
        Find the empty cell of the first line holding two `value` marks
        and nothing else.

        Args:
            game_state: Current game state.
            value: The mark to look for.

        Returns:
            (row, col) of the empty cell, or None.
        """
        values = self.win_checker.line_values(game_state.board)
        own = np.sum(values == value.value, axis=1)
        empty = np.sum(values == CellValue.EMPTY.value, axis=1)

        hits = np.flatnonzero((own == 2) & (empty == 1))
        if not hits.size:
            return None

        index = int(hits[0])
        slot = int(np.argmax(values[index] == CellValue.EMPTY.value))
        return self.win_checker.WINNING_LINES[index][slot]
