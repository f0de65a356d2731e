"""
Game state management for TicTacToe.
Tracks the board, move history and the outcome.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np


class CellValue(Enum):
    """What a single cell holds."""
    EMPTY = 0
    X = 1
    O = 2

    def __str__(self):
        return {CellValue.EMPTY: "", CellValue.X: "X", CellValue.O: "O"}[self]

    def opposite(self) -> "CellValue":
        """Get the other mark (EMPTY stays EMPTY)."""
        if self == CellValue.X:
            return CellValue.O
        if self == CellValue.O:
            return CellValue.X
        return CellValue.EMPTY


class FirstPlayer(Enum):
    """Who opens the game. The opener always plays X."""
    HUMAN = "human"
    COMPUTER = "computer"


class Hardness(Enum):
    """Computer opponent strength."""
    RANDOM = "random"
    HARD = "hard"


class Winner(Enum):
    """Result of a finished game. NONE is a draw."""
    X = "X"
    O = "O"
    NONE = "none"


@dataclass
class Move:
    """
    A move in the game.
    """
    value: CellValue        # Which mark was placed
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Position in the game (0-8)


def _empty_board() -> np.ndarray:
    return np.full((3, 3), CellValue.EMPTY.value, dtype=np.int8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe board.

    Tracks:
    - The 3x3 board (CellValue values in a numpy array)
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: np.ndarray = field(default_factory=_empty_board)

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Winner] = None
    is_game_over: bool = False

    def get_cell(self, row: int, col: int) -> CellValue:
        """Get the value of one cell."""
        return CellValue(int(self.board[row, col]))

    def place(self, row: int, col: int, value: CellValue) -> bool:
        """
        Place a mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            value: X or O.

        Returns:
            True if the cell was empty and is now filled, False otherwise
            (occupied, or outside the board).
        """
        if not (0 <= row < 3 and 0 <= col < 3):
            return False

        if self.get_cell(row, col) != CellValue.EMPTY:
            return False

        self.board[row, col] = value.value
        self.moves.append(Move(value=value, row=row, col=col, move_number=len(self.moves)))
        return True

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        rows, cols = np.nonzero(self.board == CellValue.EMPTY.value)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self) -> bool:
        return not np.any(self.board == CellValue.EMPTY.value)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            moves=list(self.moves),
            winner=self.winner,
            is_game_over=self.is_game_over
        )

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  +---+---+---+")

        for row in range(3):
            cells = [str(self.get_cell(row, col)) or " " for col in range(3)]
            print(f"{row} | " + " | ".join(cells) + " |")
            print("  +---+---+---+")

        if self.is_game_over:
            if self.winner == Winner.NONE:
                print("\nIt's a DRAW!")
            else:
                print(f"\n{self.winner.value} WINS!")
