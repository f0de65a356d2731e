"""
The TicTacToe game: board + settings + outcome in one object.

Every user action arrives here as a method call, and the view reads the
result back through title() / status_text() / game_state.
"""

import random
from typing import Optional, List, Tuple

from .config import GameConfig
from .game_state import GameState, CellValue, FirstPlayer, Hardness, Winner
from .win_checker import WinChecker
from .ai_player import AIPlayer


class TicTacToeGame:
    """
    Human against the computer on one board.

    Game flow:
    1. Human clicks an empty cell
    2. The outcome is checked
    3. If the game is still running the computer replies
    4. The outcome is checked again

    Whoever moves first plays X.
    """

    def __init__(
        self,
        first_player: FirstPlayer = GameConfig.DEFAULT_FIRST_PLAYER,
        hardness: Hardness = GameConfig.DEFAULT_HARDNESS,
        rng: Optional[random.Random] = None,
        verbose: bool = False
    ):
        self.first_player = first_player
        self.verbose = verbose
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.computer_mark, hardness, rng)
        self.game_state = GameState()

        self.new_game()

    @property
    def human_mark(self) -> CellValue:
        return CellValue.X if self.first_player == FirstPlayer.HUMAN else CellValue.O

    @property
    def computer_mark(self) -> CellValue:
        return self.human_mark.opposite()

    @property
    def hardness(self) -> Hardness:
        return self.ai.hardness

    @property
    def is_finished(self) -> bool:
        return self.game_state.is_game_over

    @property
    def winner(self) -> Optional[Winner]:
        return self.game_state.winner

    def new_game(self):
        """Clear the board. The computer opens right away if it moves first."""
        self.game_state = GameState()
        self.ai.mark = self.computer_mark

        if self.verbose:
            print(f"New game: human plays {self.human_mark}, "
                  f"computer plays {self.computer_mark} ({self.hardness.value})")

        if self.first_player == FirstPlayer.COMPUTER:
            self._computer_move()

    def set_first_player(self, first_player: FirstPlayer):
        """Change who opens. Starts a new game."""
        self.first_player = first_player
        self.new_game()

    def set_hardness(self, hardness: Hardness):
        """Change the opponent. Applies from the next computer move."""
        self.ai.hardness = hardness
        if self.verbose:
            print(f"Hardness set to: {hardness.value}")

    def press_cell(self, row: int, col: int) -> bool:
        """
        Handle a click on a board cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the click was a move, False if it was ignored
            (game over, cell occupied or off the board).
        """
        if self.game_state.is_game_over:
            return False

        if not self.game_state.place(row, col, self.human_mark):
            return False

        if self.verbose:
            print(f"Human placed {self.human_mark} at ({row}, {col})")

        self._check()
        if not self.game_state.is_game_over:
            self._computer_move()

        return True

    def _computer_move(self):
        move = self.ai.get_move(self.game_state)
        if move is None:
            return

        row, col = move
        self.game_state.place(row, col, self.computer_mark)
        if self.verbose:
            print(f"Computer placed {self.computer_mark} at ({row}, {col})")

        self._check()

    def _check(self):
        self.win_checker.update_game_state(self.game_state)
        if self.verbose and self.game_state.is_game_over:
            print(self.title())

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        return self.win_checker.get_winning_line(self.game_state)

    def title(self) -> str:
        """Window title: the game name while playing, the result once over."""
        if not self.game_state.is_game_over:
            return GameConfig.WINDOW_TITLE

        if self.game_state.winner == Winner.X:
            return "Game Over - X Won"
        if self.game_state.winner == Winner.O:
            return "Game Over - O Won"
        return "Game Over - Draw"

    def status_text(self) -> str:
        """One line describing the game from the human's side."""
        if not self.game_state.is_game_over:
            return f"Your move ({self.human_mark})"

        winner = self.game_state.winner
        if winner == Winner.NONE:
            return "It's a draw!"
        if winner.value == str(self.human_mark):
            return "You win!"
        return "Computer wins!"
