"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Run this script to play TicTacToe against the computer!
"""

import random
import sys
from typing import Optional, Tuple, TextIO

from logic.config import GameConfig
from logic.game_state import FirstPlayer, Hardness
from logic.move_validator import MoveValidator
from logic.game import TicTacToeGame


def parse_command(line: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Parse one line of console input.

    Accepts "row col" (also "row,col"), "n" for a new game and "q" to quit.

    Returns:
        ("move", (row, col)), ("new", None), ("quit", None) or ("invalid", None).
    """
    text = line.strip().lower()

    if text in ("q", "quit", "exit"):
        return "quit", None
    if text in ("n", "new"):
        return "new", None

    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return "invalid", None

    try:
        return "move", (int(parts[0]), int(parts[1]))
    except ValueError:
        return "invalid", None


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Game flow:
    1. Human types a row and a column
    2. The move is validated and played
    3. The computer replies
    4. Repeat until someone wins or it's a draw, then offer a new game
    """

    def __init__(self, game: TicTacToeGame, stdin: Optional[TextIO] = None):
        self.game = game
        self.validator = MoveValidator()
        self.stdin = stdin or sys.stdin

    def start(self):
        """Run until the user quits or input ends."""
        print("\nEnter moves as 'row col' (0-2). 'n' = new game, 'q' = quit.")
        self._show()

        for line in self.stdin:
            command, move = parse_command(line)

            if command == "quit":
                break
            if command == "new":
                self.game.new_game()
            elif command == "invalid":
                print("Please enter 'row col', 'n' or 'q'.")
                continue
            else:
                row, col = move
                result = self.validator.validate_move(self.game.game_state, row, col)
                if not result.is_valid:
                    print(result.error_message)
                    continue
                self.game.press_cell(row, col)

            self._show()

    def _show(self):
        self.game.game_state.print_board()
        print(f"\n{self.game.status_text()}")
        if self.game.is_finished:
            print("Type 'n' for a new game or 'q' to quit.")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--hardness",
        choices=[h.value for h in Hardness],
        default=GameConfig.DEFAULT_HARDNESS.value,
        help="Computer opponent strength"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random opponent"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print moves to the console"
    )

    args = parser.parse_args()

    verbose = not args.quiet
    first_player = FirstPlayer.COMPUTER if args.computer_first else FirstPlayer.HUMAN

    game = TicTacToeGame(
        first_player=first_player,
        hardness=Hardness(args.hardness),
        rng=random.Random(args.seed),
        verbose=verbose
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(game, verbose=verbose)
        ui.run()
        return

    try:
        ConsoleGame(game).start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
