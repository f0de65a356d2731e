"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board as clickable cells
- Game status and the result in the window title
- First player and opponent selection
"""

import random
import tkinter as tk
from tkinter import ttk
from typing import Optional, List, Tuple

from PIL import Image, ImageDraw, ImageTk

from logic.config import GameConfig
from logic.game_state import CellValue, FirstPlayer, Hardness
from logic.game import TicTacToeGame


def render_mark(value: CellValue, size: int = GameConfig.CELL_SIZE_PX,
                background: str = GameConfig.CELL_COLOR) -> Image.Image:
    """
    Draw one cell's content.

    Args:
        value: The mark to draw (EMPTY draws only the background).
        size: Width and height in pixels.
        background: Fill colour of the cell.

    Returns:
        An RGB PIL image of size x size.
    """
    image = Image.new("RGB", (size, size), background)
    draw = ImageDraw.Draw(image)

    pad = GameConfig.MARK_PADDING
    width = GameConfig.MARK_LINE_WIDTH
    box = (pad, pad, size - pad, size - pad)

    if value == CellValue.X:
        draw.line([box[:2], box[2:]], fill=GameConfig.X_COLOR, width=width)
        draw.line([(box[0], box[3]), (box[2], box[1])], fill=GameConfig.X_COLOR, width=width)
    elif value == CellValue.O:
        draw.ellipse(box, outline=GameConfig.O_COLOR, width=width)

    return image


def cell_view(game: TicTacToeGame) -> List[List[Tuple[CellValue, bool]]]:
    """
    Decide what each cell shows.

    Returns:
        3x3 rows of (value, highlighted). Highlighted cells are on the winning line.
    """
    state = game.game_state
    winning_line = game.winning_line() or []

    return [
        [(state.get_cell(row, col), (row, col) in winning_line)
         for col in range(GameConfig.BOARD_SIZE)]
        for row in range(GameConfig.BOARD_SIZE)
    ]


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, game: Optional[TicTacToeGame] = None, verbose: bool = False):
        """Initialize the UI."""
        self.verbose = verbose
        self.game = game or TicTacToeGame(verbose=verbose)

        # PhotoImages must stay referenced while shown
        self._images = {}

        self._create_ui()
        self.refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR,
                        foreground=GameConfig.TEXT_COLOR, font=GameConfig.FONT)
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT, foreground=GameConfig.O_COLOR)
        style.configure('Status.TLabel', font=GameConfig.TITLE_FONT, foreground=GameConfig.STATUS_COLOR)
        style.configure('TRadiobutton', background=GameConfig.BG_COLOR,
                        foreground=GameConfig.TEXT_COLOR, font=GameConfig.FONT)

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        self.board_cells = []
        for row in range(GameConfig.BOARD_SIZE):
            row_cells = []
            for col in range(GameConfig.BOARD_SIZE):
                cell = tk.Button(
                    board_frame,
                    width=GameConfig.CELL_SIZE_PX,
                    height=GameConfig.CELL_SIZE_PX,
                    relief='ridge',
                    borderwidth=2,
                    bg=GameConfig.CELL_COLOR,
                    activebackground=GameConfig.CELL_COLOR,
                    command=lambda r=row, c=col: self._on_cell(r, c)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Settings
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=5)

        settings_frame = ttk.Frame(main_frame)
        settings_frame.pack(pady=5)

        ttk.Label(settings_frame, text="First player", style='Title.TLabel').grid(row=0, column=0, sticky='w')
        self.first_var = tk.StringVar(value=self.game.first_player.value)
        for i, player in enumerate(FirstPlayer):
            ttk.Radiobutton(
                settings_frame,
                text=player.value.capitalize(),
                value=player.value,
                variable=self.first_var,
                command=self._on_first_player
            ).grid(row=i + 1, column=0, sticky='w', padx=5)

        ttk.Label(settings_frame, text="Computer", style='Title.TLabel').grid(row=0, column=1, sticky='w', padx=(30, 0))
        self.hardness_var = tk.StringVar(value=self.game.hardness.value)
        for i, hardness in enumerate(Hardness):
            ttk.Radiobutton(
                settings_frame,
                text=hardness.value.capitalize(),
                value=hardness.value,
                variable=self.hardness_var,
                command=self._on_hardness
            ).grid(row=i + 1, column=1, sticky='w', padx=(35, 0))

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Game",
            font=GameConfig.FONT,
            bg='#10b981',
            fg='white',
            width=12,
            command=self._on_new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=GameConfig.FONT,
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell(self, row: int, col: int):
        if self.game.press_cell(row, col):
            self.refresh()

    def _on_first_player(self):
        self.game.set_first_player(FirstPlayer(self.first_var.get()))
        self.refresh()

    def _on_hardness(self):
        self.game.set_hardness(Hardness(self.hardness_var.get()))
        self.refresh()

    def _on_new_game(self):
        self.game.new_game()
        self.refresh()

    def _cell_image(self, value: CellValue, highlighted: bool) -> ImageTk.PhotoImage:
        """Get (and cache) the button image for a cell."""
        key = (value, highlighted)
        if key not in self._images:
            background = GameConfig.WIN_CELL_COLOR if highlighted else GameConfig.CELL_COLOR
            self._images[key] = ImageTk.PhotoImage(render_mark(value, background=background),
                                                   master=self.root)
        return self._images[key]

    def refresh(self):
        """Render the whole window from the game object."""
        for row, cells in enumerate(cell_view(self.game)):
            for col, (value, highlighted) in enumerate(cells):
                self.board_cells[row][col].configure(image=self._cell_image(value, highlighted))

        self.root.title(self.game.title())
        self.status_label.configure(text=self.game.status_text())
        self.first_var.set(self.game.first_player.value)
        self.hardness_var.set(self.game.hardness.value)

    def _quit(self):
        """Quit the application."""
        if self.verbose:
            print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random opponent"
    )

    args = parser.parse_args()

    game = TicTacToeGame(rng=random.Random(args.seed), verbose=GameConfig.VERBOSE)
    ui = TicTacToeUI(game, verbose=GameConfig.VERBOSE)
    ui.run()


if __name__ == "__main__":
    main()
