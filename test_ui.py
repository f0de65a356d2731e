"""
Tests for the TicTacToe UI.
Mark rendering runs anywhere. Window tests need a display and skip without one.
"""

import pytest

tk = pytest.importorskip("tkinter")

from PIL import ImageColor

from logic.config import GameConfig
from logic.game import TicTacToeGame
from logic.game_state import CellValue, FirstPlayer, Hardness
from ui import TicTacToeUI, cell_view, render_mark


def test_render_empty_cell_is_background_only():
    image = render_mark(CellValue.EMPTY)
    assert image.size == (GameConfig.CELL_SIZE_PX, GameConfig.CELL_SIZE_PX)
    assert image.getcolors() == [(GameConfig.CELL_SIZE_PX ** 2, ImageColor.getrgb(GameConfig.CELL_COLOR))]


def test_render_x_crosses_the_centre():
    image = render_mark(CellValue.X, size=100)
    assert image.getpixel((50, 50)) == ImageColor.getrgb(GameConfig.X_COLOR)


def test_render_o_is_a_ring():
    image = render_mark(CellValue.O, size=100)
    assert image.getpixel((50, 50)) == ImageColor.getrgb(GameConfig.CELL_COLOR)
    assert image.getpixel((50, GameConfig.MARK_PADDING + 3)) == ImageColor.getrgb(GameConfig.O_COLOR)


def test_render_highlight_background():
    image = render_mark(CellValue.EMPTY, size=10, background=GameConfig.WIN_CELL_COLOR)
    assert image.getpixel((0, 0)) == ImageColor.getrgb(GameConfig.WIN_CELL_COLOR)


FORK_CLICKS = [(0, 0), (2, 2), (2, 0), (1, 0)]


def test_cell_view_while_playing():
    game = TicTacToeGame()
    game.press_cell(0, 0)
    view = cell_view(game)
    assert view[0][0] == (CellValue.X, False)
    assert view[1][1] == (CellValue.O, False)
    assert not any(highlighted for row in view for _, highlighted in row)


def test_cell_view_highlights_winning_line():
    game = TicTacToeGame()
    for row, col in FORK_CLICKS:
        game.press_cell(row, col)

    view = cell_view(game)
    highlighted = [(r, c) for r in range(3) for c in range(3) if view[r][c][1]]
    assert highlighted == [(0, 0), (1, 0), (2, 0)]
    assert view[1][0] == (CellValue.X, True)
    assert view[1][1] == (CellValue.O, False)


@pytest.fixture
def ui():
    try:
        root = tk.Tk()
        root.destroy()
    except tk.TclError:
        pytest.skip("no display available")

    window = TicTacToeUI()
    yield window
    window.root.destroy()


def test_click_plays_a_move(ui):
    assert ui.root.title() == "Tic Tac Toe"

    ui.board_cells[0][0].invoke()
    assert ui.game.game_state.get_cell(0, 0) == CellValue.X
    assert ui.game.game_state.get_cell(1, 1) == CellValue.O
    assert str(ui.status_label.cget("text")) == "Your move (X)"


def test_radios_change_settings(ui):
    ui.first_var.set(FirstPlayer.COMPUTER.value)
    ui._on_first_player()
    assert ui.game.first_player == FirstPlayer.COMPUTER
    assert ui.game.game_state.get_cell(1, 1) == CellValue.X

    ui.hardness_var.set(Hardness.RANDOM.value)
    ui._on_hardness()
    assert ui.game.hardness == Hardness.RANDOM
    assert len(ui.game.game_state.moves) == 1


def test_title_shows_result(ui):
    for row, col in FORK_CLICKS:
        ui.board_cells[row][col].invoke()
    assert ui.root.title() == "Game Over - X Won"
    assert str(ui.status_label.cget("text")) == "You win!"

    won_image = str(ui._cell_image(CellValue.X, True))
    for row in range(3):
        assert str(ui.board_cells[row][0].cget("image")) == won_image
    assert str(ui.board_cells[1][1].cget("image")) == str(ui._cell_image(CellValue.O, False))
