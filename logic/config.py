"""
Game configuration for TicTacToe.
All the settings for the board, the computer opponent and the window.
"""

from .game_state import FirstPlayer, Hardness


class GameConfig:
    """
    Configuration class for game settings.
    Command line options override the defaults below.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== OPPONENT SETTINGS ====================
    DEFAULT_FIRST_PLAYER = FirstPlayer.HUMAN
    DEFAULT_HARDNESS = Hardness.HARD

    # Fallback order for the HARD opponent when nothing can be won or blocked:
    # centre, then corners, then edges
    POSITION_PRIORITY = [
        (1, 1),
        (0, 0), (0, 2), (2, 0), (2, 2),
        (0, 1), (1, 0), (1, 2), (2, 1),
    ]

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    CELL_SIZE_PX = 100
    MARK_LINE_WIDTH = 10
    MARK_PADDING = 20

    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    WIN_CELL_COLOR = '#065f46'
    X_COLOR = '#f87171'
    O_COLOR = '#00d4ff'
    TEXT_COLOR = 'white'
    STATUS_COLOR = '#ffd700'

    FONT = ('Segoe UI', 11)
    TITLE_FONT = ('Segoe UI', 14, 'bold')

    # ==================== DEBUG ====================
    # Print moves and results to the console
    VERBOSE = True
