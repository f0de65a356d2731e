"""
Logic module for TicTacToe.
Handles game state, rules, and the computer opponent.
"""

from .game_state import GameState, CellValue, FirstPlayer, Hardness, Winner
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .config import GameConfig
from .game import TicTacToeGame
