"""
Noughts and crosses game engine.
Handles board state, turns, win/draw detection, and game history.
"""

__version__ = "1.0.0"

from .board import Cell, Player, Outcome, Row, Column, GameResult
from .config import GameConfig
from .game_state import GameState, GameStatus
from .history import HistoryRecorder
from .move_validator import MoveValidator, ValidationResult, InvalidMove
from .session import GameSession
from .win_checker import WinChecker
