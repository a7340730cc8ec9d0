"""
Game configuration for noughts and crosses.
Board dimensions, turn order, and display labels.
"""

from . import board
from .board import Player


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # Noughts and crosses is a 3x3 grid
    CELL_COUNT = board.CELL_COUNT  # 9

    # ==================== TURN SETTINGS ====================
    # Noughts always opens a new game
    FIRST_PLAYER = Player.NOUGHT

    # Nobody can complete a line before the 5th mark,
    # so lines are only checked once the turn counter is past this
    WIN_CHECK_AFTER_TURN = 4

    # ==================== DISPLAY SETTINGS ====================
    DRAW_LABEL = "Draw"
    PLAYER_LABELS = {
        Player.NOUGHT: "Noughts",
        Player.CROSS: "Crosses",
    }
