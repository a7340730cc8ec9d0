"""
Game session for noughts and crosses.
Owns one board and the history of every game finished on it.
"""

from typing import Optional
from .board import GameResult
from .game_state import GameState
from .history import HistoryRecorder


class GameSession:
    """
    A long-lived play session.

    The host builds one of these per process and sends every move
    through it. Finished games land in `history` automatically.
    """

    def __init__(self, history: Optional[HistoryRecorder] = None):
        self.history = history if history is not None else HistoryRecorder()
        self.state = GameState(history=self.history)

    def place_mark(self, row: int, col: int) -> Optional[GameResult]:
        return self.state.place_mark(row, col)

    def place_at(self, index: int) -> Optional[GameResult]:
        return self.state.place_at(index)

    def new_game(self):
        """Start over. A game abandoned part way is not recorded."""
        self.state.reset()

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over
