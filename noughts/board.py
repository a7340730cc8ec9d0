"""
Board model for noughts and crosses.
Cells, players, outcomes, and the finished-game record.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass


class Cell(Enum):
    """What a single board position holds."""
    EMPTY = ""
    NOUGHT = "⭘"
    CROSS = "✕"


class Player(Enum):
    """The two players in the game."""
    NOUGHT = "nought"
    CROSS = "cross"

    @property
    def mark(self) -> Cell:
        """The cell value this player writes."""
        return Cell.NOUGHT if self == Player.NOUGHT else Cell.CROSS

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.CROSS if self == Player.NOUGHT else Player.NOUGHT


class Outcome(Enum):
    """How a finished game ended."""
    NOUGHT = "nought"
    CROSS = "cross"
    DRAW = "draw"

    @classmethod
    def for_player(cls, player: Player) -> "Outcome":
        return cls(player.value)


class Row(IntEnum):
    TOP = 0
    MIDDLE = 1
    BOTTOM = 2


class Column(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def to_index(row: int, col: int) -> int:
    """Row-major index (0-8) of a (row, col) position."""
    return row * BOARD_SIZE + col


def to_position(index: int) -> Tuple[int, int]:
    """(row, col) of a row-major index."""
    return divmod(index, BOARD_SIZE)


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def format_board(cells: Tuple[Cell, ...]) -> str:
    """
    Render 9 cells as a small text grid.

    Args:
        cells: Row-major cell values.

    Returns:
        Multi-line string with column numbers on top and row numbers on the left.
    """
    lines = ["    0   1   2", "  ┌───┬───┬───┐"]
    for row in range(BOARD_SIZE):
        row_str = "│"
        for col in range(BOARD_SIZE):
            cell = cells[to_index(row, col)]
            symbol = cell.value if cell is not Cell.EMPTY else " "
            row_str += f" {symbol} │"
        lines.append(f"{row} {row_str}")
        if row < BOARD_SIZE - 1:
            lines.append("  ├───┼───┼───┤")
    lines.append("  └───┴───┴───┘")
    return "\n".join(lines)


@dataclass(frozen=True)
class GameResult:
    """
    A finished game.

    Created once by the game state when a win or draw is detected,
    then kept by the history recorder.
    """
    outcome: Outcome                # Who won, or DRAW
    turns_total: int                # Marks placed when the game ended
    cells: Tuple[Cell, ...]         # Final board, row-major

    def __post_init__(self):
        # Keep a private tuple so the caller's sequence can't change it later
        object.__setattr__(self, "cells", tuple(self.cells))
        for cell in self.cells:
            if not isinstance(cell, Cell):
                raise ValueError(f"Board snapshot holds {cell!r}, expected a Cell")
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"A board snapshot needs {CELL_COUNT} cells, got {len(self.cells)}")

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw."""
        if self.outcome is Outcome.DRAW:
            return None
        return Player(self.outcome.value)

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[to_index(row, col)]

    def rows(self) -> List[Tuple[Cell, ...]]:
        """The snapshot split into its three rows."""
        return [
            self.cells[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        ]

    def __str__(self) -> str:
        if self.is_draw:
            return f"Draw after {self.turns_total} turns"
        return f"{self.winner.mark.value} won in {self.turns_total} turns"
