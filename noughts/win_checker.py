"""
Win checker for noughts and crosses.
Checks if a player has completed a line or the board is full.
"""

from typing import Optional, List, Tuple, Sequence
from .board import Cell, Player


class WinChecker:
    """
    Checks for win conditions in noughts and crosses.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as row-major cell indexes)
    WINNING_LINES: List[Tuple[int, int, int]] = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def has_won(self, cells: Sequence[Cell], player: Player) -> bool:
        """
        Check if a player owns any complete line.

        Args:
            cells: Row-major board cells.
            player: The player whose mark is checked.

        Returns:
            True if all 3 cells of some line hold the player's mark.
        """
        return self.get_winning_line(cells, player) is not None

    def get_winning_line(
        self,
        cells: Sequence[Cell],
        player: Player
    ) -> Optional[Tuple[int, int, int]]:
        """
        Get the first line completed by the player.

        Returns:
            The winning line as 3 cell indexes, or None.
        """
        mark = player.mark
        for line in self.WINNING_LINES:
            if all(cells[i] is mark for i in line):
                return line
        return None

    def is_full(self, cells: Sequence[Cell]) -> bool:
        """True once no empty cell is left."""
        return all(cell is not Cell.EMPTY for cell in cells)
