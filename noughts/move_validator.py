"""
Move validator for noughts and crosses.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List, Sequence
from dataclasses import dataclass
from .board import Cell, BOARD_SIZE, is_on_board, to_index


class InvalidMove(Exception):
    """
    Raised when a mark cannot be placed.

    Nothing is changed on the board when this is raised,
    so callers can simply ask for another move.
    """

    def __init__(self, row: int, col: int, reason: str):
        super().__init__(reason)
        self.row = row
        self.col = col
        self.reason = reason


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates noughts and crosses moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        cells: Sequence[Cell],
        is_game_over: bool,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            cells: Row-major board cells.
            is_game_over: Whether the current game has finished.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not is_on_board(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        occupant = cells[to_index(row, col)]
        if occupant is not Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def ensure_valid(
        self,
        cells: Sequence[Cell],
        is_game_over: bool,
        row: int,
        col: int
    ) -> None:
        """Like validate_move, but raises InvalidMove on failure."""
        result = self.validate_move(cells, is_game_over, row, col)
        if not result.is_valid:
            raise InvalidMove(row, col, result.error_message)

    def get_valid_moves(
        self,
        cells: Sequence[Cell],
        is_game_over: bool
    ) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions.
        """
        if is_game_over:
            return []

        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if cells[to_index(row, col)] is Cell.EMPTY
        ]
