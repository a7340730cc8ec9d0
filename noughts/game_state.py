"""
Game state management for noughts and crosses.
Tracks the board, current player, and turn, and decides when a game ends.
"""

from enum import Enum
from typing import Optional, List, Tuple, TYPE_CHECKING
from dataclasses import dataclass, field

from .board import (
    Cell, Player, Outcome, GameResult,
    CELL_COUNT, to_index, to_position, format_board,
)
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker

if TYPE_CHECKING:
    from .history import HistoryRecorder


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass
class GameState:
    """
    The complete state of a noughts and crosses game.

    Tracks:
    - The 9 cells, row-major
    - Current player and turn number
    - Game status (ongoing, won, draw)

    Every move goes through place_mark(), which checks for a finished
    game before handing the turn to the other player. When a game ends
    the GameResult is passed to the attached history, if any.
    """

    # The board - row-major, Cell.EMPTY until marked
    board: List[Cell] = field(
        default_factory=lambda: [Cell.EMPTY] * CELL_COUNT, init=False
    )

    # Current player's turn
    current_player: Player = field(default=GameConfig.FIRST_PLAYER, init=False)

    # Turn number, starting at 1. Not advanced by the move that ends the game.
    turn: int = field(default=1, init=False)

    # Game result, only ever set by place_mark()
    winner: Optional[Player] = field(default=None, init=False)
    is_draw: bool = field(default=False, init=False)
    is_game_over: bool = field(default=False, init=False)

    # Where finished games go
    history: Optional["HistoryRecorder"] = field(default=None, repr=False, compare=False)

    validator = MoveValidator()
    win_checker = WinChecker()

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Snapshot of all 9 cells."""
        return tuple(self.board)

    @property
    def status(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.WON
        if self.is_draw:
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def cell(self, row: int, col: int) -> Cell:
        return self.board[to_index(row, col)]

    def place_mark(self, row: int, col: int) -> Optional[GameResult]:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The GameResult if this move finished the game, otherwise None.

        Raises:
            InvalidMove: The game is over, the position is off the board,
                or the cell is already taken. Nothing is changed.
        """
        self.validator.ensure_valid(self.board, self.is_game_over, row, col)

        self.board[to_index(row, col)] = self.current_player.mark

        result = self._check_termination()

        if not self.is_game_over:
            self.current_player = self.current_player.opposite()
            self.turn += 1

        return result

    def place_at(self, index: int) -> Optional[GameResult]:
        """Same as place_mark, with a row-major index (0-8)."""
        # Indexes outside 0-8 map off the board and are rejected there
        row, col = to_position(index)
        return self.place_mark(row, col)

    def _check_termination(self) -> Optional[GameResult]:
        """
        Decide whether the move just made ended the game.

        A win is checked before a draw, so a 9th move that completes
        a line counts as a win.
        """
        if (self.turn > GameConfig.WIN_CHECK_AFTER_TURN
                and self.win_checker.has_won(self.board, self.current_player)):
            self.winner = self.current_player
            self.is_game_over = True
            return self._finish(Outcome.for_player(self.current_player))

        if self.win_checker.is_full(self.board):
            self.is_draw = True
            self.is_game_over = True
            return self._finish(Outcome.DRAW)

        return None

    def _finish(self, outcome: Outcome) -> GameResult:
        # The turn counter still equals the number of marks placed here
        result = GameResult(
            outcome=outcome,
            turns_total=self.turn,
            cells=self.cells,
        )
        if self.history is not None:
            self.history.record(result)
        return result

    def reset(self):
        """Clear the board for a new game. An unfinished game is dropped."""
        self.board = [Cell.EMPTY] * CELL_COUNT
        self.current_player = GameConfig.FIRST_PLAYER
        self.turn = 1
        self.winner = None
        self.is_draw = False
        self.is_game_over = False

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        return self.validator.get_valid_moves(self.board, False)

    def get_winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Cell indexes of the completed line, or None if nobody has won."""
        if self.winner is None:
            return None
        return self.win_checker.get_winning_line(self.board, self.winner)

    def format_board(self) -> str:
        """The board plus a status line, ready to print."""
        lines = [format_board(self.cells)]
        if self.winner is not None:
            lines.append(f"{GameConfig.PLAYER_LABELS[self.winner]} ({self.winner.mark.value}) win!")
        elif self.is_draw:
            lines.append(f"{GameConfig.DRAW_LABEL}!")
        else:
            lines.append(
                f"Turn {self.turn}: {GameConfig.PLAYER_LABELS[self.current_player]} "
                f"({self.current_player.mark.value}) to play"
            )
        return "\n".join(lines)
