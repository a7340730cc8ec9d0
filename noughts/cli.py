"""
Console front end for noughts and crosses.

This script ties together:
- Session (game state plus history of finished games)
- A text board printed after every move
- Keyboard input for moves and commands

Run `noughts` or `python -m noughts` to play with a friend!
"""

from typing import Callable, List, Optional, Tuple

from .board import format_board, to_position
from .config import GameConfig
from .history import HistoryRecorder
from .move_validator import InvalidMove
from .session import GameSession

HELP_TEXT = """Enter a move as 'row col' (0-2 each) or a cell number 1-9:
   1 | 2 | 3
   4 | 5 | 6
   7 | 8 | 9
Commands: n = new game, h = history, q = quit"""


def parse_move(text: str) -> Tuple[int, int]:
    """
    Turn a line of input into a (row, col) position.

    Accepts 'row col' / 'row,col' with 0-based indexes,
    or a single cell number 1-9 counted row by row.

    Raises:
        ValueError: The text is not a move.
    """
    parts = text.replace(",", " ").split()
    if len(parts) == 1:
        number = int(parts[0])
        if not 1 <= number <= GameConfig.CELL_COUNT:
            raise ValueError(f"Cell number must be 1-{GameConfig.CELL_COUNT}")
        return to_position(number - 1)
    if len(parts) == 2:
        return int(parts[0]), int(parts[1])
    raise ValueError(f"Can't read a move from {text!r}")


def format_history(history: HistoryRecorder) -> str:
    """Scoreboard plus one block per finished game, newest first."""
    if not len(history):
        return "No games finished yet."

    counts = history.tally()
    lines = [
        "Scoreboard: " + ", ".join(
            f"{outcome.value} {counts[outcome]}" for outcome in sorted(counts, key=lambda o: o.value)
        )
    ]
    total = len(history)
    for number, result in enumerate(history.all()):
        lines.append(f"\nGame {total - number}: {result}")
        lines.append(format_board(result.cells))
    return "\n".join(lines)


class ConsoleGame:
    """
    Keyboard-driven host for a GameSession.

    Game flow:
    1. Print the board and whose turn it is
    2. Read a move or command
    3. Apply the move; bad moves are reported and asked for again
    4. When a game ends, print the result and offer a new game
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        input_func: Callable[[str], str] = input
    ):
        self.session = session if session is not None else GameSession()
        self.input_func = input_func
        self.is_running = False

    def play_move(self, row: int, col: int) -> bool:
        """
        Try one move and report what happened.

        Returns:
            True if the mark was placed.
        """
        try:
            result = self.session.place_mark(row, col)
        except InvalidMove as e:
            print(f"Invalid move: {e.reason}")
            return False

        print()
        print(self.session.state.format_board())
        if result is not None:
            self._announce(str(result))
        return True

    def play_script(self, cells: List[int]):
        """Play cell numbers (1-9) in order, without asking for input."""
        for number in cells:
            if self.session.is_game_over:
                print("Game already over, ignoring the remaining moves.")
                break
            try:
                row, col = parse_move(str(number))
            except ValueError as e:
                print(f"Skipping {number}: {e}")
                continue
            self.play_move(row, col)

    def start(self):
        """Start the interactive loop."""
        print(HELP_TEXT)
        print()
        print(self.session.state.format_board())

        self.is_running = True
        while self.is_running:
            try:
                line = self.input_func("> ").strip().lower()
            except EOFError:
                break
            self._handle(line)

    def _handle(self, line: str):
        if not line:
            return
        if line in ("q", "quit"):
            self.is_running = False
        elif line in ("n", "new"):
            self._new_game()
        elif line in ("h", "history"):
            print(format_history(self.session.history))
        else:
            try:
                row, col = parse_move(line)
            except ValueError as e:
                print(f"{e}\n{HELP_TEXT}")
                return
            self.play_move(row, col)

    def _announce(self, message: str):
        print("\n" + "=" * 40)
        print(f"   {message}")
        print("=" * 40)
        print("Type 'n' for a new game or 'h' for the history.")

    def _new_game(self):
        """Reset the board for a new game."""
        self.session.new_game()
        print("\nNew game!")
        print(self.session.state.format_board())


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Noughts and crosses for two players")
    parser.add_argument(
        "--moves",
        help="Comma-separated cell numbers (1-9) to play without prompting, e.g. 1,5,2,7,3"
    )

    args = parser.parse_args(argv)

    print("\n" + "=" * 40)
    print("   Noughts and Crosses")
    print("=" * 40 + "\n")

    game = ConsoleGame()

    if args.moves:
        try:
            cells = [int(part) for part in args.moves.split(",") if part.strip()]
        except ValueError:
            parser.error(f"--moves must be numbers 1-9, got {args.moves!r}")
        game.play_script(cells)
        print()
        print(format_history(game.session.history))
        return

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
