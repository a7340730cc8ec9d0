"""
History of finished games.
Most recent game first, kept for as long as the process runs.
"""

from collections import Counter
from typing import Iterator, List, Optional, Tuple
from .board import GameResult, Outcome


class HistoryRecorder:
    """
    Append-only log of GameResults, newest first.

    Results can be added and read back but never edited or removed.
    """

    def __init__(self):
        self._results: List[GameResult] = []

    def record(self, result: GameResult) -> None:
        """
        Put a finished game at the front of the log.

        Args:
            result: The result handed over by the game state.
        """
        if not isinstance(result, GameResult):
            raise TypeError(f"Expected a GameResult, got {type(result).__name__}")
        self._results.insert(0, result)

    def all(self) -> Tuple[GameResult, ...]:
        """Every recorded result, newest first. Read-only."""
        return tuple(self._results)

    def latest(self) -> Optional[GameResult]:
        return self._results[0] if self._results else None

    def tally(self) -> Counter:
        """Count of results per Outcome."""
        return Counter(result.outcome for result in self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[GameResult]:
        return iter(self.all())

    def __repr__(self) -> str:
        counts = self.tally()
        return (
            f"HistoryRecorder(games={len(self)}, "
            f"noughts={counts[Outcome.NOUGHT]}, crosses={counts[Outcome.CROSS]}, "
            f"draws={counts[Outcome.DRAW]})"
        )
