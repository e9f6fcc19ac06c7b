from collections.abc import Sequence

from trivia.quiz.domain.models import Question


class SequencerError(RuntimeError):
    """Reading a question that does not exist (empty pool or past the end)."""


class QuestionSequencer:
    """
    Forward-only, single-pass walk over a question pool.
    There is no way back and no way to restart; a new game needs a new
    sequencer.
    """

    def __init__(self, pool: Sequence[Question]) -> None:
        self._pool = tuple(pool)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def total(self) -> int:
        return len(self._pool)

    @property
    def has_next(self) -> bool:
        return self._index < len(self._pool)

    @property
    def is_exhausted(self) -> bool:
        return not self.has_next

    def current(self) -> Question:
        if not self._pool:
            raise SequencerError("No question pool")
        if not 0 <= self._index < len(self._pool):
            raise SequencerError(
                f"Index {self._index} out of range for pool of {len(self._pool)}"
            )
        return self._pool[self._index]

    def advance(self) -> bool:
        """Moves one step forward. Returns whether a question remains."""
        if self.is_exhausted:
            raise SequencerError("Cannot advance past the end of the pool")
        self._index += 1
        return self.has_next
