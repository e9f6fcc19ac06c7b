from abc import ABC, abstractmethod

from trivia.quiz.domain.models import Category


class IDatasetLoader(ABC):
    @abstractmethod
    def load(self) -> list[Category]:
        """
        Returns the normalized category tree.
        Implementations never fail: unavailable data is replaced by a
        fallback dataset.
        """
        pass
