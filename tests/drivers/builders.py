from trivia.game.events import EventBus, GameEvent, GameSignal
from trivia.quiz.domain.models import Category, Question


def make_question(prompt: str, correct: int = 0) -> Question:
    """Helper to create minimal valid Question objects for testing."""
    return Question(
        id=prompt,
        prompt=prompt,
        options=["A", "B", "C", "D"],
        correct_index=correct,
    )


def make_flat_category(category_id: str, count: int) -> Category:
    return Category(
        id=category_id,
        name=category_id.upper(),
        questions=[
            make_question(f"{category_id}-{i}", correct=i % 4) for i in range(count)
        ],
    )


class EventRecorder:
    """Collects every signal emitted on a bus."""

    def __init__(self, bus: EventBus) -> None:
        self.signals: list[GameSignal] = []
        bus.subscribe_all(self.signals.append)

    def of(self, event: GameEvent) -> list[GameSignal]:
        return [s for s in self.signals if s.event is event]

    def names(self) -> list[str]:
        return [s.event.name for s in self.signals]
