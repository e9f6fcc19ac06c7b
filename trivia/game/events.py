from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from trivia.shared.telemetry import Telemetry


class GameEvent(Enum):
    SELECTION_CHANGED = auto()
    POOL_READY = auto()
    POOL_EMPTY = auto()
    QUESTION_PRESENTED = auto()
    ANSWER_EVALUATED = auto()
    SCORE_CHANGED = auto()
    STAGE_CHANGED = auto()
    GAME_FINISHED = auto()


@dataclass(frozen=True)
class GameSignal:
    event: GameEvent
    data: dict[str, Any] = field(default_factory=dict)


Handler = Callable[[GameSignal], None]


class EventBus:
    """
    Synchronous observer registry.
    Handlers run in subscription order, inside the emitting call.
    """

    def __init__(self) -> None:
        self._handlers: dict[GameEvent, list[Handler]] = {}
        self._wildcard: list[Handler] = []
        self.telemetry = Telemetry("EventBus")

    def subscribe(self, event: GameEvent, handler: Handler) -> Callable[[], None]:
        """Returns a callable that removes the subscription."""
        self._handlers.setdefault(event, []).append(handler)
        return lambda: self._handlers[event].remove(handler)

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        self._wildcard.append(handler)
        return lambda: self._wildcard.remove(handler)

    def emit(self, event: GameEvent, **data: Any) -> GameSignal:
        signal = GameSignal(event=event, data=data)
        self.telemetry.log_debug(f"📣 {event.name}", **data)

        for handler in [*self._handlers.get(event, []), *self._wildcard]:
            handler(signal)
        return signal
