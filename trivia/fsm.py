import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    SELECTING = "Selecting"  # Choosing category/subcategory
    ANSWERING = "Answering"  # Question loop running
    FINISHED = "Finished"  # Results shown, terminal until restart


class StageAction(Enum):
    START = auto()  # Selection complete and pool built
    ANSWER = auto()  # Accepted submission, more questions remain
    FINISH = auto()  # Accepted submission, pool exhausted
    RESTART = auto()


class StageMachine:
    """
    Pure FSM Logic.
    Knows the allowed stage transitions and nothing about questions or UI.
    """

    def __init__(self, initial_stage: Stage = Stage.SELECTING) -> None:
        self._stage = initial_stage

    @property
    def current_stage(self) -> Stage:
        return self._stage

    def transition(self, action: StageAction) -> bool:
        """
        Applies the action. Returns False (and leaves the stage untouched)
        when the transition table does not allow it.
        """
        previous = self._stage
        target = self._next(action)

        if target is None:
            logger.error(f"⛔ INVALID TRANSITION: {previous.name} + {action.name}")
            return False

        self._stage = target
        logger.info(f"🔄 FSM: {previous.name} --[{action.name}]--> {target.name}")
        return True

    def _next(self, action: StageAction) -> Stage | None:
        match (self._stage, action):
            case (Stage.SELECTING, StageAction.START):
                return Stage.ANSWERING

            case (Stage.ANSWERING, StageAction.ANSWER):
                return Stage.ANSWERING
            case (Stage.ANSWERING, StageAction.FINISH):
                return Stage.FINISHED

            case (_, StageAction.RESTART):
                return Stage.SELECTING

            case _:
                return None
