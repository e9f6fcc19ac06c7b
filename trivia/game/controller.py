import random
from collections.abc import Sequence
from typing import Any

from trivia.config import GameConfig, Messages, SelectionMode
from trivia.fsm import Stage, StageAction, StageMachine
from trivia.game.core import (
    Action,
    CardPayload,
    QuestionPayload,
    ScreenType,
    SelectionPayload,
    SubcategoryPayload,
    SummaryPayload,
    UIModel,
)
from trivia.game.events import EventBus, GameEvent
from trivia.game.scheduler import IScheduler, ManualScheduler, ScheduledHandle
from trivia.quiz.domain.models import Category, GameSession, Question
from trivia.quiz.domain.pool_builder import IPoolPolicy, PoolPolicyRegistry
from trivia.quiz.domain.scorer import Scorer
from trivia.quiz.domain.selection import SelectionState
from trivia.quiz.domain.sequencer import QuestionSequencer
from trivia.shared.telemetry import GAMES_FINISHED_TOTAL, Telemetry, measure_time


class TriviaController:
    """
    Game-flow controller: selection -> question loop -> results.

    Commands come from the presentation layer and return True when they
    were accepted. Refused commands are logged and change nothing.
    Every state change is announced on `self.events`.
    """

    def __init__(
        self,
        categories: Sequence[Category],
        mode: SelectionMode = GameConfig.SELECTION_MODE,
        scheduler: IScheduler | None = None,
        events: EventBus | None = None,
        rng: random.Random | None = None,
        advance_delay: float = GameConfig.ADVANCE_DELAY_SECONDS,
        pool_policy: IPoolPolicy | None = None,
    ) -> None:
        self.categories = list(categories)
        self.mode = mode
        self.scheduler = scheduler or ManualScheduler()
        self.events = events or EventBus()
        self.rng = rng or random.Random()
        self.advance_delay = advance_delay
        self.policy = pool_policy or PoolPolicyRegistry.get(mode)
        self.telemetry = Telemetry("TriviaController")

        self.selection = SelectionState(self.categories, mode)
        self.fsm = StageMachine()
        self.scorer = Scorer()
        self.session = GameSession()
        self._sequencer: QuestionSequencer | None = None
        self._pending_advance: ScheduledHandle | None = None
        self._pool_empty = False

    # --- Properties ---

    @property
    def stage(self) -> Stage:
        return self.fsm.current_stage

    @property
    def current_question(self) -> Question | None:
        if self.stage is not Stage.ANSWERING or self._sequencer is None:
            return None
        return self._sequencer.current()

    @property
    def has_pending_advance(self) -> bool:
        return self._pending_advance is not None and self._pending_advance.is_pending

    # --- Selection commands ---

    def choose_category(self, category_id: str) -> bool:
        Telemetry.start_trace()
        if not self._require_stage(Stage.SELECTING, "choose_category"):
            return False
        if not self.selection.choose_category(category_id):
            return False

        self._pool_empty = False
        self._emit_selection()
        return True

    def back_to_categories(self) -> bool:
        Telemetry.start_trace()
        if not self._require_stage(Stage.SELECTING, "back_to_categories"):
            return False
        if not self.selection.clear_category():
            return False

        self._pool_empty = False
        self._emit_selection()
        return True

    def choose_subcategory(self, subcategory_id: str) -> bool:
        """Picking a subcategory completes the selection and starts the game."""
        Telemetry.start_trace()
        if not self._require_stage(Stage.SELECTING, "choose_subcategory"):
            return False
        if not self.selection.choose_subcategory(subcategory_id):
            return False

        self._emit_selection()
        return self._start()

    def toggle_category(self, category_id: str) -> bool:
        Telemetry.start_trace()
        if not self._require_stage(Stage.SELECTING, "toggle_category"):
            return False
        if not self.selection.toggle_category(category_id):
            return False

        self._pool_empty = False
        self._emit_selection()
        return True

    def start_game(self) -> bool:
        Telemetry.start_trace()
        if not self._require_stage(Stage.SELECTING, "start_game"):
            return False
        if not self.selection.is_complete:
            self.telemetry.log_warning(
                "Start refused: selection incomplete",
                mode=self.mode.key,
                chosen=self.selection.chosen_ids,
            )
            return False
        return self._start()

    # --- Question loop commands ---

    def select_option(self, index: int) -> bool:
        if not self._require_stage(Stage.ANSWERING, "select_option"):
            return False
        if self.session.awaiting_advance:
            self.telemetry.log_warning("Option change after submission", index=index)
            return False

        question = self.current_question
        if question is None or not 0 <= index < len(question.options):
            self.telemetry.log_warning("Option index out of range", index=index)
            return False

        self.session.selected_option = index
        return True

    @measure_time("submit_answer")
    def submit_answer(self) -> bool:
        Telemetry.start_trace()
        if not self._require_stage(Stage.ANSWERING, "submit_answer"):
            return False
        if self.session.awaiting_advance:
            self.telemetry.log_warning("Duplicate submission refused")
            return False
        if self.session.selected_option is None:
            self.telemetry.log_warning("Submit refused: no option selected")
            return False

        question = self._sequencer.current()
        result = self.scorer.submit(self.session.selected_option, question, self.session)

        self.session.last_result = result
        self.session.awaiting_advance = True
        self.session.history.append(result.correct)
        self.telemetry.log_info(
            "Answer Submitted",
            q_id=question.id,
            correct=result.correct,
            score=self.session.score,
        )

        self.events.emit(
            GameEvent.ANSWER_EVALUATED,
            correct=result.correct,
            correct_index=result.correct_index,
            selected_index=result.selected_index,
        )
        if result.correct:
            self.events.emit(GameEvent.SCORE_CHANGED, score=self.session.score)

        self._pending_advance = self.scheduler.schedule(self.advance_delay, self.advance)
        return True

    def advance(self) -> bool:
        """
        Deferred step after a submission: next question, or finish.
        Only valid while a revealed answer is waiting.
        """
        if not self._require_stage(Stage.ANSWERING, "advance"):
            return False
        if not self.session.awaiting_advance:
            self.telemetry.log_warning("Advance refused: current question unanswered")
            return False

        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

        has_next = self._sequencer.advance()
        self.session.current_index = self._sequencer.index
        self.session.clear_answer()

        if has_next:
            self._transition(StageAction.ANSWER)
            self._present_current()
        else:
            self._transition(StageAction.FINISH)
            GAMES_FINISHED_TOTAL.inc()
            self.telemetry.log_info(
                "🏁 Game Finished", score=self.session.score, total=self.session.total
            )
            self.events.emit(
                GameEvent.GAME_FINISHED,
                score=self.session.score,
                total=self.session.total,
            )
        return True

    def restart(self) -> bool:
        """Discards the session from any stage and returns to selection."""
        Telemetry.start_trace()
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

        self.selection.reset()
        self.session = GameSession()
        self._sequencer = None
        self._pool_empty = False

        self._transition(StageAction.RESTART)
        self.events.emit(GameEvent.SCORE_CHANGED, score=0)
        self._emit_selection()
        return True

    # --- Central input handler ---

    def handle_action(self, action: str, payload: Any = None) -> bool:
        """Routes a named UI action to the matching command."""
        self.telemetry.log_info(
            f"🎮 Action: {action}", stage=self.stage.value, payload=str(payload)
        )
        match action:
            case Action.CHOOSE_CATEGORY:
                return self.choose_category(payload)
            case Action.CHOOSE_SUBCATEGORY:
                return self.choose_subcategory(payload)
            case Action.BACK_TO_CATEGORIES:
                return self.back_to_categories()
            case Action.TOGGLE_CATEGORY:
                return self.toggle_category(payload)
            case Action.START_GAME:
                return self.start_game()
            case Action.SELECT_OPTION:
                try:
                    index = int(payload)
                except (TypeError, ValueError):
                    self.telemetry.log_warning(
                        "Option index missing or not a number", payload=payload
                    )
                    return False
                return self.select_option(index)
            case Action.SUBMIT_ANSWER:
                return self.submit_answer()
            case Action.RESTART:
                return self.restart()
            case _:
                self.telemetry.log_warning("Unknown action", action=action)
                return False

    # --- Internals ---

    @measure_time("start_game")
    def _start(self) -> bool:
        pool = tuple(self.policy.build(self.selection, self.rng))

        if not pool:
            self._pool_empty = True
            self.telemetry.log_warning(
                "Selection produced an empty pool", chosen=self._selection_label()
            )
            self.events.emit(GameEvent.POOL_EMPTY, selection=self._selection_label())
            return False

        self.session = GameSession(pool=pool)
        self._sequencer = QuestionSequencer(pool)
        self._pool_empty = False

        self.events.emit(GameEvent.POOL_READY, pool=pool)
        self._transition(StageAction.START)
        self.events.emit(GameEvent.SCORE_CHANGED, score=0)
        self._present_current()
        return True

    def _present_current(self) -> None:
        question = self._sequencer.current()
        self.events.emit(
            GameEvent.QUESTION_PRESENTED,
            question=question,
            index=self._sequencer.index,
            total=self._sequencer.total,
        )

    def _transition(self, action: StageAction) -> None:
        previous = self.stage
        if not self.fsm.transition(action):
            return
        self.session.stage = self.stage
        if self.stage is not previous:
            self.events.emit(GameEvent.STAGE_CHANGED, stage=self.stage)

    def _require_stage(self, stage: Stage, operation: str) -> bool:
        if self.stage is stage:
            return True
        self.telemetry.log_warning(
            f"{operation} refused outside {stage.value}", stage=self.stage.value
        )
        return False

    def _emit_selection(self) -> None:
        self.events.emit(
            GameEvent.SELECTION_CHANGED,
            category=self.selection.category.id if self.selection.category else None,
            subcategory=(
                self.selection.subcategory.id if self.selection.subcategory else None
            ),
            categories=self.selection.chosen_ids,
        )

    def _selection_label(self) -> str:
        if self.mode is SelectionMode.SUBCATEGORY and self.selection.subcategory:
            return self.selection.subcategory.id
        return ",".join(self.selection.chosen_ids)

    # --- Rendering snapshot ---

    def get_ui_model(self) -> UIModel:
        if self.stage is Stage.FINISHED:
            return UIModel(
                type=ScreenType.SUMMARY,
                payload=SummaryPayload(
                    score=self.session.score,
                    total=self.session.total,
                    message=Messages.FINAL_SCORE.format(
                        score=self.session.score, total=self.session.total
                    ),
                    history=list(self.session.history),
                ),
            )

        if self.stage is Stage.ANSWERING:
            return self._question_model()

        if self.mode is SelectionMode.SUBCATEGORY and self.selection.category:
            category = self.selection.category
            return UIModel(
                type=ScreenType.SUBCATEGORIES,
                payload=SubcategoryPayload(
                    category_id=category.id,
                    category_name=category.name,
                    cards=[
                        CardPayload(id=s.id, name=s.name, image=s.image)
                        for s in category.subcategories or ()
                    ],
                    empty_pool=self._pool_empty,
                ),
            )

        chosen = set(self.selection.chosen_ids)
        return UIModel(
            type=ScreenType.CATEGORIES,
            payload=SelectionPayload(
                title=self.mode.title,
                cards=[
                    CardPayload(
                        id=c.id, name=c.name, image=c.image, selected=c.id in chosen
                    )
                    for c in self.categories
                ],
                chosen_count=len(chosen),
                required_count=(
                    self.selection.required_count
                    if self.mode is SelectionMode.MULTI_CATEGORY
                    else 0
                ),
                can_start=(
                    self.mode is SelectionMode.MULTI_CATEGORY
                    and self.selection.is_complete
                ),
                empty_pool=self._pool_empty,
            ),
        )

    def _question_model(self) -> UIModel:
        question = self._sequencer.current()
        feedback = self.session.last_result if self.session.awaiting_advance else None
        payload = QuestionPayload(
            prompt=question.prompt,
            options=list(question.options),
            current_index=self._sequencer.index + 1,
            total_count=self._sequencer.total,
            counter_text=Messages.QUESTION_COUNTER.format(
                current=self._sequencer.index + 1, total=self._sequencer.total
            ),
            score=self.session.score,
            score_text=Messages.SCORE.format(score=self.session.score),
            selected_option=self.session.selected_option,
            can_submit=(
                self.session.selected_option is not None
                and not self.session.awaiting_advance
            ),
            feedback=feedback,
        )
        ui_type = ScreenType.FEEDBACK if feedback else ScreenType.QUESTION
        return UIModel(type=ui_type, payload=payload)
