from pydantic import BaseModel, ConfigDict, Field, model_validator

from trivia.config import GameConfig
from trivia.fsm import Stage


# --- Entities (read-only after load) ---
class Question(BaseModel):
    """
    A four-option multiple choice question.
    Accepts the dataset wire names (`question`, `answer`) as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: str = Field(alias="question", min_length=1)
    options: tuple[str, ...]
    correct_index: int = Field(alias="answer")
    id: str | None = None

    @model_validator(mode="after")
    def _check_options(self) -> "Question":
        if len(self.options) != GameConfig.OPTIONS_PER_QUESTION:
            raise ValueError(
                f"expected {GameConfig.OPTIONS_PER_QUESTION} options, "
                f"got {len(self.options)}"
            )
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"answer index {self.correct_index} out of range "
                f"for {len(self.options)} options"
            )
        return self

    def is_correct(self, selected_index: int) -> bool:
        return selected_index == self.correct_index


class Subcategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: str | None = None
    questions: tuple[Question, ...] = ()


class Category(BaseModel):
    """
    Either flat (questions directly on the category) or nested
    (subcategories). The normalizer turns every category into the
    nested shape.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: str | None = None
    questions: tuple[Question, ...] | None = None
    subcategories: tuple[Subcategory, ...] | None = None

    @property
    def is_normalized(self) -> bool:
        return bool(self.subcategories)

    def get_subcategory(self, subcategory_id: str) -> Subcategory | None:
        for sub in self.subcategories or ():
            if sub.id == subcategory_id:
                return sub
        return None

    def all_questions(self) -> list[Question]:
        """Every question of the category, flattened across subcategories."""
        if self.subcategories:
            return [q for sub in self.subcategories for q in sub.questions]
        return list(self.questions or ())


class AnswerResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    correct: bool
    correct_index: int
    selected_index: int


# --- Session State ---
class GameSession(BaseModel):
    """
    Encapsulates the state of one game run.
    Owned by the controller and replaced wholesale on restart.
    """

    pool: tuple[Question, ...] = ()
    current_index: int = 0
    score: int = 0
    stage: Stage = Stage.SELECTING

    # Per-question input gating
    selected_option: int | None = None
    awaiting_advance: bool = False
    last_result: AnswerResult | None = None
    history: list[bool] = []

    @property
    def total(self) -> int:
        return len(self.pool)

    def record_correct_answer(self) -> None:
        self.score += 1

    def clear_answer(self) -> None:
        self.selected_option = None
        self.awaiting_advance = False
        self.last_result = None
