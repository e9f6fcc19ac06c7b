from dataclasses import dataclass, field
from typing import Any

from trivia.quiz.domain.models import AnswerResult


class ScreenType:
    CATEGORIES = "CATEGORIES"
    SUBCATEGORIES = "SUBCATEGORIES"
    QUESTION = "QUESTION"
    FEEDBACK = "FEEDBACK"
    SUMMARY = "SUMMARY"


class Action:
    """Input names the presentation layer sends to the controller."""

    CHOOSE_CATEGORY = "CHOOSE_CATEGORY"
    CHOOSE_SUBCATEGORY = "CHOOSE_SUBCATEGORY"
    BACK_TO_CATEGORIES = "BACK_TO_CATEGORIES"
    TOGGLE_CATEGORY = "TOGGLE_CATEGORY"
    START_GAME = "START_GAME"
    SELECT_OPTION = "SELECT_OPTION"
    SUBMIT_ANSWER = "SUBMIT_ANSWER"
    RESTART = "RESTART"


@dataclass
class UIModel:
    """
    Data Transfer Object (DTO) describing WHAT to render.
    The View layer decides HOW to render it (Streamlit, console, tests).
    """

    type: str
    payload: Any


@dataclass
class CardPayload:
    id: str
    name: str
    image: str | None = None
    selected: bool = False


@dataclass
class SelectionPayload:
    title: str
    cards: list[CardPayload]
    # Multi-category mode only: how many are picked and whether START is enabled
    chosen_count: int = 0
    required_count: int = 0
    can_start: bool = False
    empty_pool: bool = False


@dataclass
class SubcategoryPayload:
    category_id: str
    category_name: str
    cards: list[CardPayload]
    empty_pool: bool = False


@dataclass
class QuestionPayload:
    prompt: str
    options: list[str]
    current_index: int  # 1-based, for display
    total_count: int
    counter_text: str
    score: int
    score_text: str
    selected_option: int | None = None
    can_submit: bool = False
    feedback: AnswerResult | None = None


@dataclass
class SummaryPayload:
    score: int
    total: int
    message: str
    history: list[bool] = field(default_factory=list)
