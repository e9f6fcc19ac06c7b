import random
from abc import ABC, abstractmethod

from trivia.config import GameConfig, SelectionMode
from trivia.quiz.domain.models import Category, Question
from trivia.quiz.domain.selection import SelectionState
from trivia.quiz.domain.shuffle import shuffled
from trivia.shared.telemetry import Telemetry, measure_time


# --- Interface ---
class IPoolPolicy(ABC):
    """Turns a completed selection into the ordered question pool."""

    @abstractmethod
    def build(self, selection: SelectionState, rng: random.Random) -> list[Question]:
        pass


# --- Concrete Policies ---


class SubcategoryPoolPolicy(IPoolPolicy):
    """Every question of the chosen subcategory, in random order."""

    def __init__(self) -> None:
        self.telemetry = Telemetry("Pool.Subcategory")

    @measure_time("build_subcategory_pool")
    def build(self, selection: SelectionState, rng: random.Random) -> list[Question]:
        subcategory = selection.subcategory
        if subcategory is None:
            raise ValueError("Subcategory pool requested without a subcategory")

        pool = shuffled(subcategory.questions, rng)
        self.telemetry.log_info(
            "Pool built", subcategory=subcategory.id, count=len(pool)
        )
        return pool


class MultiCategoryPoolPolicy(IPoolPolicy):
    """
    Samples `per_category` questions from each chosen category, then
    shuffles the combined pool. Categories with fewer questions contribute
    all they have.
    """

    def __init__(self, per_category: int = GameConfig.QUESTIONS_PER_CATEGORY) -> None:
        self.per_category = per_category
        self.telemetry = Telemetry("Pool.MultiCategory")

    @measure_time("build_multi_category_pool")
    def build(self, selection: SelectionState, rng: random.Random) -> list[Question]:
        categories = selection.chosen_categories
        if len(categories) != selection.required_count:
            raise ValueError(
                f"Multi-category pool needs {selection.required_count} categories, "
                f"got {len(categories)}"
            )

        combined: list[Question] = []
        for category in categories:
            combined.extend(self.sample(category, rng))

        pool = shuffled(combined, rng)
        self.telemetry.log_info(
            "Pool built",
            categories=[c.id for c in categories],
            count=len(pool),
        )
        return pool

    def sample(self, category: Category, rng: random.Random) -> list[Question]:
        candidates = shuffled(category.all_questions(), rng)
        if len(candidates) < self.per_category:
            self.telemetry.log_warning(
                "Category short of questions",
                category=category.id,
                available=len(candidates),
                requested=self.per_category,
            )
        return candidates[: self.per_category]


# --- Registry ---
class PoolPolicyRegistry:
    _policies: dict[SelectionMode, IPoolPolicy] = {}

    @classmethod
    def register(cls, mode: SelectionMode, policy: IPoolPolicy) -> None:
        cls._policies[mode] = policy

    @classmethod
    def get(cls, mode: SelectionMode) -> IPoolPolicy:
        return cls._policies[mode]


PoolPolicyRegistry.register(SelectionMode.SUBCATEGORY, SubcategoryPoolPolicy())
PoolPolicyRegistry.register(SelectionMode.MULTI_CATEGORY, MultiCategoryPoolPolicy())
