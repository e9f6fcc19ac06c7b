from collections.abc import Sequence

from trivia.config import GameConfig, SelectionMode
from trivia.quiz.domain.models import Category, Subcategory
from trivia.shared.telemetry import Telemetry


class SelectionState:
    """
    Tracks what the player has picked before a game starts.

    SUBCATEGORY mode: one category, then one subcategory inside it.
    MULTI_CATEGORY mode: a set of exactly `required_count` categories,
    kept in the order they were picked.

    Invalid picks are refused (return False) and leave the state as it was.
    """

    def __init__(
        self,
        categories: Sequence[Category],
        mode: SelectionMode,
        required_count: int = GameConfig.REQUIRED_CATEGORY_COUNT,
    ) -> None:
        self._by_id = {c.id: c for c in categories}
        self.mode = mode
        self.required_count = required_count
        self.telemetry = Telemetry("SelectionState")

        self.category: Category | None = None
        self.subcategory: Subcategory | None = None
        self._chosen_ids: list[str] = []

    # --- Queries ---

    @property
    def chosen_ids(self) -> list[str]:
        return list(self._chosen_ids)

    @property
    def chosen_categories(self) -> list[Category]:
        return [self._by_id[cid] for cid in self._chosen_ids]

    @property
    def is_complete(self) -> bool:
        if self.mode is SelectionMode.SUBCATEGORY:
            return self.subcategory is not None
        return len(self._chosen_ids) == self.required_count

    # --- Subcategory mode ---

    def choose_category(self, category_id: str) -> bool:
        if not self._expect_mode(SelectionMode.SUBCATEGORY, "choose_category"):
            return False

        category = self._by_id.get(category_id)
        if category is None:
            self.telemetry.log_warning("Unknown category", category_id=category_id)
            return False

        self.category = category
        self.subcategory = None
        return True

    def clear_category(self) -> bool:
        if not self._expect_mode(SelectionMode.SUBCATEGORY, "clear_category"):
            return False
        self.category = None
        self.subcategory = None
        return True

    def choose_subcategory(self, subcategory_id: str) -> bool:
        if not self._expect_mode(SelectionMode.SUBCATEGORY, "choose_subcategory"):
            return False

        if self.category is None:
            self.telemetry.log_warning(
                "Subcategory chosen before category", subcategory_id=subcategory_id
            )
            return False

        subcategory = self.category.get_subcategory(subcategory_id)
        if subcategory is None:
            self.telemetry.log_warning(
                "Unknown subcategory",
                category_id=self.category.id,
                subcategory_id=subcategory_id,
            )
            return False

        self.subcategory = subcategory
        return True

    # --- Multi-category mode ---

    def toggle_category(self, category_id: str) -> bool:
        if not self._expect_mode(SelectionMode.MULTI_CATEGORY, "toggle_category"):
            return False

        if category_id not in self._by_id:
            self.telemetry.log_warning("Unknown category", category_id=category_id)
            return False

        if category_id in self._chosen_ids:
            self._chosen_ids.remove(category_id)
            return True

        if len(self._chosen_ids) >= self.required_count:
            self.telemetry.log_warning(
                "Category limit reached",
                category_id=category_id,
                limit=self.required_count,
            )
            return False

        self._chosen_ids.append(category_id)
        return True

    def reset(self) -> None:
        self.category = None
        self.subcategory = None
        self._chosen_ids = []

    def _expect_mode(self, mode: SelectionMode, operation: str) -> bool:
        if self.mode is mode:
            return True
        self.telemetry.log_warning(
            "Operation not available in this mode",
            operation=operation,
            mode=self.mode.key,
        )
        return False
