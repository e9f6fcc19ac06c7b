import json
from typing import Any

import requests
from pydantic import ValidationError

from trivia.config import GameConfig
from trivia.quiz.adapters.fallback_dataset import FALLBACK_DATASET
from trivia.quiz.domain.models import Category, Question, Subcategory
from trivia.quiz.domain.normalizer import normalize_categories
from trivia.quiz.domain.ports import IDatasetLoader
from trivia.shared.telemetry import DATASET_FALLBACKS_TOTAL, Telemetry, measure_time


class DatasetError(Exception):
    """The configured dataset could not be fetched or understood."""


class DatasetParser:
    """
    Converts a raw `{categories: [...]}` document into Category models.

    Malformed questions are dropped one by one (logged); a malformed
    document as a whole raises DatasetError.
    """

    def __init__(self, telemetry: Telemetry) -> None:
        self.telemetry = telemetry

    def parse(self, document: Any) -> list[Category]:
        if not isinstance(document, dict) or not isinstance(
            document.get("categories"), list
        ):
            raise DatasetError("Document has no 'categories' list")

        categories = []
        for position, raw in enumerate(document["categories"]):
            category = self._parse_category(raw, position)
            if category is not None:
                categories.append(category)

        if not any(c.all_questions() for c in categories):
            raise DatasetError("Dataset contains no usable questions")
        return categories

    def _parse_category(self, raw: Any, position: int) -> Category | None:
        if not isinstance(raw, dict) or "id" not in raw or "name" not in raw:
            self.telemetry.log_warning("Skipping malformed category", position=position)
            return None

        category_id = str(raw["id"])
        fields: dict[str, Any] = {
            "id": category_id,
            "name": raw["name"],
            "image": raw.get("image") or None,
        }
        if raw.get("questions") is not None:
            fields["questions"] = self._parse_questions(raw["questions"], category_id)
        if isinstance(raw.get("subcategories"), list):
            subcategories = []
            for i, sub_raw in enumerate(raw["subcategories"]):
                sub = self._parse_subcategory(sub_raw, category_id, i)
                if sub is not None:
                    subcategories.append(sub)
            fields["subcategories"] = subcategories

        try:
            return Category.model_validate(fields)
        except ValidationError as e:
            self.telemetry.log_warning(
                "Skipping invalid category", category_id=category_id, error=str(e)
            )
            return None

    def _parse_subcategory(
        self, raw: Any, category_id: str, position: int
    ) -> Subcategory | None:
        if not isinstance(raw, dict) or "id" not in raw or "name" not in raw:
            self.telemetry.log_warning(
                "Skipping malformed subcategory",
                category_id=category_id,
                position=position,
            )
            return None

        subcategory_id = str(raw["id"])
        try:
            return Subcategory(
                id=subcategory_id,
                name=raw["name"],
                image=raw.get("image") or None,
                questions=self._parse_questions(raw.get("questions"), subcategory_id),
            )
        except ValidationError as e:
            self.telemetry.log_warning(
                "Skipping invalid subcategory",
                subcategory_id=subcategory_id,
                error=str(e),
            )
            return None

    def _parse_questions(self, raw_questions: Any, owner_id: str) -> list[Question]:
        if not isinstance(raw_questions, list):
            return []

        questions = []
        for i, raw in enumerate(raw_questions, start=1):
            if not isinstance(raw, dict):
                self.telemetry.log_warning(
                    "Skipping malformed question", owner=owner_id, position=i
                )
                continue
            raw_id = raw.get("id")
            question_id = str(raw_id) if raw_id is not None else f"{owner_id}-{i}"
            try:
                questions.append(Question.model_validate({**raw, "id": question_id}))
            except ValidationError as e:
                self.telemetry.log_warning(
                    "Skipping invalid question",
                    owner=owner_id,
                    position=i,
                    error=str(e),
                )
        return questions


class DatasetLoader(IDatasetLoader):
    """
    Loads the category tree from a URL or a local JSON file.
    Any failure switches to the embedded fallback dataset, once.
    """

    def __init__(
        self,
        source: str = GameConfig.DATASET_SOURCE,
        timeout: float = GameConfig.FETCH_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
        fallback: dict[str, Any] = FALLBACK_DATASET,
    ) -> None:
        self.source = source
        self.timeout = timeout
        self.session = session or requests.Session()
        self.fallback = fallback
        self.used_fallback = False
        self.telemetry = Telemetry("DatasetLoader")
        self.parser = DatasetParser(self.telemetry)

    @measure_time("load_dataset")
    def load(self) -> list[Category]:
        try:
            categories = self.parser.parse(self._fetch())
            self.used_fallback = False
            self.telemetry.log_info(
                "Dataset loaded", source=self.source, categories=len(categories)
            )
        except DatasetError as e:
            self.telemetry.log_warning(
                "Using fallback questions", source=self.source, reason=str(e)
            )
            DATASET_FALLBACKS_TOTAL.inc()
            self.used_fallback = True
            categories = self.parser.parse(self.fallback)

        return normalize_categories(categories)

    def _fetch(self) -> Any:
        if GameConfig.is_remote_source(self.source):
            return self._fetch_remote()
        return self._fetch_local()

    def _fetch_remote(self) -> Any:
        try:
            response = self.session.get(self.source, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise DatasetError(f"Request failed: {e}") from e
        except ValueError as e:
            raise DatasetError(f"Response is not valid JSON: {e}") from e

    def _fetch_local(self) -> Any:
        try:
            with open(self.source, encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise DatasetError(f"Cannot read {self.source}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DatasetError(f"Invalid JSON in {self.source}: {e}") from e
