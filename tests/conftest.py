import random

import pytest

from tests.drivers.builders import EventRecorder, make_flat_category, make_question
from trivia.config import SelectionMode
from trivia.game.controller import TriviaController
from trivia.game.events import EventBus
from trivia.game.scheduler import ManualScheduler
from trivia.quiz.domain.models import Category, Subcategory
from trivia.quiz.domain.normalizer import normalize_categories


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def science_category():
    """Nested category; 'science' subcategory holds 6 questions."""
    return Category(
        id="knowledge",
        name="Knowledge",
        subcategories=[
            Subcategory(
                id="science",
                name="Science",
                questions=[make_question(f"sci-{i}", correct=i % 4) for i in range(6)],
            ),
            Subcategory(id="empty", name="Empty", questions=[]),
        ],
    )


@pytest.fixture
def flat_categories():
    """Four flat categories with 6 questions each, already normalized."""
    return normalize_categories(
        [make_flat_category(cid, 6) for cid in ("a", "b", "c", "d")]
    )


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder(bus):
    return EventRecorder(bus)


@pytest.fixture
def subcategory_controller(science_category, scheduler, bus, rng):
    return TriviaController(
        normalize_categories([science_category]),
        mode=SelectionMode.SUBCATEGORY,
        scheduler=scheduler,
        events=bus,
        rng=rng,
    )


@pytest.fixture
def multi_controller(flat_categories, scheduler, bus, rng):
    return TriviaController(
        flat_categories,
        mode=SelectionMode.MULTI_CATEGORY,
        scheduler=scheduler,
        events=bus,
        rng=rng,
    )
