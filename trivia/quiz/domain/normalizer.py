from collections.abc import Iterable

from trivia.quiz.domain.models import Category, Subcategory

SYNTHETIC_SUFFIX = "_sub"


def synthetic_subcategory_id(category_id: str) -> str:
    return f"{category_id}{SYNTHETIC_SUFFIX}"


def normalize_category(category: Category) -> Category:
    """
    Wraps a flat category's questions into a single subcategory named
    after the category. Nested categories are returned as-is.
    """
    if category.is_normalized:
        return category

    wrapper = Subcategory(
        id=synthetic_subcategory_id(category.id),
        name=category.name,
        image=category.image,
        questions=category.questions or (),
    )
    return category.model_copy(update={"subcategories": (wrapper,), "questions": None})


def normalize_categories(categories: Iterable[Category]) -> list[Category]:
    """
    Gives every category the nested shape.
    Total and idempotent: normalize(normalize(x)) == normalize(x).
    """
    return [normalize_category(c) for c in categories]
