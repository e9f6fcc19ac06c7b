import random
from collections.abc import Iterable, MutableSequence
from typing import TypeVar

T = TypeVar("T")


def shuffle_in_place(items: MutableSequence[T], rng: random.Random) -> None:
    """
    Fisher–Yates (Knuth) shuffle.
    For i from the last index down to 1, swap items[i] with items[j],
    j drawn uniformly from [0, i].
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def shuffled(items: Iterable[T], rng: random.Random) -> list[T]:
    """Returns a shuffled copy; the source is left untouched."""
    copy = list(items)
    shuffle_in_place(copy, rng)
    return copy
