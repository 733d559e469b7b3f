"""Top set reduction of whole collections."""

from typing import Iterable, List, TypeVar

from .heap import TopSet
from .ordering import Beat, natural_beat

T = TypeVar("T")


def topset(items: Iterable[T], n: int, beat: Beat = natural_beat) -> List[T]:
    """Return the ``n`` items of a collection that beat the others, unsorted.

    Args:
        items: Finite collection to reduce
        n: Number of items to keep
        beat: Predicate telling if its first argument beats the second

    Returns:
        Up to ``n`` items in no particular order
    """
    return TopSet.with_init(n, items, beat).drain()


class TopSetReducing:
    """Mixin adding a ``topset()`` reduction to an iterable collection class."""

    def topset(self, n: int, beat: Beat = natural_beat) -> List:
        return topset(self, n, beat)


class TopList(TopSetReducing, list):
    """A list that can be reduced to its top items."""
