"""Comparator contract shared by every topset entry point.

The heap is written against a single comparator style, a *beat* predicate:
``beat(a, b)`` returns ``True`` when ``a`` is strictly greater than ``b`` and
so deserves to take its place in the top set. Three-way comparison functions
(the ``functools.cmp_to_key`` convention) and key functions are converted to
a beat at the boundary.
"""

from enum import Enum
from typing import Any, Callable, Union


Beat = Callable[[Any, Any], bool]
Compare = Callable[[Any, Any], Union[int, "Ordering"]]


class Ordering(Enum):
    """Result of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: Union[int, float, "Ordering"]) -> "Ordering":
        """Normalise a three-way result (any sign, or an Ordering) to a member."""
        if isinstance(value, Ordering):
            return value
        if value > 0:
            return cls.GREATER
        if value < 0:
            return cls.LESS
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


def natural_beat(a: Any, b: Any) -> bool:
    """Natural order: the greatest items win."""
    return a > b


def reversed_beat(a: Any, b: Any) -> bool:
    """Reversed natural order: the smallest items win."""
    return a < b


def reverse(beat: Beat) -> Beat:
    """Swap the arguments of a beat, turning a top N into a bottom N."""
    def reversed_(a, b):
        return beat(b, a)
    return reversed_


def beat_from_compare(compare: Compare) -> Beat:
    """Build a beat from a three-way comparison function.

    ``beat(a, b)`` is ``True`` exactly when ``compare(a, b)`` is greater.

    Args:
        compare: Function returning a negative number, zero or a positive
            number (or an Ordering member)

    Returns:
        Predicate usable as a TopSet comparator
    """
    def beat(a, b):
        return Ordering.of(compare(a, b)) is Ordering.GREATER
    return beat


def compare_from_beat(beat: Beat) -> Callable[[Any, Any], Ordering]:
    """Build a three-way comparison function from a beat.

    Two items that beat neither one another compare as EQUAL.
    """
    def compare(a, b):
        if beat(a, b):
            return Ordering.GREATER
        if beat(b, a):
            return Ordering.LESS
        return Ordering.EQUAL
    return compare


def beat_from_key(key: Callable[[Any], Any], reverse: bool = False) -> Beat:
    """Build a beat ranking items by ``key(item)``, like ``heapq.nlargest``.

    Args:
        key: Function extracting the ranking value of an item
        reverse: Rank the smallest keys first instead of the greatest

    Returns:
        Predicate usable as a TopSet comparator
    """
    if reverse:
        def beat(a, b):
            return key(a) < key(b)
    else:
        def beat(a, b):
            return key(a) > key(b)
    return beat
