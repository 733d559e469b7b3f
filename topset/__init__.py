"""topset: selection of the N greatest items.

This package provides a *top set* which keeps a given number of greatest
items. The criterion used to rank the items can be given as a closure. It is
backed by a binary heap of fixed size.

Three entry points share the same heap:

- TopSet: the container itself, filled with insert() / extend() / merge()
  and emptied with drain().
- TopIter: a builder wrapping an iterable, scanned lazily, yielding its N
  greatest items.
- topset(): reduce a whole collection to its N greatest items.

Returned items are unsorted.
"""

from .heap import TopSet
from .iter import TopIter, TopSelection
from .reducing import TopList, TopSetReducing, topset
from .config import Direction, SelectionConfig
from .ordering import (
    Ordering,
    beat_from_compare,
    beat_from_key,
    compare_from_beat,
    natural_beat,
    reverse,
    reversed_beat,
)


def topiter(n: int) -> TopIter:
    """Shortcut for ``TopIter(n)``."""
    return TopIter(n)


__all__ = [
    # Containers
    'TopSet',
    'TopIter',
    'TopSelection',
    'TopList',
    'TopSetReducing',
    'topset',
    'topiter',

    # Configuration
    'Direction',
    'SelectionConfig',

    # Comparators
    'Ordering',
    'beat_from_compare',
    'beat_from_key',
    'compare_from_beat',
    'natural_beat',
    'reverse',
    'reversed_beat',
]
