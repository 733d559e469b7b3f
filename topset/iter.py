"""Top N iterator: select the N greatest items of an iterable lazily."""

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from .heap import TopSet, check_capacity
from .ordering import Beat, Compare, beat_from_compare, beat_from_key, natural_beat

if TYPE_CHECKING:
    from .config import SelectionConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TopIter(Generic[T]):
    """Builder of a top N selection over an iterable.

    Usage:
        items = [4, 5, 8, 3, 2, 1, 4, 7, 9, 8]

        # the four greatest integers (repeating allowed)
        for x in TopIter(4).with_init(items):
            print("in the top 4:", x)

        # the four smallest ones: reverse the comparison
        for x in TopIter(4).with_init(items).with_selector(lambda a, b: a < b):
            print("in the last 4:", x)

    Items come out unsorted. Building does not touch the source; it is
    scanned once, when the first item is requested.
    """

    def __init__(self, n: int, beat: Beat = natural_beat, init: Optional[Iterable[T]] = None):
        self.count = check_capacity(n)
        self.beat = beat
        self.init = init
        self._consumed = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count}, beat={self.beat!r}, init={self.init!r})"

    def with_init(self, init: Iterable[T]) -> "TopIter[T]":
        """Attach the source iterable (finite or not)."""
        return TopIter(self.count, self.beat, init)

    def with_compare(self, compare: Compare) -> "TopIter[T]":
        """Rank items with a three-way comparison function."""
        return TopIter(self.count, beat_from_compare(compare), self.init)

    def with_selector(self, beat: Beat) -> "TopIter[T]":
        """Rank items with a predicate telling if its first argument beats the second."""
        return TopIter(self.count, beat, self.init)

    def with_key(self, key: Callable[[T], Any], reverse: bool = False) -> "TopIter[T]":
        """Rank items by ``key(item)``; ``reverse`` selects the smallest keys."""
        return TopIter(self.count, beat_from_key(key, reverse), self.init)

    @classmethod
    def from_config(cls, config: "SelectionConfig", init: Optional[Iterable[T]] = None) -> "TopIter[T]":
        return cls(config.capacity, config.beat(), init)

    def __iter__(self) -> "TopSelection[T]":
        if self.init is None:
            raise ValueError("TopIter has no source, call with_init() first")
        if self._consumed:
            raise RuntimeError("TopIter already consumed")
        self._consumed = True
        return TopSelection(TopSet(self.count, self.beat), self.init)


class TopSelection(Iterator[T]):
    """Single-shot iterator over the items selected from a source.

    The source is pulled entirely on the first ``next()`` call (or on
    ``into_topset()``), then the retained items are yielded in no
    particular order. If the scan fails, the error propagates and the
    selection is unusable afterwards: later calls raise RuntimeError
    rather than yield a partial result.
    """

    def __init__(self, top: TopSet[T], source: Iterable[T]):
        self._top = top
        self._source: Optional[Iterable[T]] = source
        self._items: Optional[Iterator[T]] = None
        self._failed = False
        self._handed_off = False

    def _scan(self) -> None:
        if self._failed:
            raise RuntimeError("TopSelection scan failed, selection is incomplete")
        if self._source is None:
            return
        source, self._source = self._source, None
        self._failed = True
        scanned = 0
        for item in source:
            self._top.insert(item)
            scanned += 1
        self._failed = False
        logger.debug(f"Scanned {scanned} items, kept {len(self._top)}/{self._top.capacity}")

    def __iter__(self) -> "TopSelection[T]":
        return self

    def __next__(self) -> T:
        if self._items is None:
            self._scan()
            self._items = iter(self._top.drain())
        return next(self._items)

    def into_topset(self) -> TopSet[T]:
        """Scan the source if needed and return the filled top set instead of iterating.

        The selection is consumed: iterating it afterwards yields nothing, and
        the returned TopSet is left untouched.

        Raises:
            RuntimeError: If iteration already started or the scan failed
        """
        if self._handed_off:
            return self._top
        if self._items is not None:
            raise RuntimeError("TopSelection already iterated")
        self._scan()
        self._items = iter(())
        self._handed_off = True
        return self._top
