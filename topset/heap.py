"""TopSet: a fixed-capacity selector of the greatest items."""

import logging
from functools import cmp_to_key
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .ordering import Beat, compare_from_beat, natural_beat

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check_capacity(n: int) -> int:
    """Validate a capacity value and return it."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"capacity must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"capacity must be non-negative, got {n}")
    return n


class TopSet(Generic[T]):
    """Keeps the ``n`` greatest items offered to it.

    Items are stored in a binary heap whose root is the least retained item,
    i.e. the first one to be evicted when a better candidate shows up. Each
    insertion costs O(log n), so selecting the top n out of m items costs
    O(m log n) instead of the O(m log m) of a full sort.

    ``beat(a, b)`` decides if ``a`` beats ``b`` and so takes its place. It
    should correspond to a strict total order; it is not validated and any
    exception it raises propagates to the caller.

    Usage:
        top = TopSet(3)
        top.extend([4, 5, 8, 3, 2, 1])
        top.drain()  # [4, 5, 8] in some order

        bottom = TopSet(3, reversed_beat)
    """

    def __init__(self, n: int, beat: Beat = natural_beat):
        self._capacity = check_capacity(n)
        self._beat = beat
        self._heap: List[T] = []

    @classmethod
    def with_init(cls, n: int, items: Iterable[T], beat: Beat = natural_beat) -> "TopSet[T]":
        """Create a top set and fill it with an initial set of items.

        If ``items`` holds more than ``n`` elements only the ``n`` greatest
        ones (according to ``beat``) are kept.
        """
        top = cls(n, beat)
        top.extend(items)
        return top

    @property
    def capacity(self) -> int:
        """Maximum number of retained items."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[T]:
        """Iterate over retained items in heap order, without consuming them."""
        return iter(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._heap!r})"

    def is_empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return len(self._heap) >= self._capacity

    def beat(self, a: T, b: T) -> bool:
        """Apply the selecting comparator: does ``a`` beat ``b``?"""
        return self._beat(a, b)

    def peek(self) -> Optional[T]:
        """Return the least retained item (the next one to be evicted), or None.

        None is also returned when a retained None is the least item; use
        is_empty() to tell both cases apart.
        """
        return self._heap[0] if self._heap else None

    def is_candidate(self, item: T) -> bool:
        """Check whether ``insert(item)`` would keep the item."""
        if len(self._heap) < self._capacity:
            return True
        return self._capacity > 0 and self._beat(item, self._heap[0])

    def insert(self, item: T) -> Optional[T]:
        """Offer an item to the top set.

        Args:
            item: Candidate item

        Returns:
            None if the item was added without evicting anything, otherwise
            the item that did not make it: either the evicted former least
            item or ``item`` itself when it does not beat the least one
        """
        heap = self._heap
        if len(heap) < self._capacity:
            heap.append(item)
            self._sift_up(len(heap) - 1)
            return None

        if self._capacity != 0 and self._beat(item, heap[0]):
            evicted, heap[0] = heap[0], item
            self._sift_down(0)
            return evicted
        return item

    def extend(self, items: Iterable[T]) -> None:
        """Offer every item of an iterable, in iteration order."""
        for item in items:
            self.insert(item)

    def merge(self, other: "TopSet[T]") -> None:
        """Offer every item retained by ``other`` to this top set.

        The result is the same as if all items of both sets had been inserted
        into this one. ``other`` is left empty; items are ranked with this
        set's comparator.
        """
        if other is self:
            raise ValueError("cannot merge a TopSet into itself")
        incoming = other.drain()
        self.extend(incoming)
        logger.debug(f"Merged {len(incoming)} items into TopSet, now holding {len(self)}/{self._capacity}")

    def drain(self) -> List[T]:
        """Remove and return all retained items, unsorted (heap order)."""
        items, self._heap = self._heap, []
        return items

    def into_list(self) -> List[T]:
        """Alias of ``drain()``."""
        return self.drain()

    def into_sorted(self) -> List[T]:
        """Remove and return all retained items, from the least to the greatest."""
        compare = compare_from_beat(self._beat)
        items = self.drain()
        items.sort(key=cmp_to_key(lambda a, b: compare(a, b).value))
        return items

    def pop(self) -> T:
        """Remove and return the least retained item.

        Raises:
            IndexError: If the top set is empty
        """
        heap = self._heap
        if not heap:
            raise IndexError("pop from an empty TopSet")
        last = heap.pop()
        if not heap:
            return last
        least, heap[0] = heap[0], last
        self._sift_down(0)
        return least

    def iter_sorted(self) -> Iterator[T]:
        """Pop items one by one, from the least to the greatest."""
        while self._heap:
            yield self.pop()

    def resize(self, n: int) -> None:
        """Change the capacity; shrinking evicts the least items."""
        check_capacity(n)
        evicted = 0
        while len(self._heap) > n:
            self.pop()
            evicted += 1
        logger.debug(f"Resized TopSet from {self._capacity} to {n} ({evicted} items evicted)")
        self._capacity = n

    def clear(self) -> None:
        self._heap.clear()

    # internal stuff

    def _sift_up(self, i: int) -> None:
        """Move item ``i`` towards the root while its parent beats it."""
        heap, beat = self._heap, self._beat
        while i > 0:
            parent = (i - 1) // 2
            # put the greatest the deepest
            if beat(heap[parent], heap[i]):
                heap[parent], heap[i] = heap[i], heap[parent]
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        """Move item ``i`` as deep as possible below the items it beats."""
        heap, beat = self._heap, self._beat
        size = len(heap)
        while True:
            child = 2 * i + 1
            if child >= size:
                break
            # follow the least child
            if child + 1 < size and beat(heap[child], heap[child + 1]):
                child += 1
            if beat(heap[i], heap[child]):
                heap[i], heap[child] = heap[child], heap[i]
                i = child
            else:
                break
