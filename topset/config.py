"""Configuration objects for top N selections.

A SelectionConfig gathers the capacity and ordering of a selection so it can
be declared once and turned into TopSet or TopIter instances.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .heap import TopSet, check_capacity
from .ordering import Beat, beat_from_key, natural_beat, reversed_beat


class Direction(Enum):
    """Which end of the ordering is kept."""
    GREATEST = "greatest"
    SMALLEST = "smallest"


@dataclass
class SelectionConfig:
    """Configuration of a top N selection.

    Usage:
        config = SelectionConfig(capacity=10, direction=Direction.SMALLEST)
        top = config.build()
        top.extend(costs)
    """

    capacity: int = 1
    """Maximum number of retained items."""

    direction: Direction = Direction.GREATEST
    """Keep the greatest or the smallest items."""

    key: Optional[Callable[[Any], Any]] = None
    """Optional function extracting the ranking value of an item."""

    def __post_init__(self):
        """Validate configuration after initialization."""
        check_capacity(self.capacity)

        if isinstance(self.direction, str):
            self.direction = Direction(self.direction)

        if self.key is not None and not callable(self.key):
            raise ValueError("key must be callable or None")

    def beat(self) -> Beat:
        """Comparator implementing this configuration."""
        smallest = self.direction is Direction.SMALLEST
        if self.key is not None:
            return beat_from_key(self.key, reverse=smallest)
        return reversed_beat if smallest else natural_beat

    def build(self) -> TopSet:
        """Create an empty TopSet from this configuration."""
        return TopSet(self.capacity, self.beat())
