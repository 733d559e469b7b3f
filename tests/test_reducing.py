"""Test reduction of whole collections."""

from topset import TopList, TopSetReducing, beat_from_compare, topset
from topset.ordering import reversed_beat


class TestTopsetFunction:
    """Test the topset() reduction."""

    def test_greatest_score(self):
        """Test the greatest item ends up in the reduced collection."""
        items = [81, 5, 4, 5, 4, 1, 45, 22, 1, 5, 97, 5, 877, 12, 0]

        result = topset(items, 5)

        assert sorted(result) == [22, 45, 81, 97, 877]
        assert 877 in result

    def test_predicate_selects_smallest(self):
        """Test a reversed predicate keeps the smallest items."""
        assert sorted(topset([4, 5, 8, 3, 2, 1], 2, reversed_beat)) == [1, 2]

    def test_three_way_comparator_converted(self):
        """Test three-way comparators are used through beat_from_compare."""
        by_length = beat_from_compare(lambda a, b: len(a) - len(b))

        assert sorted(topset(["aaa", "b", "cc", "dddd"], 2, by_length)) == ["aaa", "dddd"]

    def test_degenerate_inputs(self):
        """Test capacity 0, empty input and oversized capacity."""
        assert topset([1, 2, 3], 0) == []
        assert topset([], 4) == []
        assert sorted(topset((3, 1, 2), 100)) == [1, 2, 3]

    def test_accepts_any_collection(self):
        """Test sets, tuples and dict views can be reduced."""
        assert sorted(topset({5, 1, 9}, 2)) == [5, 9]
        assert sorted(topset({"a": 1, "b": 2}.values(), 1)) == [2]


class TestTopSetReducing:
    """Test the collection mixin."""

    def test_top_list(self):
        """Test TopList is a list with a topset method."""
        items = TopList([4, 5, 8, 3, 2, 1, 4, 7, 9, 8])

        assert isinstance(items, list)
        assert sorted(items.topset(4)) == [7, 8, 8, 9]
        assert sorted(items.topset(4, reversed_beat)) == [1, 2, 3, 4]
        assert len(items) == 10

    def test_custom_collection(self):
        """Test the mixin works with any iterable class."""
        class Scores(TopSetReducing):
            def __init__(self, *values):
                self.values = values

            def __iter__(self):
                return iter(self.values)

        assert sorted(Scores(0.2, 0.9, 0.5).topset(2)) == [0.5, 0.9]
