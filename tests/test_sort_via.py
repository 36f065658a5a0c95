# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for comparator-driven sorting."""

import operator
from collections import Counter

import pytest

from slicekit import Slice, ValidationError


def lt(a, b):
    return a < b


class TestSortVia:
    def test_ascending(self):
        assert Slice.of(3, 1, 2).sort_via(lt) == Slice.of(1, 2, 3)

    def test_descending(self):
        out = Slice.of(3, 1, 4, 1, 5, 9, 2, 6).sort_via(operator.gt)
        assert out.as_list() == [9, 6, 5, 4, 3, 2, 1, 1]

    def test_original_untouched(self, ints):
        ints.sort_via(lt)
        assert ints.items == (3, 1, 2)

    @pytest.mark.parametrize(
        "items",
        [
            [5, 2, 8, 2, 9, 1, 5, 5],
            [1, 2, 3, 4],
            [4, 3, 2, 1],
            [0, 0, 0],
            [-3, 10, 7, -3, 0, 2],
        ],
    )
    def test_permutation_and_adjacent_order(self, items):
        """Test the result is a permutation where no neighbour pair is inverted."""
        out = Slice(items=items).sort_via(lt)
        assert Counter(out) == Counter(items)
        for i in range(out.len() - 1):
            assert not lt(out[i + 1], out[i])

    def test_empty_and_single_skip_comparator(self, empty, recorder):
        ordering = recorder(lt)
        assert empty.sort_via(ordering) == empty
        assert Slice.of(1).sort_via(ordering) == Slice.of(1)
        assert ordering.calls == []

    def test_quadratic_comparator_calls(self, recorder):
        """Test exactly n*(n-1)/2 comparisons are made."""
        ordering = recorder(lt)
        Slice.of(4, 2, 5, 1, 3).sort_via(ordering)
        assert len(ordering.calls) == 10

    def test_comparison_sequence(self, recorder):
        """Test each position i is checked against every earlier j."""
        ordering = recorder(lt)
        Slice.of(3, 1, 2).sort_via(ordering)
        assert ordering.calls == [(1, 3), (2, 1), (2, 3)]

    def test_not_stable(self):
        """Test equal keys can change relative order."""
        items = [("x", 1), ("y", 1), ("z", 0)]
        out = Slice(items=items).sort_via(lambda x, y: x[1] < y[1])
        assert [x[0] for x in out] == ["z", "y", "x"]

    def test_inconsistent_comparator_still_permutes(self):
        """Test a comparator that always says 'precedes' only reorders."""
        items = [1, 2, 3, 4, 5]
        out = Slice(items=items).sort_via(lambda a, b: True)
        assert sorted(out) == items

    def test_key_objects_without_natural_order(self):
        class Box:
            def __init__(self, size):
                self.size = size

        boxes = Slice.of(Box(3), Box(1), Box(2))
        out = boxes.sort_via(lambda a, b: a.size < b.size)
        assert [b.size for b in out] == [1, 2, 3]

    def test_non_callable_rejected(self, ints):
        with pytest.raises(ValidationError) as exc_info:
            ints.sort_via("lt")
        assert exc_info.value.details["argument"] == "ordering"
