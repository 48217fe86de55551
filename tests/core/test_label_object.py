"""Test the run-length LabelObject."""

import io

import numpy as np
import pytest

from labelmap.core.label_object import LabelObject, LabelObjectLine, as_index

pytestmark = pytest.mark.unit


class TestIndexNormalization:

    def test_tuple_and_list_become_int_tuples(self):
        assert as_index([1, 2]) == (1, 2)
        assert as_index((3, 4, 5)) == (3, 4, 5)

    def test_bare_int_is_one_dimensional(self):
        assert as_index(7) == (7,)

    def test_numpy_integers_accepted(self):
        assert as_index((np.int64(2), np.uint8(3))) == (2, 3)
        assert as_index(np.int32(4)) == (4,)

    @pytest.mark.parametrize("bad", [(0.7, 0), (1, 2.0), 1.5, ("a", 0)])
    def test_non_integer_coordinates_rejected(self, bad):
        """Float coordinates are never truncated onto a grid position."""
        with pytest.raises(TypeError):
            as_index(bad)


class TestAddAndQuery:

    def test_new_object_is_empty(self):
        obj = LabelObject(5)
        assert obj.is_empty()
        assert obj.label == 5
        assert obj.size == 0

    def test_add_index_membership(self):
        obj = LabelObject(1)
        obj.add_index((2, 3))
        assert obj.has_index((2, 3))
        assert not obj.has_index((3, 2))
        assert not obj.is_empty()

    def test_adjacent_indices_extend_last_line(self):
        """Consecutive axis-0 indices grow one line."""
        obj = LabelObject(1)
        for x in range(4):
            obj.add_index((x, 1))
        assert obj.number_of_lines == 1
        assert obj.lines[0] == LabelObjectLine((0, 1), 4)

    def test_duplicate_add_index_is_noop(self):
        obj = LabelObject(1)
        obj.add_index((0, 0))
        obj.add_index((0, 0))
        assert obj.size == 1
        assert obj.number_of_lines == 1

    def test_add_line_covers_axis_zero(self):
        obj = LabelObject(1)
        obj.add_line((2, 7), 3)
        assert [obj.has_index((x, 7)) for x in range(1, 6)] == [False, True, True, True, False]
        assert not obj.has_index((2, 8))

    def test_add_line_rejects_non_positive_length(self):
        obj = LabelObject(1)
        with pytest.raises(ValueError, match="length"):
            obj.add_line((0, 0), 0)

    def test_add_line_rejects_float_length(self):
        obj = LabelObject(1)
        with pytest.raises(TypeError):
            obj.add_line((0, 0), 2.5)
        assert obj.is_empty()

    def test_add_line_accepts_numpy_length(self):
        obj = LabelObject(1)
        obj.add_line((0, 0), np.int64(3))
        assert obj.size == 3

    def test_dimension_mismatch_is_not_member(self):
        obj = LabelObject(1)
        obj.add_index((1, 1))
        assert not obj.has_index((1, 1, 0))


class TestRemoveIndex:

    def test_remove_missing_returns_false(self):
        obj = LabelObject(1)
        obj.add_index((0, 0))
        assert obj.remove_index((1, 0)) is False
        assert obj.size == 1

    def test_remove_from_middle_splits_line(self):
        obj = LabelObject(1)
        obj.add_line((0, 0), 5)
        assert obj.remove_index((2, 0)) is True
        assert obj.lines == [LabelObjectLine((0, 0), 2), LabelObjectLine((3, 0), 2)]

    def test_remove_line_ends(self):
        obj = LabelObject(1)
        obj.add_line((0, 0), 3)
        obj.remove_index((0, 0))
        obj.remove_index((2, 0))
        assert obj.lines == [LabelObjectLine((1, 0), 1)]

    def test_remove_last_index_empties(self):
        obj = LabelObject(1)
        obj.add_index((4, 4))
        assert obj.remove_index((4, 4))
        assert obj.is_empty()

    def test_remove_from_overlapping_lines(self):
        """A position covered twice is fully removed."""
        obj = LabelObject(1)
        obj.add_line((0, 0), 4)
        obj.add_line((2, 0), 4)
        assert obj.remove_index((3, 0))
        assert not obj.has_index((3, 0))
        assert obj.size == 5


class TestOptimize:

    def test_merges_overlapping_and_adjacent_lines(self):
        obj = LabelObject(1)
        obj.add_line((5, 0), 2)
        obj.add_line((0, 0), 3)
        obj.add_line((2, 0), 3)
        obj.add_index((0, 1))
        obj.optimize()
        assert obj.lines == [LabelObjectLine((0, 0), 7), LabelObjectLine((0, 1), 1)]

    def test_optimize_preserves_membership(self):
        obj = LabelObject(1)
        obj.add_line((3, 2), 2)
        obj.add_line((0, 2), 2)
        before = sorted(obj)
        obj.optimize()
        assert sorted(obj) == before
        assert obj.size == 4

    def test_size_counts_distinct_positions(self):
        obj = LabelObject(1)
        obj.add_line((0, 0), 4)
        obj.add_line((2, 0), 4)
        assert obj.size == 6
        assert obj.number_of_lines == 2


class TestPrinting:

    def test_print_to_stream(self):
        obj = LabelObject(9)
        obj.add_line((1, 2), 3)
        buf = io.StringIO()
        obj.print_to(buf)
        text = buf.getvalue()
        assert "Label: 9" in text
        assert "NumberOfLines: 1" in text
        assert "(1, 2) length=3" in text

    def test_iteration_order(self):
        obj = LabelObject(1)
        obj.add_index((1, 1))
        obj.add_index((0, 0))
        obj.add_index((1, 0))
        assert list(obj) == [(0, 0), (1, 0), (1, 1)]
