"""Test label allocation in LabelMap.push_label_object."""

import pytest

from labelmap import LabelMap, LabelObject
from labelmap.contracts import ContainerFull, NullArgument

pytestmark = pytest.mark.unit


def push(lm):
    obj = LabelObject()
    obj.add_index((0, 99))
    return lm.push_label_object(obj).label


class TestEmptyMap:

    def test_background_zero_assigns_one(self):
        assert push(LabelMap(background_value=0)) == 1

    def test_nonzero_background_assigns_zero(self):
        assert push(LabelMap(background_value=5)) == 0


class TestAfterLast:

    def test_next_after_single_label(self, make_label_map):
        assert push(make_label_map([1])) == 2

    def test_next_after_last_ignores_gaps(self, make_label_map):
        """Freed labels below the last one are not reused first."""
        assert push(make_label_map([1, 5, 9])) == 10

    def test_skips_background_with_last_plus_two(self, make_label_map):
        """last + 1 is the background: take last + 2."""
        lm = make_label_map([0, 1, 2], background_value=3)
        assert push(lm) == 4

    def test_consecutive_pushes(self, label_map):
        assert [push(label_map) for _ in range(3)] == [1, 2, 3]
        assert label_map.get_labels() == [1, 2, 3]


class TestBelowFirst:

    def test_last_at_max_uses_first_minus_one(self, make_label_map):
        lm = make_label_map([254, 255], label_type="uint8")
        assert push(lm) == 253

    def test_last_plus_two_overflow_uses_first_minus_one(self, make_label_map):
        """last + 1 is background and the max: last + 2 would overflow."""
        lm = make_label_map([10, 254], background_value=255, label_type="uint8")
        assert push(lm) == 9

    def test_last_plus_two_at_max(self, make_label_map):
        lm = make_label_map([5, 253], background_value=254, label_type="uint8")
        assert push(lm) == 255

    def test_signed_first_minus_one_can_go_negative(self, make_label_map):
        lm = make_label_map([0, 127], background_value=1, label_type="int8")
        assert push(lm) == -1


class TestGapScan:

    def test_scan_finds_first_gap(self, make_label_map):
        labels = [x for x in range(1, 256) if x != 40]
        lm = make_label_map(labels, label_type="uint8")
        assert push(lm) == 40

    def test_scan_skips_background(self, make_label_map):
        labels = [x for x in range(0, 256) if x not in (5, 10)]
        lm = make_label_map(labels, background_value=5, label_type="uint8")
        assert push(lm) == 10

    def test_scan_below_max_background(self, make_label_map):
        labels = [x for x in range(0, 255) if x != 17]
        lm = make_label_map(labels, background_value=255, label_type="uint8")
        assert push(lm) == 17

    def test_full_map_raises(self, make_label_map):
        lm = make_label_map(range(1, 256), label_type="uint8")
        with pytest.raises(ContainerFull, match="full"):
            push(lm)
        assert len(lm) == 255

    def test_full_map_with_background_at_max(self, make_label_map):
        lm = make_label_map(range(0, 255), background_value=255, label_type="uint8")
        with pytest.raises(ContainerFull):
            push(lm)

    def test_scan_does_not_look_below_first(self, make_label_map):
        """Labels below first - 1 == background are never considered."""
        lm = make_label_map(range(5, 256), background_value=4, label_type="uint8")
        with pytest.raises(ContainerFull):
            push(lm)


class TestPushContract:

    def test_push_none_raises(self, label_map):
        with pytest.raises(NullArgument):
            label_map.push_label_object(None)

    def test_push_overrides_object_label(self, label_map):
        obj = LabelObject(label=42)
        obj.add_index((0, 0))
        label_map.push_label_object(obj)
        assert obj.label == 1
        assert label_map.get_label_object(1) is obj
        assert not label_map.has_label(42)

    def test_reuse_after_removal(self, make_label_map):
        """Removing the last label makes it the next allocation."""
        lm = make_label_map([1, 2, 3])
        lm.remove_label(3)
        assert push(lm) == 3
