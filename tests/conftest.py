"""Root-level pytest fixtures for the labelmap test suite.

Provides empty maps, a factory for maps with custom label types, and a
recorder for change notifications.
"""

import pytest

from labelmap import LabelMap, LabelObject


# =============================================================================
# Label map fixtures
# =============================================================================

@pytest.fixture
def label_map():
    """Empty uint16 map with background 0."""
    return LabelMap()


@pytest.fixture
def make_label_map():
    """Factory fixture for maps with given labels pre-registered.

    Examples
    --------
    >>> def test_full(make_label_map):
    ...     lm = make_label_map(range(1, 256), label_type="uint8")
    """
    def _make(labels=(), background_value=0, label_type="uint16"):
        lm = LabelMap(background_value=background_value, label_type=label_type)
        for i, label in enumerate(labels):
            obj = LabelObject(label)
            obj.add_index((i, 0))
            lm.add_label_object(obj)
        return lm

    return _make


@pytest.fixture
def notifications(label_map):
    """List receiving one entry per change notification of ``label_map``."""
    calls = []
    label_map.add_observer(lambda: calls.append(label_map.modified_count))
    return calls
