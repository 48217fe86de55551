"""Ordered, unique-keyed store of label objects.

Keys are kept in a sorted list next to the dict so ascending iteration,
first/last key lookups and ordinal access never need a sort.
"""

import bisect
from typing import Dict, Iterator, List, Optional, Tuple

from labelmap.core.label_object import LabelObject

__all__ = ['LabelObjectContainer']


class LabelObjectContainer:
    """Mapping label -> LabelObject, iterated in ascending label order.

    ``add`` overwrites: the previous object under a label is dropped, never
    merged. Objects are held by reference, so ``copy()`` yields a second
    mapping that shares (aliases) every LabelObject with this one.
    """

    def __init__(self):
        self._objects: Dict[int, LabelObject] = {}
        self._labels: List[int] = []

    def add(self, label: int, label_object: LabelObject) -> None:
        if label not in self._objects:
            bisect.insort(self._labels, label)
        self._objects[label] = label_object

    def find(self, label: int) -> Optional[LabelObject]:
        return self._objects.get(label)

    def erase(self, label: int) -> bool:
        """Drop ``label``; return False if it was absent."""
        if label not in self._objects:
            return False
        del self._objects[label]
        del self._labels[bisect.bisect_left(self._labels, label)]
        return True

    def clear(self) -> None:
        self._objects.clear()
        self._labels.clear()

    def first_label(self) -> int:
        if not self._labels:
            raise ValueError("Container is empty")
        return self._labels[0]

    def last_label(self) -> int:
        if not self._labels:
            raise ValueError("Container is empty")
        return self._labels[-1]

    def nth(self, ordinal: int) -> Tuple[int, LabelObject]:
        """(label, object) at a 0-based position in ascending order."""
        label = self._labels[ordinal]
        return label, self._objects[label]

    def labels(self) -> List[int]:
        return list(self._labels)

    def values(self) -> List[LabelObject]:
        return [self._objects[label] for label in self._labels]

    def items(self) -> List[Tuple[int, LabelObject]]:
        return [(label, self._objects[label]) for label in self._labels]

    def copy(self) -> "LabelObjectContainer":
        """Shallow copy: new mapping, same LabelObject references."""
        other = LabelObjectContainer()
        other._objects = dict(self._objects)
        other._labels = list(self._labels)
        return other

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label) -> bool:
        return label in self._objects

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._labels))

    def __repr__(self):
        return f"LabelObjectContainer(labels={self._labels})"
