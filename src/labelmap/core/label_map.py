"""Sparse labeled-region container.

A LabelMap represents a segmentation over an implicit index space without
materializing a dense array: for every label other than the background it
holds one LabelObject describing, as runs, the positions carrying that
label. Unassigned positions belong to the background by absence.

The map is a single-threaded value type. Every mutation that changes
observable state calls ``modified()``, which bumps ``modified_count`` and
runs the registered observers synchronously.

Disjointness of regions is only maintained by ``set_pixel``: ``add_pixel``,
``set_line`` and ``add_label_object`` write into one label object without
looking at the others.
"""

import logging
import sys
from typing import Callable, Dict, Iterator, List, Optional, Union

from labelmap.contracts.base import require
from labelmap.contracts.failure import (
    BackgroundLabelAccess,
    ContainerFull,
    IncompatibleSourceType,
    IndexOutOfRange,
    InvalidLabel,
    LabelNotFound,
    NullArgument,
    PositionNotFound,
)
from labelmap.core.container import LabelObjectContainer
from labelmap.core.label_object import LabelObject, as_index
from labelmap.core.label_type import LabelType
from labelmap.schemas.config import LabelMapConfig

__all__ = ['LabelMap']

logger = logging.getLogger(__name__)


class LabelMap:
    """Ordered collection of label objects over a sparse index space.

    Parameters
    ----------
    background_value : int, optional
        Label of unassigned positions. Never stored as a key. Defaults to 0.
    label_type : str, numpy dtype or LabelType, optional
        Integral label domain. Defaults to ``uint16``.

    Examples
    --------
    >>> lm = LabelMap()
    >>> lm.set_line((0, 0), 5, 3)
    >>> lm.get_pixel((2, 0))
    3
    >>> lm.get_pixel((7, 0))
    0
    >>> lm.push_label_object(LabelObject()).label
    4
    """

    kind_name = "label_map"
    label_object_class = LabelObject

    def __init__(self, background_value: int = 0, label_type: Union[str, LabelType] = "uint16"):
        self.label_type = label_type if isinstance(label_type, LabelType) else LabelType(label_type)
        self._background_value = self.label_type.validate(background_value)
        self._container = LabelObjectContainer()
        self._observers: Dict[int, Callable[[], None]] = {}
        self._next_observer_tag = 0
        self.modified_count = 0
        self.initialize()

    @classmethod
    def from_config(cls, config: Union[dict, LabelMapConfig]) -> "LabelMap":
        """Build an empty map from a LabelMapConfig (or a dict of its fields)."""
        if isinstance(config, dict):
            config = LabelMapConfig(**config)
        return cls(background_value=config.background_value, label_type=config.label_dtype)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def kind(self) -> str:
        """Compatibility tag checked by ``graft``."""
        return f"{self.kind_name}[{self.label_type.name}]"

    @property
    def background_value(self) -> int:
        return self._background_value

    @background_value.setter
    def background_value(self, value: int) -> None:
        value = self.label_type.validate(value)
        if value == self._background_value:
            return
        if value in self._container:
            # existing keys are not revalidated against the new background
            logger.warning("Background value set to %d, which is a registered label", value)
        self._background_value = value
        self.modified()

    @property
    def label_object_container(self) -> LabelObjectContainer:
        return self._container

    @property
    def number_of_label_objects(self) -> int:
        return len(self._container)

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def add_observer(self, callback: Callable[[], None]) -> int:
        """Register a zero-argument callback run on every change.

        Returns
        -------
        int
            Tag to pass to ``remove_observer``.
        """
        if not callable(callback):
            raise TypeError(f"Observer must be callable, got {type(callback).__name__}")
        tag = self._next_observer_tag
        self._next_observer_tag += 1
        self._observers[tag] = callback
        return tag

    def remove_observer(self, tag: int) -> None:
        del self._observers[tag]

    def modified(self) -> None:
        """Signal that the map changed. Observer exceptions propagate."""
        self.modified_count += 1
        for callback in list(self._observers.values()):
            callback()

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        self.clear_labels()

    def allocate(self) -> None:
        self.initialize()

    def clear_labels(self) -> None:
        """Remove every label object; notify only if there were any."""
        if len(self._container):
            logger.debug("Clearing %d label objects", len(self._container))
            self._container.clear()
            self.modified()

    # ------------------------------------------------------------------
    # Label objects
    # ------------------------------------------------------------------

    def add_label_object(self, label_object: LabelObject) -> None:
        """Insert ``label_object`` under its own label.

        An object already registered under that label is replaced, not
        merged. No overlap check against the other objects is done.

        Raises
        ------
        NullArgument
            If ``label_object`` is None.
        BackgroundLabelAccess
            If the object carries the background label.
        InvalidLabel
            If the object's label is not representable by the label type.
        """
        require(label_object is not None, "Input LabelObject can't be None", NullArgument)
        label = self.label_type.validate(label_object.label)
        require(
            label != self._background_value,
            f"Label {label} is the background label.",
            BackgroundLabelAccess,
        )
        label_object.label = label
        self._container.add(label, label_object)
        self.modified()

    def push_label_object(self, label_object: LabelObject) -> LabelObject:
        """Give ``label_object`` an unused label and insert it.

        The label is chosen in this order:

        1. empty map: 1 if the background is 0, else 0
        2. last label + 1
        3. last label + 2
        4. first label - 1
        5. the first gap found scanning upward from the first label

        Each candidate is skipped when it equals the background or does not
        fit the label type.

        Returns
        -------
        LabelObject
            The same object, now labeled and registered.

        Raises
        ------
        NullArgument
            If ``label_object`` is None.
        ContainerFull
            If the scan finds no gap.
        """
        require(label_object is not None, "Input LabelObject can't be None", NullArgument)
        label_object.label = self._allocate_label()
        logger.debug("Pushing label object with allocated label %d", label_object.label)
        self.add_label_object(label_object)
        return label_object

    def _allocate_label(self) -> int:
        background = self._background_value
        lowest, highest = self.label_type.min, self.label_type.max

        if not len(self._container):
            return 1 if background == 0 else 0

        last = self._container.last_label()
        first = self._container.first_label()
        if last != highest and last + 1 != background:
            return last + 1
        if last != highest and last + 1 != highest and last + 2 != background:
            return last + 2
        if first != lowest and first - 1 != background:
            return first - 1

        # walk candidates and keys in lockstep; the first mismatch is free
        label = first
        for existing in self._container:
            if label == background:
                label += 1
            if label != existing:
                return label
            label += 1
        raise ContainerFull("Can't push the label object: the label map is full.")

    def remove_label(self, label: int) -> None:
        """Drop the object registered under ``label`` (absent labels are ignored).

        Raises
        ------
        BackgroundLabelAccess
            If ``label`` is the background label.
        """
        label = self.label_type.validate(label)
        require(
            label != self._background_value,
            f"Label {label} is the background label.",
            BackgroundLabelAccess,
        )
        if self._container.erase(label):
            logger.debug("Removed label object %d", label)
        self.modified()

    def remove_label_object(self, label_object: LabelObject) -> None:
        require(label_object is not None, "Input LabelObject can't be None", NullArgument)
        self.remove_label(label_object.label)

    # ------------------------------------------------------------------
    # Pixel and run mutation
    # ------------------------------------------------------------------

    def set_pixel(self, position, label: int) -> None:
        """Assign ``position`` to ``label``, evicting it from every other label.

        Setting the background label only removes the position from its
        current owner.
        """
        label = self.label_type.validate(label)
        idx = as_index(position)
        # removals stay silent when an add follows, which notifies
        emit_on_remove = label == self._background_value
        new_label = True
        for existing_label, label_object in self._container.items():
            if existing_label != label:
                self._remove_pixel_from(existing_label, label_object, idx, emit_on_remove)
            else:
                new_label = False
                self._add_pixel_to(label_object, idx, label)
        if new_label:
            self._add_pixel_to(None, idx, label)

    def add_pixel(self, position, label: int) -> None:
        """Add ``position`` to ``label``'s region, creating it if needed.

        No-op for the background label. Other labels are not checked for
        the position.
        """
        label = self.label_type.validate(label)
        if label == self._background_value:
            return
        self._add_pixel_to(self._container.find(label), as_index(position), label)

    def _add_pixel_to(self, label_object: Optional[LabelObject], idx: tuple, label: int) -> None:
        if label == self._background_value:
            return
        if label_object is not None:
            label_object.add_index(idx)
            self.modified()
        else:
            label_object = self.label_object_class(label)
            label_object.add_index(idx)
            logger.debug("Created label object %d", label)
            # add_label_object notifies
            self.add_label_object(label_object)

    def remove_pixel(self, position, label: int) -> None:
        """Remove ``position`` from ``label``'s region.

        No-op for the background label, an unknown label or a position the
        region does not hold. A region left empty is dropped from the map.
        """
        label = self.label_type.validate(label)
        if label == self._background_value:
            return
        self._remove_pixel_from(label, self._container.find(label), as_index(position), True)

    def _remove_pixel_from(self, label: int, label_object: Optional[LabelObject], idx: tuple,
                           emit_modified: bool) -> None:
        if label_object is None:
            return
        if label_object.remove_index(idx):
            if label_object.is_empty():
                # emptied regions leave the map; the caller decides on notifying
                self._container.erase(label)
                logger.debug("Label object %d emptied and removed", label)
            if emit_modified:
                self.modified()

    def set_line(self, position, length: int, label: int) -> None:
        """Add a run of ``length`` positions along axis 0 to ``label``.

        No-op for the background label. Like ``add_pixel`` this does not
        evict the run from other labels.
        """
        label = self.label_type.validate(label)
        if label == self._background_value:
            return
        idx = as_index(position)
        label_object = self._container.find(label)
        if label_object is not None:
            label_object.add_line(idx, length)
            self.modified()
        else:
            label_object = self.label_object_class(label)
            label_object.add_line(idx, length)
            logger.debug("Created label object %d from a line of %d", label, length)
            self.add_label_object(label_object)

    def optimize(self) -> None:
        """Compact every label object's runs. Always notifies."""
        for label_object in self._container.values():
            label_object.optimize()
        self.modified()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_pixel(self, position) -> int:
        """Label at ``position``: first owner in label order, else background."""
        idx = as_index(position)
        for label, label_object in self._container.items():
            if label_object.has_index(idx):
                return label
        return self._background_value

    def has_label(self, label: int) -> bool:
        try:
            label = self.label_type.validate(label)
        except InvalidLabel:
            return False
        return label == self._background_value or label in self._container

    def get_label_object(self, label: int) -> LabelObject:
        """Return the live object registered under ``label``.

        Raises
        ------
        BackgroundLabelAccess
            If ``label`` is the background label.
        LabelNotFound
            If no object is registered under ``label``.
        """
        label = self.label_type.validate(label)
        require(
            label != self._background_value,
            f"Label {label} is the background label.",
            BackgroundLabelAccess,
        )
        label_object = self._container.find(label)
        require(label_object is not None, f"No label object with label {label}.", LabelNotFound)
        return label_object

    def get_label_object_at(self, position) -> LabelObject:
        """Return the first object whose region holds ``position``.

        Background positions are not special-cased: an unowned position
        raises PositionNotFound rather than yielding the background.
        """
        idx = as_index(position)
        for label_object in self._container.values():
            if label_object.has_index(idx):
                return label_object
        raise PositionNotFound(f"No label object at index {idx}.")

    def get_nth_label_object(self, ordinal: int) -> LabelObject:
        """Return the object at 0-based ``ordinal`` in ascending label order."""
        count = len(self._container)
        require(
            0 <= ordinal < count,
            f"Can't access to label object at position {ordinal}. "
            f"The label map has only {count} label objects registered.",
            IndexOutOfRange,
        )
        return self._container.nth(ordinal)[1]

    def get_labels(self) -> List[int]:
        return self._container.labels()

    def get_label_objects(self) -> List[LabelObject]:
        return self._container.values()

    # ------------------------------------------------------------------
    # Graft
    # ------------------------------------------------------------------

    def graft(self, source: Optional["LabelMap"]) -> None:
        """Take over ``source``'s label objects and background value.

        The mapping is copied but the LabelObjects are shared: editing a
        region through one map shows in the other, while replacing an entry
        in one map leaves the other untouched. A None source is ignored.

        Raises
        ------
        IncompatibleSourceType
            If ``source`` is not a label map of the same kind.
        """
        if source is None:
            logger.debug("Graft from None ignored")
            return
        source_kind = getattr(source, "kind", None)
        require(
            source_kind == self.kind,
            f"LabelMap.graft() cannot graft {type(source).__name__} "
            f"(kind {source_kind!r}) onto {self.kind}",
            IncompatibleSourceType,
        )
        self._container = source.label_object_container.copy()
        self._background_value = source.background_value
        logger.debug("Grafted %d label objects, background=%d",
                     len(self._container), self._background_value)
        self.modified()

    # ------------------------------------------------------------------
    # Printing and dunder access
    # ------------------------------------------------------------------

    def print_self(self, stream=None) -> None:
        stream = stream if stream is not None else sys.stdout
        stream.write(f"{type(self).__name__} ({self.kind})\n")
        stream.write(f"  BackgroundValue: {self._background_value}\n")
        stream.write(f"  NumberOfLabelObjects: {len(self._container)}\n")

    def print_label_objects(self, stream=None) -> None:
        stream = stream if stream is not None else sys.stdout
        for label_object in self._container.values():
            label_object.print_to(stream)
            stream.write("\n")

    def __len__(self) -> int:
        return len(self._container)

    def __iter__(self) -> Iterator[LabelObject]:
        return iter(self._container.values())

    def __contains__(self, label) -> bool:
        return self.has_label(label)

    def __repr__(self):
        return (f"LabelMap(background_value={self._background_value}, "
                f"label_type={self.label_type.name!r}, labels={self._container.labels()})")
