"""Integral label value domain backed by a numpy dtype.

The label map never stores numpy scalars: labels are validated against the
dtype's bounds and kept as plain Python ints, so arithmetic in the
allocation algorithm cannot wrap around.
"""

import numbers

import numpy as np

from labelmap.contracts.base import require
from labelmap.contracts.failure import InvalidLabel

__all__ = ['LabelType', 'SUPPORTED_DTYPES']

SUPPORTED_DTYPES = (
    "uint8", "uint16", "uint32", "uint64",
    "int8", "int16", "int32", "int64",
)


class LabelType:
    """Ordered integral label type with a minimum and a maximum.

    Parameters
    ----------
    dtype : str or numpy dtype, optional
        Any numpy integer dtype. Defaults to ``uint16``.

    Examples
    --------
    >>> lt = LabelType("uint8")
    >>> lt.min, lt.max
    (0, 255)
    >>> lt.validate(np.uint8(7))
    7
    """

    def __init__(self, dtype="uint16"):
        dtype = np.dtype(dtype)
        if dtype.kind not in {"i", "u"}:
            raise TypeError(f"Label type must be an integer dtype, got {dtype}")
        self.dtype = dtype
        info = np.iinfo(dtype)
        self.min = int(info.min)
        self.max = int(info.max)

    @property
    def name(self) -> str:
        return self.dtype.name

    def validate(self, label) -> int:
        """Return ``label`` as a plain int, or raise InvalidLabel."""
        require(
            isinstance(label, (numbers.Integral, np.integer)) and not isinstance(label, (bool, np.bool_)),
            f"Label {label!r} is not an integer",
            InvalidLabel,
        )
        value = int(label)
        require(
            self.min <= value <= self.max,
            f"Label {value} is outside the {self.name} range [{self.min}, {self.max}]",
            InvalidLabel,
        )
        return value

    def __eq__(self, other):
        if not isinstance(other, LabelType):
            return NotImplemented
        return self.dtype == other.dtype

    def __hash__(self):
        return hash(self.dtype)

    def __repr__(self):
        return f"LabelType({self.name!r})"
