"""Run-length label object: the set of positions carrying one label.

A label object stores its region as a list of lines. A line starts at an
index and covers ``length`` consecutive positions along axis 0; all other
coordinates stay fixed. Positions are integer tuples of any dimension.
"""

import numbers
import operator
import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional

__all__ = ['LabelObject', 'LabelObjectLine', 'as_index']


def as_index(position) -> tuple:
    """Normalize a position to an integer tuple (a bare int is 1-D).

    Coordinates must be integers; floats raise TypeError instead of being
    truncated.
    """
    if isinstance(position, numbers.Integral):
        return (operator.index(position),)
    return tuple(operator.index(c) for c in position)


@dataclass
class LabelObjectLine:
    """A run of ``length`` positions along axis 0 starting at ``index``."""
    index: tuple
    length: int

    @property
    def row(self) -> tuple:
        """Coordinates that stay fixed along the line."""
        return self.index[1:]

    @property
    def start(self) -> int:
        return self.index[0]

    @property
    def end(self) -> int:
        """Last covered axis-0 coordinate (inclusive)."""
        return self.index[0] + self.length - 1

    def has_index(self, idx: tuple) -> bool:
        return (
            len(idx) == len(self.index)
            and idx[1:] == self.row
            and self.start <= idx[0] <= self.end
        )

    def is_next_index(self, idx: tuple) -> bool:
        """True if ``idx`` directly follows the end of this line."""
        return len(idx) == len(self.index) and idx[1:] == self.row and idx[0] == self.end + 1

    def __iter__(self):
        for x in range(self.start, self.end + 1):
            yield (x,) + self.row

    def __repr__(self):
        return f"LabelObjectLine(index={self.index}, length={self.length})"


class LabelObject:
    """Owner of the positions belonging to one label.

    Parameters
    ----------
    label : int, optional
        Label value. The owning LabelMap keys the object by it; objects
        pushed with ``push_label_object`` get their label assigned.

    Examples
    --------
    >>> obj = LabelObject(label=3)
    >>> obj.add_line((0, 0), 5)
    >>> obj.has_index((4, 0))
    True
    >>> obj.remove_index((2, 0))
    True
    >>> len(obj.lines)
    2
    """

    def __init__(self, label: int = 0):
        self.label = label
        self._lines: List[LabelObjectLine] = []

    @property
    def lines(self) -> List[LabelObjectLine]:
        return list(self._lines)

    @property
    def number_of_lines(self) -> int:
        return len(self._lines)

    @property
    def size(self) -> int:
        """Number of distinct positions in the region."""
        return sum(line.length for line in self._merged_lines())

    def has_index(self, position) -> bool:
        idx = as_index(position)
        return any(line.has_index(idx) for line in self._lines)

    def add_index(self, position) -> None:
        idx = as_index(position)
        if self.has_index(idx):
            return
        if self._lines and self._lines[-1].is_next_index(idx):
            self._lines[-1].length += 1
        else:
            self._lines.append(LabelObjectLine(idx, 1))

    def add_line(self, position, length: int) -> None:
        length = operator.index(length)
        if length < 1:
            raise ValueError(f"Line length must be >= 1, got {length}")
        self._lines.append(LabelObjectLine(as_index(position), length))

    def remove_index(self, position) -> bool:
        """Remove a position; return True iff it was present.

        Lines may overlap after ``add_line``, so every line covering the
        position is split.
        """
        idx = as_index(position)
        removed = False
        lines = []
        for line in self._lines:
            if not line.has_index(idx):
                lines.append(line)
                continue
            removed = True
            x = idx[0]
            if x > line.start:
                lines.append(LabelObjectLine(line.index, x - line.start))
            if x < line.end:
                lines.append(LabelObjectLine((x + 1,) + line.row, line.end - x))
        self._lines = lines
        return removed

    def is_empty(self) -> bool:
        return not self._lines

    def clear(self) -> None:
        self._lines = []

    def optimize(self) -> None:
        """Sort lines and merge the overlapping or adjacent ones."""
        self._lines = self._merged_lines()

    def _merged_lines(self) -> List[LabelObjectLine]:
        # highest dimension varies slowest, axis 0 fastest
        ordered = sorted(
            self._lines,
            key=lambda line: (len(line.index), line.row[::-1], line.start),
        )
        merged: List[LabelObjectLine] = []
        current: Optional[LabelObjectLine] = None
        for line in ordered:
            if (
                current is not None
                and len(line.index) == len(current.index)
                and line.row == current.row
                and line.start <= current.end + 1
            ):
                current.length = max(current.end, line.end) - current.start + 1
                continue
            current = LabelObjectLine(line.index, line.length)
            merged.append(current)
        return merged

    def __iter__(self) -> Iterator[tuple]:
        """Iterate over the distinct positions in ascending order."""
        for line in self._merged_lines():
            yield from line

    def print_to(self, stream=None) -> None:
        stream = stream if stream is not None else sys.stdout
        stream.write(f"{type(self).__name__}\n")
        stream.write(f"  Label: {self.label}\n")
        stream.write(f"  NumberOfLines: {len(self._lines)}\n")
        for line in self._lines:
            stream.write(f"    {line.index} length={line.length}\n")

    def __repr__(self):
        return f"LabelObject(label={self.label}, lines={len(self._lines)})"
