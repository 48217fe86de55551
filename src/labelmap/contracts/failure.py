"""Centralized failure types for label map operations.

Every error a LabelMap raises derives from LabelMapError, so callers can
handle label map failures uniformly. Most kinds also derive from the
builtin exception a Python caller would naturally catch (KeyError for
failed lookups, IndexError for ordinal access, and so on).

Key distinction:
- LabelMapError subclasses: caller passed something the map refuses
- ContractViolation: the map's own invariants are broken (programmer error)
"""


class LabelMapError(RuntimeError):
    """Base class for all errors raised by label map operations."""
    pass


class NullArgument(LabelMapError, ValueError):
    """A required label object reference was None."""
    pass


class BackgroundLabelAccess(LabelMapError):
    """An operation that forbids the background label received it.

    Fetching, inserting or explicitly removing the background label all
    raise this. AddPixel/RemovePixel/SetLine on the background are
    silent no-ops instead.
    """
    pass


class LabelNotFound(LabelMapError, KeyError):
    """No label object is registered under the requested label."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return RuntimeError.__str__(self)


class PositionNotFound(LabelMapError, KeyError):
    """No label object contains the requested position."""

    def __str__(self):
        return RuntimeError.__str__(self)


class IndexOutOfRange(LabelMapError, IndexError):
    """Ordinal access beyond the number of label objects."""
    pass


class ContainerFull(LabelMapError):
    """The label space is exhausted: no unused label can be allocated."""
    pass


class IncompatibleSourceType(LabelMapError, TypeError):
    """A graft source is not a compatible label map."""
    pass


class InvalidLabel(LabelMapError, ValueError):
    """A label value is not an integer inside the label type's range."""
    pass


class ContractViolation(RuntimeError):
    """Raised when a label map invariant is violated.

    This indicates a bug in the code that mutated the map, not bad caller
    input. Direct insertion paths can legitimately produce overlapping
    regions, so disjointness is only checked on request.
    """
    pass
