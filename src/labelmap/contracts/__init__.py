"""Label map contracts: error kinds and fail-fast invariant checks.

Every operation failure raises a LabelMapError subclass; broken internal
invariants raise ContractViolation.
"""

from labelmap.contracts.failure import (
    LabelMapError,
    NullArgument,
    BackgroundLabelAccess,
    LabelNotFound,
    PositionNotFound,
    IndexOutOfRange,
    ContainerFull,
    IncompatibleSourceType,
    InvalidLabel,
    ContractViolation,
)
from labelmap.contracts.base import require
from labelmap.contracts.label_map import assert_label_map_consistent

__all__ = [
    "LabelMapError",
    "NullArgument",
    "BackgroundLabelAccess",
    "LabelNotFound",
    "PositionNotFound",
    "IndexOutOfRange",
    "ContainerFull",
    "IncompatibleSourceType",
    "InvalidLabel",
    "ContractViolation",
    "require",
    "assert_label_map_consistent",
]
