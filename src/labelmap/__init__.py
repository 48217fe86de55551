"""`labelmap` - sparse labeled-region containers for segmentation results.

A LabelMap stores, per label, a run-length LabelObject describing the
positions carrying that label, instead of a dense per-pixel array.

Subpackages:
- core: LabelType, LabelObject, LabelObjectContainer, LabelMap
- contracts: Error kinds and invariant checks
- schemas: Pydantic configuration
"""

from labelmap.core import LabelMap, LabelObject, LabelObjectLine, LabelObjectContainer, LabelType
from labelmap.schemas import LabelMapConfig, LoggingConfig
from labelmap.logging_setup import setup_logging

__all__ = [
    'LabelMap',
    'LabelObject',
    'LabelObjectLine',
    'LabelObjectContainer',
    'LabelType',
    'LabelMapConfig',
    'LoggingConfig',
    'setup_logging',
]

__version__ = "0.1.0"
