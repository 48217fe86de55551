"""Pydantic configuration schemas for labelmap.

Exports
-------
LabelMapConfig : class
    Label dtype, background value and logging settings
LoggingConfig : class
    Log level and optional log file
"""

from labelmap.schemas.config import LabelMapConfig, LoggingConfig

__all__ = [
    'LabelMapConfig',
    'LoggingConfig',
]
