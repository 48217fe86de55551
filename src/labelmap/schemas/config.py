"""LabelMapConfig: construction settings for a LabelMap.

The label dtype and background value are validated together here, so a
LabelMap built from a config never starts with an unrepresentable
background label.
"""

from typing import Literal, Optional

import numpy as np
from pydantic import Field, field_validator, model_validator

from labelmap.schemas.base import LabelMapBaseModel


class LoggingConfig(LabelMapBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = Field(None, description="Also log to this file when set")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Allow lowercase level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class LabelMapConfig(LabelMapBaseModel):
    """Label map construction settings.

    ``logging`` is not read by the map itself; applications pass it to
    ``labelmap.setup_logging`` when they build the map from the same config.

    Examples
    --------
    >>> LabelMapConfig(label_dtype="uint8", background_value=255)
    >>> LabelMapConfig(label_dtype="uint8", background_value=256)  # ValidationError
    >>> config = LabelMapConfig(logging={"level": "DEBUG"})
    >>> setup_logging(config.logging)
    >>> lm = LabelMap.from_config(config)
    """
    label_dtype: Literal[
        "uint8", "uint16", "uint32", "uint64",
        "int8", "int16", "int32", "int64",
    ] = "uint16"
    background_value: int = Field(0, description="Label filling unassigned positions")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("background_value", mode="before")
    @classmethod
    def reject_bool_background(cls, v):
        """Booleans are ints to Python but never labels."""
        if isinstance(v, bool):
            raise ValueError("background_value must be an integer, not bool")
        return v

    @model_validator(mode="after")
    def background_in_dtype_range(self):
        info = np.iinfo(self.label_dtype)
        if not int(info.min) <= self.background_value <= int(info.max):
            raise ValueError(
                f"background_value {self.background_value} outside {self.label_dtype} "
                f"range [{info.min}, {info.max}]"
            )
        return self
